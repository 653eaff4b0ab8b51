import logging
import time
import httpx

from PyTranslations.TranslationsError import HTTPStatusError, SizeLimitError, TransportError

default_timeout = 10.0
read_limit = 1 * 1024 * 1024

class TwoskyClient:
    """
    Talks to the Twosky translation service for one language at a time.

    The underlying httpx client is shared, so a single TwoskyClient can be used from several download workers.
    """
    def __init__(self, timeout : float = default_timeout, limit : int = read_limit, transport : httpx.BaseTransport|None = None):
        self.timeout = timeout
        self.limit = limit
        self.client = httpx.Client(timeout=timeout, follow_redirects=True, transport=transport)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.Close()

    def Close(self) -> None:
        self.client.close()

    @staticmethod
    def BuildTranslationUrl(base : httpx.URL|str, action : str, file_name : str, project_id : str, language : str) -> httpx.URL:
        """
        Compose the request URL for an action on a translation file.

        Query parameters already present on the base URL are kept, apart from the four managed here.
        """
        url = httpx.URL(base)
        if action:
            url = url.copy_with(path=url.path.rstrip('/') + '/' + action.strip('/'))

        url = url.copy_set_param('format', 'json')
        url = url.copy_set_param('filename', file_name)
        url = url.copy_set_param('project', project_id)
        url = url.copy_set_param('language', language)
        return url

    def Fetch(self, url : httpx.URL|str) -> bytes:
        """
        GET the url and return the response body.

        Raises SizeLimitError rather than truncating a body larger than the limit.
        The timeout covers the whole exchange, including reading the body.
        """
        url = str(url)
        logging.debug(f"GET {url}")
        deadline = time.monotonic() + self.timeout
        try:
            with self.client.stream('GET', url) as response:
                if response.status_code != httpx.codes.OK:
                    raise HTTPStatusError(url, response.status_code, response.reason_phrase)

                data = bytearray()
                for chunk in response.iter_bytes():
                    if time.monotonic() > deadline:
                        raise TransportError(url, error=TimeoutError(f"No complete response within {self.timeout} seconds"))

                    data.extend(chunk)
                    if len(data) > self.limit:
                        raise SizeLimitError(url, self.limit)

                return bytes(data)

        except httpx.RequestError as e:
            raise TransportError(url, error=e)

    def Post(self, url : httpx.URL|str, payload : bytes) -> None:
        """
        POST a JSON payload to the url
        """
        url = str(url)
        logging.debug(f"POST {url} ({len(payload)} bytes)")
        try:
            response = self.client.post(url, content=payload, headers={'Content-Type': 'application/json'})
        except httpx.RequestError as e:
            raise TransportError(url, error=e)

        if response.status_code != httpx.codes.OK:
            raise HTTPStatusError(url, response.status_code, response.reason_phrase)
