class TranslationsError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.error = error
        self.message = message

    def __str__(self) -> str:
        if self.error and self.message:
            return f"{self.message}: {self.error}"
        elif self.error:
            return str(self.error)
        elif self.message:
            return self.message
        return super().__str__()

class ConfigError(TranslationsError):
    def __init__(self, message : str, error : Exception|None = None):
        super().__init__(message, error)

class LocaleError(TranslationsError):
    def __init__(self, message : str, path : str, error : Exception|None = None):
        super().__init__(message, error)
        self.path = path

class DecodeError(LocaleError):
    """ The locale file is not a JSON object of strings """
    def __init__(self, path : str, error : Exception|None = None, message : str|None = None):
        super().__init__(message or f"Unmarshalling {path!r}", path, error)

class NotFoundError(LocaleError):
    def __init__(self, path : str, error : Exception|None = None):
        super().__init__(f"No such file {path!r}", path, error)

class WriteError(LocaleError):
    def __init__(self, path : str, error : Exception|None = None):
        super().__init__(f"Writing file {path!r}", path, error)

class ServiceError(TranslationsError):
    def __init__(self, message : str, url : str, error : Exception|None = None):
        super().__init__(message, error)
        self.url = url

class TransportError(ServiceError):
    """ Network level failure talking to the translation service """
    def __init__(self, url : str, error : Exception|None = None):
        super().__init__(f"Requesting {url!r}", url, error)

class HTTPStatusError(ServiceError):
    def __init__(self, url : str, status_code : int, reason : str|None = None):
        super().__init__(f"url: {url!r}; status code: {status_code} {reason or ''}".rstrip(), url)
        self.status_code = status_code

class SizeLimitError(ServiceError):
    """ Response body exceeded the read limit """
    def __init__(self, url : str, limit : int):
        super().__init__(f"Response from {url!r} exceeds {limit} bytes", url)
        self.limit = limit
