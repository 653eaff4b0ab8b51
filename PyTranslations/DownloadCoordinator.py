import logging
import queue
import threading
import httpx

from PyTranslations.LocaleStore import LocaleStore
from PyTranslations.TranslationsError import ConfigError, TranslationsError
from PyTranslations.TwoskyClient import TwoskyClient
from PyTranslations.TwoskyConfig import TwoskyConfig

class DownloadCoordinator:
    """
    Downloads the translations of the base file for every configured language with a fixed pool of worker threads.

    Failures are logged per language and do not stop the other downloads.
    """
    def __init__(self, config : TwoskyConfig, client : TwoskyClient, store : LocaleStore|None = None):
        self.config = config
        self.client = client
        self.store = store or LocaleStore(config.locales_dir)

    def BuildDownloadUrls(self) -> list[httpx.URL]:
        return [
            TwoskyClient.BuildTranslationUrl(self.config.uri, 'download', self.config.base_file, self.config.project_id, language)
            for language in self.config.languages
            ]

    def DownloadAll(self, num_workers : int = 1) -> None:
        """
        Download every language and wait for all workers to finish
        """
        if num_workers < 1:
            raise ConfigError("count must be positive")

        urls = self.BuildDownloadUrls()

        # Every url is queued before any worker starts, so an empty queue means there is no more work
        tasks : queue.Queue[httpx.URL] = queue.Queue(maxsize=len(urls))
        for url in urls:
            tasks.put_nowait(url)

        logging.info(f"Downloading {len(urls)} translations with {num_workers} workers")

        workers = [ threading.Thread(target=self._download_worker, args=(tasks,), name=f"download-{i}", daemon=True) for i in range(num_workers) ]
        for worker in workers:
            worker.start()

        for worker in workers:
            worker.join()

    def _download_worker(self, tasks : queue.Queue) -> None:
        while True:
            try:
                url : httpx.URL = tasks.get_nowait()
            except queue.Empty:
                return

            try:
                self._download(url)
            except TranslationsError as e:
                logging.error(f"download worker: {e}")
            except Exception as e:
                logging.error(f"download worker: unexpected error downloading {str(url)!r}: {e!r}")
            finally:
                tasks.task_done()

    def _download(self, url : httpx.URL) -> None:
        data = self.client.Fetch(url)

        language = url.params.get('language')
        if not language:
            raise TranslationsError(f"No language in {str(url)!r}")

        path = self.store.WriteLocale(language, data)
        print(path, flush=True)
