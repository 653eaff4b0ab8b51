import logging

from PyTranslations.LocaleStore import LocaleStore
from PyTranslations.TwoskyClient import TwoskyClient
from PyTranslations.TwoskyConfig import TwoskyConfig

class LocaleUploader:
    """
    Uploads the base locale file to the translation service
    """
    def __init__(self, config : TwoskyConfig, client : TwoskyClient, store : LocaleStore|None = None):
        self.config = config
        self.client = client
        self.store = store or LocaleStore(config.locales_dir)

    def Upload(self, language : str|None = None) -> None:
        """
        Send the base file as the source for `language` (the configured upload language by default)
        """
        language = language or self.config.upload_language
        data = self.store.ReadLocaleData(self.config.base_language)

        url = TwoskyClient.BuildTranslationUrl(self.config.uri, 'upload', self.config.base_file, self.config.project_id, language)

        logging.info(f"Uploading {self.config.base_file} as {language} to project {self.config.project_id}")
        self.client.Post(url, data)
