import json
import logging
import os

from PyTranslations.TranslationsError import DecodeError, NotFoundError, TranslationsError, WriteError

locale_file_mode = 0o664

class LocaleStore:
    """
    Flat JSON files mapping text labels to translated strings, one per language
    """
    def __init__(self, locales_dir : str):
        self.locales_dir = locales_dir

    def GetLocalePath(self, language : str) -> str:
        return os.path.join(self.locales_dir, f"{language}.json")

    def ReadLocaleData(self, language : str) -> bytes:
        """
        Read the raw contents of the locale file for a language
        """
        path = self.GetLocalePath(language)
        try:
            with open(path, 'rb') as f:
                return f.read()
        except FileNotFoundError as e:
            raise NotFoundError(path, error=e)
        except OSError as e:
            raise TranslationsError(f"Reading {path!r}", error=e)

    def ReadLocale(self, language : str) -> dict[str, str]:
        """
        Load the label -> translation map for a language
        """
        path = self.GetLocalePath(language)
        data = self.ReadLocaleData(language)

        try:
            locale = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(path, error=e)

        if not isinstance(locale, dict):
            raise DecodeError(path, message=f"{path!r} is not a JSON object")

        for label, value in locale.items():
            if not isinstance(value, str):
                raise DecodeError(path, message=f"{path!r}: value of {label!r} is not a string")

        return locale

    def WriteLocale(self, language : str, data : bytes) -> str:
        """
        Replace the locale file for a language with the raw payload, returns the path written
        """
        path = self.GetLocalePath(language)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, locale_file_mode)
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise WriteError(path, error=e)

        logging.debug(f"Wrote {len(data)} bytes to {path}")
        return path
