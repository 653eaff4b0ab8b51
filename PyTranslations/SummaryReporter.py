from PyTranslations.LocaleStore import LocaleStore
from PyTranslations.TranslationsError import DecodeError
from PyTranslations.TwoskyConfig import TwoskyConfig

class SummaryReporter:
    """
    Reports how complete each translation is compared to the base locale.

    Completeness is a plain count ratio, labels are not matched against the base set.
    """
    def __init__(self, config : TwoskyConfig, store : LocaleStore|None = None):
        self.config = config
        self.store = store or LocaleStore(config.locales_dir)

    def GetSummary(self) -> list[tuple[str, float]]:
        base_language = self.config.base_language
        base = self.store.ReadLocale(base_language)
        if not base:
            raise DecodeError(self.store.GetLocalePath(base_language), message="Base locale has no labels")

        summary = []
        for language in sorted(self.config.languages):
            if language == base_language:
                continue

            locale = self.store.ReadLocale(language)
            summary.append((language, len(locale) * 100 / len(base)))

        return summary

    def FormatSummary(self) -> list[str]:
        return [ f"{language}\t {percent:6.2f} %" for language, percent in self.GetSummary() ]
