import logging
import os

from PyTranslations.LocaleStore import LocaleStore
from PyTranslations.TwoskyConfig import TwoskyConfig

# Labels composed at runtime, so they never appear literally in the sources
known_used_labels = [
    "blocking_mode_refused",
    "blocking_mode_nxdomain",
    "blocking_mode_custom_ip",
]

source_extensions = ['.js', '.json', '.jsx', '.ts', '.tsx']

class UnusedLabelScanner:
    """
    Finds labels of the base locale that are not referenced anywhere in the source tree.

    A label counts as used if it occurs as a plain substring of any source file,
    so a label contained in a longer identifier is reported as used.
    """
    def __init__(self, config : TwoskyConfig, store : LocaleStore|None = None, known_used : list[str]|None = None, extensions : list[str]|None = None):
        self.config = config
        self.store = store or LocaleStore(config.locales_dir)
        self.known_used = known_used if known_used is not None else known_used_labels
        self.extensions = extensions if extensions is not None else source_extensions

    def ListSourceFiles(self) -> list[str]:
        """
        Walk the source tree and return the files that may reference labels, skipping the locales directory
        """
        locales_dir = os.path.normpath(self.config.locales_dir)
        files = []

        def _on_error(error : OSError):
            logging.info(f"accessing a path {error.filename!r}: {error}")

        for dirpath, dirnames, filenames in os.walk(self.config.src_dir, onerror=_on_error):
            dirnames[:] = [ name for name in dirnames if not os.path.normpath(os.path.join(dirpath, name)).startswith(locales_dir) ]
            dirnames.sort()

            if os.path.normpath(dirpath).startswith(locales_dir):
                continue

            for filename in sorted(filenames):
                if os.path.splitext(filename)[1] in self.extensions:
                    files.append(os.path.join(dirpath, filename))

        return files

    def FindUnusedLabels(self) -> list[str]:
        """
        Return the unused labels in lexicographic order
        """
        locale = self.store.ReadLocale(self.config.base_language)
        candidates = set(locale.keys())
        candidates.difference_update(self.known_used)

        files = self.ListSourceFiles()
        logging.debug(f"Scanning {len(files)} files for {len(candidates)} labels")

        for path in files:
            if not candidates:
                break

            try:
                with open(path, 'rb') as f:
                    content = f.read()
            except OSError as e:
                logging.error(f"reading {path!r}: {e}")
                continue

            found = { label for label in candidates if label.encode('utf-8') in content }
            candidates.difference_update(found)

        return sorted(candidates)
