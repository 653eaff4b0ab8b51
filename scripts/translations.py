"""
Manage the localization strings of the client application.

Prints translation completeness, downloads translations from and uploads the base
locale to the Twosky translation service, and lists labels the sources never use.
"""
import os
import sys

# Add the parent directory to the sys path so that modules can be found
base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(base_path)

from scripts.translations_common import CreateCommandParser, CreateDownloadParser, InitLogger, usage
from PyTranslations.DownloadCoordinator import DownloadCoordinator
from PyTranslations.LocaleUploader import LocaleUploader
from PyTranslations.SummaryReporter import SummaryReporter
from PyTranslations.TwoskyClient import TwoskyClient
from PyTranslations.TwoskyConfig import LoadTwoskyConfig, TwoskyConfig
from PyTranslations.UnusedLabelScanner import UnusedLabelScanner

commands = ['summary', 'download', 'unused', 'upload']

def main(argv : list[str]|None = None):
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        usage("need a command")

    command = argv[0]
    if command == 'help':
        usage()

    if command not in commands:
        usage("unknown command")

    parser = CreateDownloadParser() if command == 'download' else CreateCommandParser(command)
    args = parser.parse_args(argv[1:])

    if command == 'download' and args.count < 1:
        usage("count must be positive")

    InitLogger("twosky-translations", args.debug)

    try:
        config : TwoskyConfig = LoadTwoskyConfig()

        if command == 'summary':
            for line in SummaryReporter(config).FormatSummary():
                print(line)

        elif command == 'download':
            with TwoskyClient() as client:
                DownloadCoordinator(config, client).DownloadAll(args.count)

        elif command == 'unused':
            for label in UnusedLabelScanner(config).FindUnusedLabels():
                print(label)

        elif command == 'upload':
            with TwoskyClient() as client:
                LocaleUploader(config, client).Upload()

    except Exception as e:
        print("Error:", e)
        raise

if __name__ == "__main__":
    main()
