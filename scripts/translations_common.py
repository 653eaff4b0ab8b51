import os
import logging
import sys

from argparse import ArgumentParser
from typing import NoReturn

from PyTranslations.Helpers.Resources import config_dir

usage_text = """Usage: twosky-translations <command> [<args>]
Commands:
  help
        Print usage.
  summary
        Print summary.
  download [-n <count>]
        Download translations. count is a number of concurrent downloads.
  unused
        Print unused strings.
  upload
        Upload translations."""

# Loggers of the HTTP stack announce every request at INFO
quiet_loggers = ['httpx', 'httpcore']

def InitLogger(logfilename: str, debug: bool = False, log_dir: str = config_dir) -> str|None:
    """
    Log to stderr at the requested level, keeping stdout for command output,
    and keep a full DEBUG log of the run in the log directory.

    Returns the path of the log file, or None if it could not be created.
    """
    if debug:
        console_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
        console_level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger('')
    root.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root.addHandler(console_handler)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)

    log_path = os.path.join(log_dir, f"{logfilename}.log")
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s %(threadName)s %(levelname)s: %(message)s'))
        root.addHandler(file_handler)
    except OSError as e:
        logging.warning(f"Unable to create log file at {log_path}: {e}")
        return None

    logging.debug(f"Logging to {log_path}")
    return log_path

def usage(message : str = "") -> NoReturn:
    """
    Print usage. With a message, print it first and exit with status 1, otherwise exit with status 0.
    """
    if message:
        print(f"{message}\n{usage_text}")
        raise SystemExit(1)

    print(usage_text)
    raise SystemExit(0)

class CommandArgumentParser(ArgumentParser):
    """
    Reports argument errors as a usage error for the command
    """
    def error(self, message : str) -> NoReturn:
        logging.debug(f"{self.prog}: {message}")
        usage(f"{self.prog} command error")

def CreateDownloadParser() -> ArgumentParser:
    parser = CommandArgumentParser(prog="download", add_help=False)
    parser.add_argument('-n', dest='count', type=int, default=1, help="Number of concurrent downloads")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def CreateCommandParser(command : str) -> ArgumentParser:
    parser = CommandArgumentParser(prog=command, add_help=False)
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser
