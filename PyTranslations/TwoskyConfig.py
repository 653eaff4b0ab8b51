from __future__ import annotations
from collections.abc import Mapping
import json
import logging
import os
from typing import Any
import dotenv
import httpx

from PyTranslations.TranslationsError import ConfigError

twosky_conf_file = "./.twosky.json"
default_locales_dir = "./client/src/__locales"
default_src_dir = "./client/src"
default_base_file = "en.json"
default_base_locale = "en"
default_project_id = "home"
default_twosky_uri = "https://twosky.int.agrd.dev/api/v1"

# Load environment variables from .env file
dotenv.load_dotenv()

def env_str(key : str, default : str|None = None) -> str|None:
    value = os.getenv(key, default)
    if not value:
        return default
    return str(value)

class TwoskyConfig:
    """
    Settings for a single run of the translations tool.

    Loaded once at startup and passed to each component, never changed afterwards.
    """
    def __init__(self,
                 languages : Mapping[str, str],
                 base_locale : str|None = None,
                 project_id : str|None = None,
                 uri : str|None = None,
                 localizable_files : list[str]|None = None,
                 locales_dir : str = default_locales_dir,
                 src_dir : str = default_src_dir,
                 base_file : str = default_base_file,
                 upload_language : str|None = None):
        if not languages:
            raise ConfigError("No languages configured")

        for code, name in languages.items():
            if not code:
                raise ConfigError("Language code is empty")
            if not name:
                raise ConfigError(f"Language {code!r} is empty")

        self.languages : dict[str, str] = dict(languages)
        self.base_locale : str = base_locale or default_base_locale
        self.project_id : str = project_id or default_project_id
        self.localizable_files : list[str] = list(localizable_files or [])
        self.locales_dir : str = locales_dir
        self.src_dir : str = src_dir
        self.base_file : str = base_file
        self.upload_language : str = upload_language or self.base_locale

        uri = uri or default_twosky_uri
        try:
            self.uri : httpx.URL = httpx.URL(uri)
        except (httpx.InvalidURL, TypeError) as e:
            raise ConfigError(f"Invalid service URI {uri!r}", error=e)

        if not self.uri.scheme or not self.uri.host:
            raise ConfigError(f"Invalid service URI {uri!r}")

    @property
    def base_language(self) -> str:
        """ The language code whose file defines the canonical label set """
        return os.path.splitext(self.base_file)[0]

    def __str__(self) -> str:
        return f"{self.project_id} @ {self.uri} ({len(self.languages)} languages)"

def ParseTwoskyConfig(content : str|bytes, path : str = twosky_conf_file, **overrides : Any) -> TwoskyConfig:
    """
    Build the configuration from the contents of a .twosky.json file.

    The file holds an array of configuration objects, only the first one is used.
    Environment variables take precedence over the file for the service URI, project id and upload language.
    """
    try:
        entries = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Unmarshalling {path!r}", error=e)

    if not isinstance(entries, list):
        raise ConfigError(f"{path!r} is not an array")

    if not entries:
        raise ConfigError(f"{path!r} is empty")

    conf = entries[0]
    if not isinstance(conf, dict):
        raise ConfigError(f"{path!r} does not contain a configuration object")

    languages = conf.get('languages')
    if not isinstance(languages, dict):
        raise ConfigError(f"{path!r} has no language list")

    settings : dict[str, Any] = {
        'base_locale': conf.get('base_locale'),
        'localizable_files': conf.get('localizable_files'),
        'project_id': env_str('TWOSKY_PROJECT_ID', default_project_id),
        'uri': env_str('TWOSKY_URI', default_twosky_uri),
        'upload_language': env_str('UPLOAD_LANGUAGE'),
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})

    config = TwoskyConfig(languages, **settings)
    logging.debug(f"Loaded configuration from {path}: {config}")
    return config

def LoadTwoskyConfig(path : str = twosky_conf_file, **overrides : Any) -> TwoskyConfig:
    """ Read and validate the configuration file """
    try:
        with open(path, 'rb') as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Reading {path!r}", error=e)

    return ParseTwoskyConfig(content, path, **overrides)
