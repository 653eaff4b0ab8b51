import appdirs # type: ignore

config_dir : str = appdirs.user_config_dir("TwoskyTranslations", "AdGuard", roaming=True)
