from collections.abc import Iterable


class TermdeckError(Exception):
    pass


class ReadError(TermdeckError):
    pass


class SettingsError(TermdeckError):
    pass


class ConfigurationError(TermdeckError):
    pass


class MetadataParseError(ConfigurationError):
    pass


class UnknownConfigurationKeyError(ConfigurationError):
    def __init__(self, allowed_keys: Iterable[str], unknown_keys: Iterable[str]):
        unknown = list(unknown_keys)
        noun = "key" if len(unknown) == 1 else "keys"
        super().__init__(
            f"unknown '{', '.join(unknown)}' configuration {noun}\n"
            f"Available keys are: {', '.join(allowed_keys)}"
        )
        self.unknown_keys = tuple(unknown)
