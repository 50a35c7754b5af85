from collections.abc import Mapping
from logging import getLogger
from typing import Any

from yaml import YAMLError, safe_load

from ..exceptions import MetadataParseError

_logger = getLogger(__name__)


def parse_metadata(content: str, line_number: int | None = None) -> dict[str, Any]:
    """Parse a YAML configuration block into a mapping with normalized keys.

    Keys written in the `:align: center` form have their leading colon removed.

    Args:
        content: YAML text, either a whole block or an inline flow mapping
        line_number: Line of the document the block starts on, used in error \
            messages

    Raises:
        MetadataParseError: Raised if the text is not valid YAML or is not a \
            mapping.

    Returns:
        The parsed configuration, empty for blank content.
    """
    if not content.strip():
        return {}
    location = "" if line_number is None else f" on line {line_number}"
    try:
        loaded = safe_load(content)
    except YAMLError as e:
        msg = f"invalid configuration{location}: {content.strip()!r}\n{e}"
        raise MetadataParseError(msg) from e
    if loaded is None:
        return {}
    if not isinstance(loaded, Mapping):
        msg = (
            f"invalid configuration{location}: {content.strip()!r}\n"
            "The configuration needs to be a hash of keys and values."
        )
        raise MetadataParseError(msg)
    _logger.debug("Parsed configuration %s", loaded)
    return _normalize_keys(loaded)


def _normalize_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {
            _normalize_key(key): _normalize_keys(val) for key, val in value.items()
        }
    if isinstance(value, list):
        return [_normalize_keys(val) for val in value]
    return value


def _normalize_key(key: Any) -> Any:
    if isinstance(key, str):
        return key.removeprefix(":")
    return key
