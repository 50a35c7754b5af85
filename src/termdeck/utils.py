"""Provide general utility functions that would not fit in other modules."""

from pathlib import Path
from typing import Any

from .exceptions import ReadError


def read_text(path: Path | str | None) -> str:
    """Read the whole content of a text file.

    Args:
        path: Path of the file to read.

    Raises:
        ReadError: Raised if no path is given or the file cannot be read.

    Returns:
        The file content, decoded as UTF-8.
    """
    if path is None:
        msg = "the location for the slides must be given"
        raise ReadError(msg)
    try:
        return Path(path).read_text(encoding="utf8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"cannot read {path}: {e.strerror if isinstance(e, OSError) else e}"
        raise ReadError(msg) from e


def load_yaml(path: Path) -> Any:
    from yaml import YAMLError, safe_load

    from .exceptions import SettingsError

    try:
        return safe_load(path.read_text(encoding="utf8"))
    except YAMLError as e:
        msg = f"invalid YAML in {path}:\n{e}"
        raise SettingsError(msg) from e
