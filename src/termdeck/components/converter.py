"""Markdown to terminal output conversion, based on rich."""

from collections.abc import Mapping
from io import StringIO
from re import compile as re_compile
from typing import Any

from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.markdown import Markdown
from rich.theme import Theme

from ..exceptions import ConfigurationError
from .protocols import ConverterProtocol

_RESET = "\x1b[0m"
# Padding added by rich at the end of lines, possibly wrapped in style codes
_TRAILING_PADDING = re_compile(r"(?:[ \t]|\x1b\[[0-9;]*m)+$")

_CORNERS = "┏┓┗┛┌┐└┘╭╮╰╯┳┻┣┫╋┬┴├┤┼"

UNICODE_SYMBOLS = {
    "bullet": "•",
    "corner": _CORNERS,
    "ellipsis": "…",
    "heavy": "━",
    "hr": "─",
    "quote": "▌",
    "vertical": "│┃",
}
"""Glyphs used by rich, grouped by symbol name."""

ASCII_SYMBOLS = {
    "bullet": "*",
    "corner": "+",
    "ellipsis": "...",
    "heavy": "=",
    "hr": "-",
    "quote": "|",
    "vertical": "|",
}

_SYMBOL_SETS = {"unicode": {}, "ascii": ASCII_SYMBOLS}

_HEADINGS = tuple(f"markdown.h{level}" for level in range(1, 7))

_THEME_ALIASES: dict[str, tuple[str, ...]] = {
    "bullet": ("markdown.item.bullet",),
    "code": ("markdown.code", "markdown.code_block"),
    "em": ("markdown.em",),
    "header": _HEADINGS,
    "heading": _HEADINGS,
    "hr": ("markdown.hr",),
    "link": ("markdown.link", "markdown.link_url"),
    "list": ("markdown.item.bullet", "markdown.item.number"),
    "quote": ("markdown.block_quote",),
    "strong": ("markdown.strong",),
}


def symbols_table(symbols: str | Mapping[str, Any] | None) -> dict[int, str]:
    """Build a translation table replacing rich glyphs with the chosen symbols.

    Args:
        symbols: Either the name of a base symbol set (`unicode` or `ascii`) or a \
            mapping with an optional `base` name and an `override` mapping of \
            symbol names to replacement strings

    Raises:
        ConfigurationError: Raised if the base or an overridden symbol is unknown.

    Returns:
        A table usable with `str.translate`.
    """
    base, override = "unicode", {}
    if isinstance(symbols, str):
        base = symbols
    elif isinstance(symbols, Mapping):
        base = symbols.get("base", "unicode")
        override = symbols.get("override") or {}
        if not isinstance(override, Mapping):
            msg = f"symbols override needs to be a hash, got: {override!r}"
            raise ConfigurationError(msg)
    if base not in _SYMBOL_SETS:
        msg = (
            f"unknown '{base}' symbols. "
            f"Valid value is: {', '.join(_SYMBOL_SETS)}."
        )
        raise ConfigurationError(msg)
    unknown = [name for name in override if name not in UNICODE_SYMBOLS]
    if unknown:
        msg = (
            f"unknown '{', '.join(map(str, unknown))}' symbol "
            f"{'name' if len(unknown) == 1 else 'names'}. "
            f"Valid names are: {', '.join(UNICODE_SYMBOLS)}."
        )
        raise ConfigurationError(msg)
    replacements = {**_SYMBOL_SETS[base], **override}
    return str.maketrans(
        {
            glyph: str(replacements[name])
            for name, glyphs in UNICODE_SYMBOLS.items()
            if name in replacements
            for glyph in glyphs
        }
    )


def build_theme(theme: Mapping[str, Any] | None) -> Theme | None:
    if not theme:
        return None
    styles = {}
    for name, value in theme.items():
        style = " ".join(map(str, value)) if isinstance(value, list) else value
        if not isinstance(style, str):
            msg = f"invalid style for '{name}' in theme: {value!r}"
            raise ConfigurationError(msg)
        for style_name in _THEME_ALIASES.get(str(name), (str(name),)):
            styles[style_name] = style
    try:
        return Theme(styles)
    except StyleSyntaxError as e:
        msg = f"invalid theme: {e}"
        raise ConfigurationError(msg) from e


class RichConverter(ConverterProtocol):
    """Render Markdown with rich into a string.

    Lines are stripped of the padding rich adds to fill the whole width, so that \
    the renderer can measure and align them.
    """

    def __init__(self, color: bool) -> None:
        self._color = color

    def convert(
        self,
        content: str,
        *,
        width: int,
        symbols: str | Mapping[str, Any] | None = None,
        theme: Mapping[str, Any] | None = None,
    ) -> str:
        console = Console(
            file=StringIO(),
            width=max(width, 1),
            force_terminal=self._color,
            color_system="256" if self._color else None,
            theme=build_theme(theme),
            highlight=False,
            emoji=False,
            legacy_windows=False,
        )
        console.print(Markdown(content))
        output = console.file.getvalue()  # type: ignore[attr-defined]
        lines = [
            self._strip_padding(line)
            for line in output.translate(symbols_table(symbols)).splitlines()
        ]
        return "\n".join(lines) + "\n" if lines else ""

    def _strip_padding(self, line: str) -> str:
        stripped = _TRAILING_PADDING.sub("", line)
        if "\x1b[" in stripped:
            return stripped + _RESET
        return stripped
