"""Line scanner splitting a document into separator and plain line tokens."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from re import compile as re_compile

# Only \n and \r\n end a line
_LINE_BREAK = re_compile(r"\r?\n")
# Three or more dashes, optionally followed by whitespace and inline configuration
_SEPARATOR = re_compile(r"^-{3,}(?:[ \t]+(?P<config>.*?))?[ \t]*$")


class TokenKind(Enum):
    SEPARATOR = auto()
    LINE = auto()
    END = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""
    """Line content for `LINE` tokens, inline configuration for `SEPARATOR` ones."""

    line_number: int = 0


def scan(content: str) -> Iterator[Token]:
    """Yield one token per line of `content`, followed by a final `END` token.

    Args:
        content: Document to scan

    Yields:
        `SEPARATOR` tokens for slide separators (their text is whatever follows \
        the dashes), `LINE` tokens for every other line, then `END`.
    """
    lines = _LINE_BREAK.split(content)
    if lines[-1] == "":
        lines.pop()
    line_number = 0
    for line_number, line in enumerate(lines, start=1):
        if match := _SEPARATOR.match(line):
            yield Token(TokenKind.SEPARATOR, match["config"] or "", line_number)
        else:
            yield Token(TokenKind.LINE, line, line_number)
    yield Token(TokenKind.END, "", line_number + 1)
