from dataclasses import dataclass, field
from logging import getLogger
from re import compile as re_compile

from ..models.deck import ParsedDeck, ParsedSlide
from .metadata import parse_metadata
from .scanner import TokenKind, scan

_logger = getLogger(__name__)

# A "key: value" line, with an optional leading colon for the ":key: value" form.
# Markdown headings such as "# Agenda: today" are content.
_METADATA_LINE = re_compile(r"^(?!\s*#)\s*:?[^:]+:[^:]+$")


@dataclass
class _Block:
    config: str
    line_number: int = 1
    """Line of the opening separator, 1 for the first block."""

    lines: list[str] = field(default_factory=list)

    @property
    def blank(self) -> bool:
        return all(not line.strip() for line in self.lines)

    def trimmed(self) -> "_Block":
        start, end = 0, len(self.lines)
        while start < end and not self.lines[start].strip():
            start += 1
        while end > start and not self.lines[end - 1].strip():
            end -= 1
        return _Block(self.config, self.line_number, self.lines[start:end])

    @property
    def content(self) -> str:
        return "\n".join(self.lines)


class Parser:
    """Split a document into its global configuration and its slides.

    Slides are separated by lines of three or more dashes. Text following the \
    dashes on a separator line is the configuration of the slide it opens. The \
    first block of the document is the global configuration when its first line \
    looks like `key: value`.
    """

    def parse(self, content: str) -> ParsedDeck:
        blocks = [block for block in self._split(content) if not block.blank]
        if not blocks:
            return ParsedDeck()
        blocks[0] = blocks[0].trimmed()
        blocks[-1] = blocks[-1].trimmed()

        config = {}
        if self._metadata_given(blocks[0]):
            config = parse_metadata(blocks[0].content, blocks[0].line_number)
            blocks = blocks[1:]
            if blocks:
                blocks[0] = blocks[0].trimmed()

        slides = [
            ParsedSlide(
                content=block.content,
                config=parse_metadata(block.config, block.line_number),
            )
            for block in blocks
        ]
        _logger.debug(
            "Parsed %d slide(s), global configuration keys: %s",
            len(slides),
            ", ".join(config) or "none",
        )
        return ParsedDeck(config=config, slides=slides)

    def _split(self, content: str) -> list[_Block]:
        blocks = []
        current = _Block(config="")
        for token in scan(content):
            match token.kind:
                case TokenKind.SEPARATOR:
                    blocks.append(current)
                    current = _Block(config=token.text, line_number=token.line_number)
                case TokenKind.LINE:
                    current.lines.append(token.text)
                case TokenKind.END:
                    blocks.append(current)
        return blocks

    def _metadata_given(self, block: _Block) -> bool:
        return bool(block.lines) and _METADATA_LINE.match(block.lines[0]) is not None
