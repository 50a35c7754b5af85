from dataclasses import dataclass, replace
from re import compile as re_compile
from typing import Any, Self

from rich.text import Text

from .components.protocols import ConverterProtocol, CursorProtocol
from .exceptions import ConfigurationError
from .models.configuration import Caption, Configuration
from .models.deck import Slide
from .models.layout import Alignment, Margin

# Named references in the %<page>d and %{page} forms
_ANGLE_REFERENCE = re_compile(r"%<(\w+)>")
_BRACE_REFERENCE = re_compile(r"%\{(\w+)\}")


def format_pager(template: str, page: int, total: int) -> str:
    """Substitute the page number and the number of pages in a pager template.

    `%(page)d`, `%<page>d` and `%{page}` are all accepted.

    Raises:
        ConfigurationError: Raised if the template is not a valid format string.
    """
    converted = _ANGLE_REFERENCE.sub(r"%(\1)", template)
    converted = _BRACE_REFERENCE.sub(r"%(\1)s", converted)
    try:
        return converted % {"page": page, "total": total}
    except (KeyError, ValueError, TypeError) as e:
        msg = f"invalid pager text {template!r}: {e}"
        raise ConfigurationError(msg) from e


def visible_width(line: str) -> int:
    """Number of terminal cells used by a line, ignoring ANSI escape codes."""
    return Text.from_ansi(line.rstrip("\n")).cell_len


@dataclass(frozen=True)
class Renderer:
    """Lay out the content, footer and pager of a slide on the screen.

    Each section is converted from Markdown and then placed with absolute cursor \
    movements, according to its alignment and margin.
    """

    converter: ConverterProtocol
    cursor: CursorProtocol
    width: int
    height: int

    def resize(self, width: int, height: int) -> Self:
        return replace(self, width=width, height=height)

    def render(
        self, config: Configuration, slide: Slide | None, page: int, total: int
    ) -> str:
        """Render a slide with its footer and pager.

        Args:
            config: Global configuration of the deck
            slide: Slide to render, None to only render the footer and pager
            page: 1-based number of the slide
            total: Number of slides in the deck

        Returns:
            Escape sequences and text to write to the terminal.
        """
        slide_config = slide.config if slide is not None else None
        out = []
        if slide is not None:
            out.append(self._render_content(config, slide))
        out.append(self._render_footer(config, slide_config))
        out.append(self._render_pager(config, slide_config, page, total))
        return "".join(out)

    def clear(self) -> str:
        return self.cursor.clear_screen() + self.cursor.move_to(0, 0)

    def _render_content(self, config: Configuration, slide: Slide) -> str:
        alignment, margin, symbols, theme = (
            self._pick(config, slide.config, name)
            for name in ("align", "margin", "symbols", "theme")
        )
        converted = self._convert(slide.content, margin, symbols, theme)
        return self.render_section(
            converted.splitlines(keepends=True), alignment, margin
        )

    def _render_footer(
        self, config: Configuration, slide_config: Configuration | None
    ) -> str:
        footer = self._pick_caption(config, slide_config, "footer")
        if not footer.visible:
            return ""
        return self._render_caption(config, slide_config, footer, footer.text or "")

    def _render_pager(
        self,
        config: Configuration,
        slide_config: Configuration | None,
        page: int,
        total: int,
    ) -> str:
        pager = self._pick_caption(config, slide_config, "pager")
        if not pager.visible:
            return ""
        text = format_pager(pager.text or "", page, total)
        return self._render_caption(config, slide_config, pager, text)

    def _render_caption(
        self,
        config: Configuration,
        slide_config: Configuration | None,
        caption: Caption,
        text: str,
    ) -> str:
        margin, symbols, theme = (
            self._pick(config, slide_config, name)
            for name in ("margin", "symbols", "theme")
        )
        converted = self._convert(text, margin, symbols, theme).removesuffix("\n")
        assert caption.align is not None
        return self.render_section(
            converted.splitlines(keepends=True), caption.align, margin
        )

    def render_section(
        self, lines: list[str], alignment: Alignment, margin: Margin
    ) -> str:
        max_width = max((visible_width(line) for line in lines), default=0)
        left = max(self._left_column(alignment, margin, max_width), 0)
        top = max(self._top_row(alignment, margin, len(lines)), 0)
        return "".join(
            self.cursor.move_to(left, top + i) + line for i, line in enumerate(lines)
        )

    def _pick(
        self, config: Configuration, slide_config: Configuration | None, name: str
    ) -> Any:
        if slide_config is not None and slide_config.is_set(name):
            return getattr(slide_config, name)
        return getattr(config, name)

    def _pick_caption(
        self, config: Configuration, slide_config: Configuration | None, name: str
    ) -> Caption:
        caption: Caption = self._pick(config, slide_config, name)
        return caption.merged_over(getattr(config, name))

    def _left_column(self, alignment: Alignment, margin: Margin, width: int) -> int:
        match alignment.horizontal:
            case "left":
                return margin.left
            case "center":
                return margin.left + (self._slide_width(margin) - width) // 2
            case "right":
                return margin.left + self._slide_width(margin) - width

    def _top_row(self, alignment: Alignment, margin: Margin, height: int) -> int:
        match alignment.vertical:
            case "top":
                return margin.top
            case "center":
                return margin.top + (self._slide_height(margin) - height) // 2
            case "bottom":
                return margin.top + self._slide_height(margin) - height

    def _convert(
        self, content: str, margin: Margin, symbols: Any, theme: Any
    ) -> str:
        return self.converter.convert(
            content, width=self._slide_width(margin), symbols=symbols, theme=theme
        )

    def _slide_width(self, margin: Margin) -> int:
        return self.width - margin.left - margin.right

    def _slide_height(self, margin: Margin) -> int:
        return self.height - margin.top - margin.bottom
