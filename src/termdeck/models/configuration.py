"""Configuration of a deck or of a single slide.

A [`Configuration`][termdeck.models.configuration.Configuration] has exactly six \
fields. The global configuration of a deck has all of them filled (defaults merged \
with the document overrides) while a slide configuration only holds the fields the \
slide explicitly set. Pydantic keeps track of those in `model_fields_set`, which is \
what makes `footer: ""` (set, but empty) different from no footer at all.
"""

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, InstanceOf

from ..exceptions import ConfigurationError
from .layout import Alignment, Margin

DEFAULT_PAGER_TEXT = "%<page>d / %<total>d"


def _to_caption_alignment(value: Any) -> Any:
    if value is None or isinstance(value, Alignment):
        return value
    return Alignment.from_value(value, default="bottom")


def _to_alignment(value: Any) -> Any:
    if isinstance(value, Alignment):
        return value
    return Alignment.from_value(value, default="center")


def _to_margin(value: Any) -> Any:
    if isinstance(value, Margin):
        return value
    return Margin.from_value(value)


class Caption(BaseModel):
    """Footer or pager entry: a text and where to put it."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str | None = None
    align: Annotated[
        InstanceOf[Alignment] | None, BeforeValidator(_to_caption_alignment)
    ] = None

    @property
    def visible(self) -> bool:
        return bool(self.text)

    def merged_over(self, base: "Caption") -> "Caption":
        """Fill the fields this caption did not set with the ones from `base`."""
        return base.model_copy(
            update={name: getattr(self, name) for name in self.model_fields_set}
        )


def _to_caption(value: Any) -> Any:
    if isinstance(value, Caption):
        return value
    if value is None or value is False:
        return Caption(text="")
    if isinstance(value, str):
        return Caption(text=value)
    if isinstance(value, Mapping):
        unknown = [key for key in value if key not in Caption.model_fields]
        if unknown:
            msg = (
                f"unknown '{', '.join(map(str, unknown))}' caption "
                f"{'key' if len(unknown) == 1 else 'keys'}\n"
                "Available keys are: text, align"
            )
            raise ConfigurationError(msg)
        if "text" in value and not isinstance(value["text"], str | None):
            msg = f"caption text needs to be a string, got: {value['text']!r}"
            raise ConfigurationError(msg)
        if value.get("text") is None and "text" in value:
            value = {**value, "text": ""}
        return Caption.model_validate(dict(value))
    msg = (
        f"invalid value for caption: {value!r}.\n"
        "The footer and the pager need to be false, a string or a hash with "
        "text and align keys."
    )
    raise ConfigurationError(msg)


def _to_symbols(value: Any) -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return dict(value)
    msg = (
        f"invalid value for symbols: {value!r}.\n"
        "The symbols need to be a name such as 'ascii' or a hash with base and "
        "override keys."
    )
    raise ConfigurationError(msg)


def _to_theme(value: Any) -> Any:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    msg = (
        f"invalid value for theme: {value!r}.\n"
        "The theme needs to be a hash of element names and styles."
    )
    raise ConfigurationError(msg)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return frozenset((key, _freeze(val)) for key, val in value.items())
    if isinstance(value, list | tuple):
        return tuple(_freeze(val) for val in value)
    return value


class Configuration(BaseModel):
    """Layout and styling configuration of a deck or a slide."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    keys: ClassVar[tuple[str, ...]] = (
        "align",
        "footer",
        "margin",
        "pager",
        "symbols",
        "theme",
    )

    align: Annotated[InstanceOf[Alignment] | None, BeforeValidator(_to_alignment)] = (
        None
    )
    footer: Annotated[Caption | None, BeforeValidator(_to_caption)] = None
    margin: Annotated[InstanceOf[Margin] | None, BeforeValidator(_to_margin)] = None
    pager: Annotated[Caption | None, BeforeValidator(_to_caption)] = None
    symbols: Annotated[str | dict[str, Any] | None, BeforeValidator(_to_symbols)] = (
        None
    )
    theme: Annotated[dict[str, Any] | None, BeforeValidator(_to_theme)] = None

    def is_set(self, name: str) -> bool:
        return name in self.model_fields_set

    def merged_over(self, base: Self) -> Self:
        """Return `base` with the fields set in this configuration applied on top.

        Captions are merged field by field, any other field is replaced.
        """
        update: dict[str, Any] = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            base_value = getattr(base, name)
            if isinstance(value, Caption) and isinstance(base_value, Caption):
                value = value.merged_over(base_value)
            update[name] = value
        return base.model_copy(update=update)

    def __hash__(self) -> int:
        return hash(
            (type(self), *(_freeze(getattr(self, name)) for name in self.keys))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.keys)


def default_configuration() -> Configuration:
    return Configuration(
        align=Alignment("left", "top"),
        footer=Caption(align=Alignment("left", "bottom"), text=""),
        margin=Margin(0, 0, 0, 0),
        pager=Caption(align=Alignment("right", "bottom"), text=DEFAULT_PAGER_TEXT),
        symbols="unicode",
        theme={},
    )
