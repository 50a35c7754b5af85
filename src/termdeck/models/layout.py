"""Layout value types used by the configuration of a deck.

Both [`Alignment`][termdeck.models.layout.Alignment] and \
[`Margin`][termdeck.models.layout.Margin] are immutable and validate their values on \
creation. They are usually built from raw YAML values with their `from_value` \
class methods.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from re import compile as re_compile
from typing import Any, Literal, Self, cast

from ..exceptions import ConfigurationError

Horizontal = Literal["left", "center", "right"]
Vertical = Literal["top", "center", "bottom"]

HORIZONTAL_VALUES: tuple[Horizontal, ...] = ("left", "center", "right")
VERTICAL_VALUES: tuple[Vertical, ...] = ("top", "center", "bottom")
SIDE_NAMES = ("top", "right", "bottom", "left")

_SEPARATOR = re_compile(r"[ ,]+")
_INTEGERS_ONLY = re_compile(r"^[\d, ]+$")


@dataclass(frozen=True)
class Alignment:
    """Horizontal and vertical placement of a section on the screen."""

    horizontal: Horizontal
    """One of `left`, `center` or `right`."""

    vertical: Vertical
    """One of `top`, `center` or `bottom`."""

    def __post_init__(self) -> None:
        if self.horizontal not in HORIZONTAL_VALUES:
            msg = (
                f"unknown '{self.horizontal}' horizontal alignment. "
                "Valid value is: left, center and right."
            )
            raise ConfigurationError(msg)
        if self.vertical not in VERTICAL_VALUES:
            msg = (
                f"unknown '{self.vertical}' vertical alignment. "
                "Valid value is: top, center and bottom."
            )
            raise ConfigurationError(msg)

    @classmethod
    def from_value(cls, value: Any, default: str = "center") -> Self:
        """Create an alignment from a free text value.

        The value is split on spaces and commas, so that `"right top"`, \
        `"right,top"` and `"right , top"` are all equivalent.

        Args:
            value: Text holding the horizontal and optionally the vertical alignment
            default: Vertical alignment to use when only one value is given

        Raises:
            ConfigurationError: Raised if the value is not a string or holds an \
                unknown alignment.

        Returns:
            The parsed alignment.
        """
        if not isinstance(value, str):
            msg = (
                f"invalid value for alignment: {value!r}.\n"
                "The alignment needs to be a string such as 'center' or 'left top'."
            )
            raise ConfigurationError(msg)
        tokens = [token for token in _SEPARATOR.split(value.strip()) if token]
        if not tokens or len(tokens) > 2:
            msg = (
                f"invalid value for alignment: {value!r}.\n"
                "The alignment needs one horizontal and an optional vertical value."
            )
            raise ConfigurationError(msg)
        horizontal = tokens[0]
        vertical = tokens[1] if len(tokens) == 2 else default
        return cls(cast(Horizontal, horizontal), cast(Vertical, vertical))


@dataclass(frozen=True)
class Margin:
    """Space in cells to keep free on each side of the screen."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        for side in SIDE_NAMES:
            value = getattr(self, side)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                msg = (
                    f"{side} margin needs to be a non-negative integer, "
                    f"got: {value!r}"
                )
                raise ConfigurationError(msg)

    @classmethod
    def from_value(cls, value: Any) -> Self:
        """Create a margin from an integer, a string, a list or a mapping.

        Lists follow the CSS shorthand: one value applies to all sides, two values \
        are vertical then horizontal, three values are top, horizontal and bottom \
        and four values are top, right, bottom and left.

        Args:
            value: The raw margin value

        Raises:
            ConfigurationError: Raised if the value has an unsupported shape.

        Returns:
            The parsed margin.
        """
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_sequence([value])
        if isinstance(value, str) and _INTEGERS_ONLY.match(value):
            return cls.from_sequence(
                [int(token) for token in _SEPARATOR.split(value.strip()) if token]
            )
        if isinstance(value, list | tuple):
            return cls.from_sequence(list(value))
        msg = (
            f"invalid value for margin: {value!r}.\n"
            "The margin needs to be an integer, a string of integers, "
            "an array of integers or a hash of side names and integer values."
        )
        raise ConfigurationError(msg)

    @classmethod
    def from_sequence(cls, values: list[Any]) -> Self:
        match len(values):
            case 1:
                return cls(*(values * 4))
            case 2:
                return cls(*(values * 2))
            case 3:
                return cls(*values, values[1])
            case 4:
                return cls(*values)
            case _:
                msg = (
                    "wrong number of integers for margin: "
                    f"{', '.join(map(str, values))!r}.\n"
                    "The margin needs to be specified with one, two, three "
                    "or four integers."
                )
                raise ConfigurationError(msg)

    @classmethod
    def from_mapping(cls, value: Mapping[Any, Any]) -> Self:
        invalid = [key for key in value if key not in SIDE_NAMES]
        if invalid:
            msg = (
                f"unknown name{'s' if len(invalid) > 1 else ''} for margin: "
                f"{', '.join(map(repr, invalid))}.\n"
                "Valid names are: top, left, right and bottom."
            )
            raise ConfigurationError(msg)
        return cls(
            **{
                side: 0 if value.get(side) is None else value[side]
                for side in SIDE_NAMES
            }
        )
