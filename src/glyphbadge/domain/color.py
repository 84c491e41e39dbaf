"""Color and opacity value types.

Both types are parsed from small textual grammars and serialize back to the
shortest text that the badge markup needs:

- Color: one of the named badge colors, or a custom 3/6 digit hex string
- Opacity: a decimal in [0, 1] stored in canonical shortest form
- Gradient: overlay gradient description used by the classic style
"""

import string
from dataclasses import dataclass
from enum import Enum

from glyphbadge.exceptions import UnrecognizedColorError, UnrecognizedOpacityError

_HEX_DIGITS = frozenset(string.hexdigits)


def is_valid_hex_color(value: str) -> bool:
    """Check if a string is a bare RGB or RRGGBB hex color.

    Args:
        value: Candidate hex string without a leading '#'

    Returns:
        True if the length is 3 or 6 and every character is a hex digit
    """
    if len(value) not in (3, 6):
        return False
    return all(c in _HEX_DIGITS for c in value)


class NamedColor(Enum):
    """Named badge colors and the hex value each one renders as."""

    GREEN = "3C1"
    BLUE = "08C"
    RED = "E43"
    YELLOW = "DB1"
    ORANGE = "F73"
    PURPLE = "94E"
    PINK = "E5B"
    GREY = "999"
    CYAN = "1BC"
    BLACK = "2A2A2A"


_NAME_ALIASES = {
    "gray": NamedColor.GREY,
}


@dataclass(frozen=True, slots=True)
class Color:
    """A badge color.

    Attributes:
        hex: Uppercase hex digits without the leading '#'
        name: The named color this value came from, None for custom colors
    """

    hex: str
    name: NamedColor | None = None

    @classmethod
    def named(cls, color: NamedColor) -> "Color":
        """Create a color from one of the named badge colors."""
        return cls(hex=color.value, name=color)

    @classmethod
    def custom(cls, hex_value: str) -> "Color":
        """Create a custom color from a 3 or 6 digit hex string.

        Raises:
            UnrecognizedColorError: If the hex string is malformed
        """
        if not is_valid_hex_color(hex_value):
            raise UnrecognizedColorError(hex_value)
        return cls(hex=hex_value.upper())

    @classmethod
    def parse(cls, value: str) -> "Color":
        """Parse a color name (case-insensitive) or a bare hex string.

        Args:
            value: e.g. "green", "GRAY", "fff" or "2a2a2a"

        Returns:
            Parsed color

        Raises:
            UnrecognizedColorError: If value is neither a name nor valid hex
        """
        lowered = value.lower()
        if lowered in _NAME_ALIASES:
            return cls.named(_NAME_ALIASES[lowered])
        try:
            return cls.named(NamedColor[lowered.upper()])
        except KeyError:
            pass
        return cls.custom(value)

    def as_hex(self) -> str:
        """Return the hex digits for the color, without '#'."""
        return self.hex

    def __str__(self) -> str:
        return f"#{self.hex}"


GREEN = Color.named(NamedColor.GREEN)
BLUE = Color.named(NamedColor.BLUE)
RED = Color.named(NamedColor.RED)
YELLOW = Color.named(NamedColor.YELLOW)
ORANGE = Color.named(NamedColor.ORANGE)
PURPLE = Color.named(NamedColor.PURPLE)
PINK = Color.named(NamedColor.PINK)
GREY = Color.named(NamedColor.GREY)
CYAN = Color.named(NamedColor.CYAN)
BLACK = Color.named(NamedColor.BLACK)


@dataclass(frozen=True, slots=True)
class Opacity:
    """An opacity in canonical shortest textual form.

    The stored value is always "0", "1", or "." followed by one or two
    digits with no trailing zero.
    """

    value: str

    @classmethod
    def parse(cls, value: str) -> "Opacity":
        """Parse an opacity string.

        Accepted forms are 0, 1, .D, .DD, 0.D, 0.DD, 1.0 and 1.00.

        Args:
            value: Opacity text, at most four characters

        Returns:
            Canonical opacity

        Raises:
            UnrecognizedOpacityError: If value is outside [0, 1] or needs
                more than two fractional digits
        """
        canonical = _canonical_opacity(value)
        if canonical is None:
            raise UnrecognizedOpacityError(value)
        return cls(canonical)

    def is_opaque(self) -> bool:
        return self.value == "1"

    def is_transparent(self) -> bool:
        return self.value == "0"

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def _canonical_opacity(value: str) -> str | None:
    if value in ("0", "1"):
        return value
    if value in ("1.0", "1.00"):
        return "1"
    if value.startswith("0.") and len(value) in (3, 4):
        return _canonical_fraction(value[1:])
    return _canonical_fraction(value)


def _canonical_fraction(value: str) -> str | None:
    if not value.startswith(".") or len(value) not in (2, 3):
        return None
    digits = value[1:]
    if not all(c in string.digits for c in digits):
        return None
    digits = digits.rstrip("0")
    if not digits:
        return "0"
    return f".{digits}"


@dataclass(frozen=True, slots=True)
class Gradient:
    """A vertical overlay gradient.

    Attributes:
        start: Color at the top of the badge
        end: Color at the bottom, None leaves the stop color unset
        opacity: Opacity applied to both stops
    """

    start: Color
    end: Color | None
    opacity: Opacity
