"""Color representation for SGR sequences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from ansi_style.core.constants import COLOR_NAMES, DEFAULT_BG_CODE, DEFAULT_FG_CODE

if TYPE_CHECKING:
    from ansi_style.core.style import Style
    from ansi_style.render.strings import StyledString

_INDEX_NAMES = {index: name for name, index in COLOR_NAMES.items()}


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    NAMED = "named"         # Standard 8 colors (SGR 30-37, 40-47)
    BRIGHT = "bright"       # Bright 8 colors (SGR 90-97, 100-107)
    FIXED = "256"           # Extended 256-color (SGR 38;5;n, 48;5;n)
    RGB = "rgb"             # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)
    DEFAULT = "default"     # Terminal default (SGR 39, 49)


def _check_byte(value: int, what: str) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be 0-255, got {value}")


@dataclass(frozen=True)
class Color:
    """
    A foreground or background color.

    Any in-range value is a valid color; the factory classmethods reject
    numbers that do not fit the SGR encoding.
    """
    mode: ColorMode
    value: int | tuple[int, int, int] | None = None

    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]
    BRIGHT_BLACK: ClassVar[Color]
    BRIGHT_RED: ClassVar[Color]
    BRIGHT_GREEN: ClassVar[Color]
    BRIGHT_YELLOW: ClassVar[Color]
    BRIGHT_BLUE: ClassVar[Color]
    BRIGHT_MAGENTA: ClassVar[Color]
    BRIGHT_CYAN: ClassVar[Color]
    BRIGHT_WHITE: ClassVar[Color]
    DEFAULT: ClassVar[Color]

    @classmethod
    def named(cls, index: int) -> Color:
        """Create one of the eight standard colors (0=black ... 7=white)."""
        if not 0 <= index <= 7:
            raise ValueError(f"Named color index must be 0-7, got {index}")
        return cls(ColorMode.NAMED, index)

    @classmethod
    def bright(cls, index: int) -> Color:
        """Create the bright variant of a standard color."""
        if not 0 <= index <= 7:
            raise ValueError(f"Bright color index must be 0-7, got {index}")
        return cls(ColorMode.BRIGHT, index)

    @classmethod
    def fixed(cls, index: int) -> Color:
        """Create a Color from a 256-color palette index."""
        _check_byte(index, "256-color index")
        return cls(ColorMode.FIXED, index)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """Create a 24-bit Color from RGB values."""
        for component in (r, g, b):
            _check_byte(component, "RGB values")
        return cls(ColorMode.RGB, (r, g, b))

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this color as foreground."""
        return self._to_sgr(30, 90, 38, DEFAULT_FG_CODE)

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for this color as background."""
        return self._to_sgr(40, 100, 48, DEFAULT_BG_CODE)

    def _to_sgr(self, base: int, bright_base: int, extended: int, default: int) -> str:
        if self.mode == ColorMode.NAMED:
            assert isinstance(self.value, int)
            return str(base + self.value)
        elif self.mode == ColorMode.BRIGHT:
            assert isinstance(self.value, int)
            return str(bright_base + self.value)
        elif self.mode == ColorMode.FIXED:
            return f"{extended};5;{self.value}"
        elif self.mode == ColorMode.RGB:
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"{extended};2;{r};{g};{b}"
        else:  # DEFAULT
            return str(default)

    def describe(self) -> str:
        """Short human-readable name: 'red', 'bright_red', 'fixed(134)'."""
        if self.mode == ColorMode.NAMED:
            return _INDEX_NAMES[self.value]
        elif self.mode == ColorMode.BRIGHT:
            return f"bright_{_INDEX_NAMES[self.value]}"
        elif self.mode == ColorMode.FIXED:
            return f"fixed({self.value})"
        elif self.mode == ColorMode.RGB:
            r, g, b = self.value
            return f"rgb({r}, {g}, {b})"
        return "default"

    # Style shortcuts: each returns a Style with this color as foreground

    def normal(self) -> Style:
        from ansi_style.core.style import Style
        return Style(foreground=self)

    def bold(self) -> Style:
        return self.normal().bold()

    def dimmed(self) -> Style:
        return self.normal().dimmed()

    def italic(self) -> Style:
        return self.normal().italic()

    def underline(self) -> Style:
        return self.normal().underline()

    def blink(self) -> Style:
        return self.normal().blink()

    def reverse(self) -> Style:
        return self.normal().reverse()

    def hidden(self) -> Style:
        return self.normal().hidden()

    def strikethrough(self) -> Style:
        return self.normal().strikethrough()

    def on(self, background: Color) -> Style:
        """Return a Style with this foreground on the given background."""
        return self.normal().on(background)

    def paint(self, value: Any) -> StyledString:
        """Paint a value in this color, without building a Style first."""
        return self.normal().paint(value)

    def prefix(self) -> str:
        return self.normal().prefix()

    def suffix(self) -> str:
        return self.normal().suffix()

    def infix(self, next_color: Color) -> str:
        """Codes needed to switch from this color to another."""
        return self.normal().infix(next_color.normal())


# Initialize class-level color constants
for _name, _index in COLOR_NAMES.items():
    setattr(Color, _name.upper(), Color(ColorMode.NAMED, _index))
    setattr(Color, f"BRIGHT_{_name.upper()}", Color(ColorMode.BRIGHT, _index))
Color.DEFAULT = Color(ColorMode.DEFAULT)
del _name, _index
