"""Style - colors plus text attributes, serialized as SGR sequences."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Optional

from ansi_style.core.color import Color
from ansi_style.core.constants import ATTRIBUTE_CODES, ATTRIBUTES, CSI, RESET
from ansi_style.core.difference import Difference, TransitionPolicy, between

if TYPE_CHECKING:
    from ansi_style.render.strings import StyledString


@dataclass(frozen=True)
class Style:
    """
    A collection of properties that format a string using SGR codes.

    Styles are immutable. The builder methods return a new Style, so they
    can be chained freely:

        >>> Style().bold().underline().fg(Color.RED).prefix()
        '\\x1b[1;4;31m'
    """
    foreground: Optional[Color] = None
    background: Optional[Color] = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    # Fluent builder methods

    def bold(self) -> Style:
        return replace(self, is_bold=True)

    def dimmed(self) -> Style:
        return replace(self, is_dimmed=True)

    def italic(self) -> Style:
        return replace(self, is_italic=True)

    def underline(self) -> Style:
        return replace(self, is_underline=True)

    def blink(self) -> Style:
        return replace(self, is_blink=True)

    def reverse(self) -> Style:
        return replace(self, is_reverse=True)

    def hidden(self) -> Style:
        return replace(self, is_hidden=True)

    def strikethrough(self) -> Style:
        return replace(self, is_strikethrough=True)

    def fg(self, foreground: Color) -> Style:
        """Return a Style with the foreground color set."""
        return replace(self, foreground=foreground)

    def on(self, background: Color) -> Style:
        """Return a Style with the background color set."""
        return replace(self, background=background)

    def has(self, attribute: str) -> bool:
        """Check a named attribute ('bold', 'underline', ...)."""
        return getattr(self, f"is_{attribute}")

    def is_plain(self) -> bool:
        """True if this style needs no control codes at all."""
        return self == _PLAIN

    def codes(self) -> list[str]:
        """SGR parameters for this style: attributes, then fg, then bg."""
        params = [str(code) for name, code in ATTRIBUTE_CODES if self.has(name)]
        if self.foreground is not None:
            params.append(self.foreground.to_sgr_fg())
        if self.background is not None:
            params.append(self.background.to_sgr_bg())
        return params

    def prefix(self) -> str:
        """The escape sequence that switches the terminal to this style."""
        params = self.codes()
        if not params:
            return ""
        return f"{CSI}{';'.join(params)}m"

    def suffix(self) -> str:
        """The escape sequence that resets the terminal after this style."""
        return "" if self.is_plain() else RESET

    def difference(
        self,
        next_style: Style,
        policy: TransitionPolicy = TransitionPolicy.MINIMAL,
    ) -> Difference:
        """Classify the transition from this style to the next one."""
        return between(self, next_style, policy)

    def infix(
        self,
        next_style: Style,
        policy: TransitionPolicy = TransitionPolicy.MINIMAL,
    ) -> str:
        """The codes to print between text in this style and text in the next."""
        return between(self, next_style, policy).sequence()

    def paint(self, value: Any) -> StyledString:
        """Wrap a value so that printing it emits this style around it."""
        from ansi_style.render.strings import StyledString
        return StyledString(value, self)

    def describe(self) -> str:
        """Compact description, e.g. 'Style { fg(red), bold }'."""
        parts: list[str] = []
        if self.foreground is not None:
            parts.append(f"fg({self.foreground.describe()})")
        if self.background is not None:
            parts.append(f"on({self.background.describe()})")
        parts.extend(sorted(name for name in ATTRIBUTES if self.has(name)))
        if not parts:
            return "Style {}"
        return f"Style {{ {', '.join(parts)} }}"


_PLAIN = Style()
