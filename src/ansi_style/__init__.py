"""
ansi-style: terminal text styling with ANSI SGR escape codes

Describe a style once, paint any value with it, and print runs of styled
text without redundant escape codes between them.

Quick Start:
    >>> from ansi_style import Color, StyledStrings
    >>> print(Color.RED.paint("a red string"))
    >>> print(Color.BLUE.bold().paint("Blue bold!"))
    >>> red = Color.RED.normal()
    >>> print(StyledStrings([red.paint("["), red.bold().paint("42"), red.paint("]")]))

Features:
    - 8 standard, 8 bright, 256-palette and 24-bit colors
    - Bold, dimmed, italic, underline, blink, reverse, hidden, strikethrough
    - Minimal transitions between adjacent styles, one trailing reset
    - Visible-position substrings of styled runs
    - Style descriptions like "bold red on #202020"
"""

__version__ = "0.1.0"

# Core types
from ansi_style.core.color import Color, ColorMode
from ansi_style.core.constants import RESET
from ansi_style.core.difference import Difference, DifferenceKind, TransitionPolicy
from ansi_style.core.style import Style

# Rendering
from ansi_style.render.sequence import SequenceRenderer, render_sequence
from ansi_style.render.strings import StyledString, StyledStrings

# Descriptions
from ansi_style.parse import parse_color, parse_style


def paint(value: object, style: str = "plain") -> StyledString:
    """Paint a value with a style description, e.g. paint("hi", "bold red")."""
    return parse_style(style).paint(value)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorMode",
    "Style",
    "Difference",
    "DifferenceKind",
    "TransitionPolicy",
    "RESET",
    # Rendering
    "SequenceRenderer",
    "render_sequence",
    "StyledString",
    "StyledStrings",
    # Descriptions
    "parse_color",
    "parse_style",
    "paint",
]
