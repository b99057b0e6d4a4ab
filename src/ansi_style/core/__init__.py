"""Core data structures: colors, styles and the transitions between them."""

from ansi_style.core.color import Color, ColorMode
from ansi_style.core.difference import Difference, DifferenceKind, TransitionPolicy
from ansi_style.core.style import Style

__all__ = ["Color", "ColorMode", "Style", "Difference", "DifferenceKind", "TransitionPolicy"]
