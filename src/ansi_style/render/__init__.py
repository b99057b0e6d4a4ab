"""Renderers for turning styled fragments into escape-annotated text."""

from ansi_style.render.sequence import SequenceRenderer, render_sequence
from ansi_style.render.strings import StyledString, StyledStrings

__all__ = ["SequenceRenderer", "render_sequence", "StyledString", "StyledStrings"]
