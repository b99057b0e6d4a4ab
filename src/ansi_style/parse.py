"""Parse human-written color and style descriptions.

Example:
    >>> parse_style("bold underline red on #202020").prefix()
    '\\x1b[1;4;31;48;2;32;32;32m'
"""

import re

from ansi_style.core.color import Color
from ansi_style.core.constants import ATTRIBUTES, COLOR_NAMES
from ansi_style.core.style import Style

_FIXED = re.compile(r'(?:fixed\()?(\d+)\)?')
_RGB = re.compile(r'(?:rgb\()?(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\)?')


def parse_color(color: str) -> Color:
    """Parse a color description to a Color.

    Accepts:
        - Named colors: "red", "bright_red" (or "bright-red"), "default"
        - Hex colors: "#FF00FF", "FF00FF", "#F0F", "F0F"
        - RGB triples: "255,0,255" or "rgb(255, 0, 255)"
        - Palette indices: "134" or "fixed(134)"
    """
    text = color.strip().lower().replace("-", "_")

    if text == "default":
        return Color.DEFAULT
    if text in COLOR_NAMES:
        return Color.named(COLOR_NAMES[text])
    if text.startswith("bright_") and text[7:] in COLOR_NAMES:
        return Color.bright(COLOR_NAMES[text[7:]])

    match = _RGB.fullmatch(text)
    if match:
        return Color.rgb(*(int(group) for group in match.groups()))

    # Plain digits are a palette index, not hex
    match = _FIXED.fullmatch(text)
    if match:
        return Color.fixed(int(match.group(1)))

    hex_digits = text[1:] if text.startswith("#") else text
    if len(hex_digits) == 3:
        # Short form: F0F -> FF00FF
        hex_digits = ''.join(c * 2 for c in hex_digits)
    if len(hex_digits) == 6:
        try:
            return Color.rgb(
                int(hex_digits[0:2], 16),
                int(hex_digits[2:4], 16),
                int(hex_digits[4:6], 16),
            )
        except ValueError:
            pass

    raise ValueError(f"Cannot parse color: {color!r}")


def parse_style(description: str) -> Style:
    """Parse a style description such as "bold red on blue".

    Words are attribute names or colors; the color after "on" is the
    background. "plain" or an empty string gives the plain style.
    """
    style = Style()
    words = description.split()
    i = 0
    while i < len(words):
        word = words[i].lower()
        if word == "on":
            if i + 1 >= len(words):
                raise ValueError(f"Missing background color after 'on' in {description!r}")
            style = style.on(parse_color(words[i + 1]))
            i += 2
            continue
        if word in ATTRIBUTES:
            style = getattr(style, word)()
        elif word != "plain":
            style = style.fg(parse_color(word))
        i += 1
    return style
