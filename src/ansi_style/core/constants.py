"""Shared constants for SGR escape sequence generation."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Attribute on-codes, in canonical emission order
ATTRIBUTE_CODES: tuple[tuple[str, int], ...] = (
    ("bold", 1),
    ("dimmed", 2),
    ("italic", 3),
    ("underline", 4),
    ("blink", 5),
    ("reverse", 7),
    ("hidden", 8),
    ("strikethrough", 9),
)

# Attribute off-codes. Bold and dimmed share 22 (normal intensity).
ATTRIBUTE_OFF_CODES: dict[str, int] = {
    "bold": 22,
    "dimmed": 22,
    "italic": 23,
    "underline": 24,
    "blink": 25,
    "reverse": 27,
    "hidden": 28,
    "strikethrough": 29,
}

ATTRIBUTES: tuple[str, ...] = tuple(name for name, _ in ATTRIBUTE_CODES)

# Colour removal codes (terminal default colour)
DEFAULT_FG_CODE = 39
DEFAULT_BG_CODE = 49

# Standard 8-color palette (index into 30-37 / 40-47, bright 90-97 / 100-107)
COLOR_NAMES: dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}
