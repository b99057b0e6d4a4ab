"""Transitions between two adjacent styles.

When one styled string is printed right after another, the terminal is
already in the first style. Instead of resetting and writing the second
style from scratch, it is usually enough to send only the codes that
differ:

    red        -> red + bold : ESC[1m
    red + bold -> red        : ESC[22m
    red        -> blue       : ESC[34m

Attribute and color removal uses the SGR off-codes (22-29, 39, 49). Bold
and dimmed share the normal-intensity code 22, so removing one of them
while keeping the other re-emits the survivor after 22.

Two policies decide between a targeted transition and a full reset:

- MINIMAL: use the targeted codes unless ESC[0m plus the next style's
  prefix is strictly shorter.
- CONSERVATIVE: never send off-codes. Anything removed forces a reset,
  for terminals that mishandle bare attribute-off codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ansi_style.core.constants import (
    ATTRIBUTE_CODES,
    ATTRIBUTE_OFF_CODES,
    CSI,
    DEFAULT_BG_CODE,
    DEFAULT_FG_CODE,
    RESET,
)

if TYPE_CHECKING:
    from ansi_style.core.style import Style

_INTENSITY = ("bold", "dimmed")


class TransitionPolicy(Enum):
    """How aggressively transitions avoid a full reset."""
    MINIMAL = "minimal"
    CONSERVATIVE = "conservative"


class DifferenceKind(Enum):
    NO_DIFFERENCE = "none"
    EXTRA_STYLES = "extra"
    RESET = "reset"


@dataclass(frozen=True)
class Difference:
    """
    The codes needed to go from one style to the next.

    For EXTRA_STYLES, `codes` holds the off-codes followed by the on-codes.
    For RESET, `codes` holds the full parameter list of the next style,
    which is written after ESC[0m.
    """
    kind: DifferenceKind
    codes: tuple[str, ...] = ()

    def sequence(self) -> str:
        """Render this difference as escape sequence text."""
        body = f"{CSI}{';'.join(self.codes)}m" if self.codes else ""
        if self.kind == DifferenceKind.RESET:
            return RESET + body
        return body


NO_DIFFERENCE = Difference(DifferenceKind.NO_DIFFERENCE)


def _removals(previous: Style, next_style: Style) -> list[str]:
    """Off-codes for every field set in `previous` but absent in `next_style`."""
    off: list[str] = []
    for name, _ in ATTRIBUTE_CODES:
        if previous.has(name) and not next_style.has(name):
            code = str(ATTRIBUTE_OFF_CODES[name])
            if code not in off:
                off.append(code)
    if previous.foreground is not None and next_style.foreground is None:
        off.append(str(DEFAULT_FG_CODE))
    if previous.background is not None and next_style.background is None:
        off.append(str(DEFAULT_BG_CODE))
    return off


def _additions(previous: Style, next_style: Style, intensity_cleared: bool) -> list[str]:
    """On-codes for every field `next_style` sets that `previous` lacks or differs in."""
    on: list[str] = []
    for name, code in ATTRIBUTE_CODES:
        if not next_style.has(name):
            continue
        if not previous.has(name) or (intensity_cleared and name in _INTENSITY):
            on.append(str(code))
    if next_style.foreground is not None and next_style.foreground != previous.foreground:
        on.append(next_style.foreground.to_sgr_fg())
    if next_style.background is not None and next_style.background != previous.background:
        on.append(next_style.background.to_sgr_bg())
    return on


def between(
    previous: Style,
    next_style: Style,
    policy: TransitionPolicy = TransitionPolicy.MINIMAL,
) -> Difference:
    """
    Compute the transition from `previous` to `next_style`.

    The result depends only on the two styles and the policy.
    """
    if previous == next_style:
        return NO_DIFFERENCE

    reset = Difference(DifferenceKind.RESET, tuple(next_style.codes()))
    off = _removals(previous, next_style)

    if off and policy == TransitionPolicy.CONSERVATIVE:
        return reset

    intensity_cleared = str(ATTRIBUTE_OFF_CODES["bold"]) in off
    targeted = Difference(
        DifferenceKind.EXTRA_STYLES,
        tuple(off + _additions(previous, next_style, intensity_cleared)),
    )

    if policy == TransitionPolicy.MINIMAL and len(reset.sequence()) < len(targeted.sequence()):
        return reset
    return targeted
