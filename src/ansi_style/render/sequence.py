"""Render a run of styled fragments with a minimum of escape codes."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ansi_style.core.difference import DifferenceKind, TransitionPolicy, between
from ansi_style.core.style import Style

logger = logging.getLogger(__name__)

Fragment = tuple[Style, Any]


class SequenceRenderer:
    """
    Render (style, content) fragments to one ANSI string.

    Only the difference between each fragment's style and the previous
    one is written, and the last fragment's suffix closes the output.
    Rendering reads nothing but its arguments; the policy defaults to
    MINIMAL.
    """

    def __init__(self, policy: Optional[TransitionPolicy] = None):
        self.policy = policy if policy is not None else TransitionPolicy.MINIMAL

    def render(self, fragments: Iterable[Fragment]) -> str:
        """Render fragments in order. Content is converted with str()."""
        parts: list[str] = []
        previous: Optional[Style] = None

        for style, content in fragments:
            if previous is None:
                parts.append(style.prefix())
            else:
                difference = between(previous, style, self.policy)
                if (difference.kind != DifferenceKind.NO_DIFFERENCE
                        and logger.isEnabledFor(logging.DEBUG)):
                    logger.debug(
                        "transition %s -> %s: %s %s",
                        previous.describe(), style.describe(),
                        difference.kind.value, difference.codes,
                    )
                parts.append(difference.sequence())

            parts.append(str(content))
            previous = style

        # A plain last fragment was already entered through a reset
        if previous is not None:
            parts.append(previous.suffix())

        return ''.join(parts)


def render_sequence(
    fragments: Iterable[Fragment],
    policy: Optional[TransitionPolicy] = None,
) -> str:
    """Render fragments with the given policy (MINIMAL when omitted)."""
    return SequenceRenderer(policy).render(fragments)
