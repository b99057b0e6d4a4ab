"""Styled strings - values paired with a Style for display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

from ansi_style.core.difference import TransitionPolicy
from ansi_style.core.style import Style
from ansi_style.render.sequence import render_sequence


@dataclass(frozen=True)
class StyledString:
    """
    A value that prints surrounded by its style's escape codes.

    Any object can be painted; its str() is taken at render time.

    Example:
        >>> str(Color.RED.paint("hi"))
        '\\x1b[31mhi\\x1b[0m'
    """
    value: Any
    style: Style = field(default_factory=Style)

    @property
    def plain(self) -> str:
        """The value's text without any escape codes."""
        return str(self.value)

    def __str__(self) -> str:
        return f"{self.style.prefix()}{self.plain}{self.style.suffix()}"

    def __len__(self) -> int:
        return len(self.plain)


class StyledStrings:
    """
    An ordered run of StyledString fragments written with minimal codes.

    str() renders through the sequence differ, so adjacent fragments only
    pay for the codes that change between them.
    """

    def __init__(self, fragments: Iterable[StyledString] = ()):
        self.fragments: list[StyledString] = list(fragments)

    def __iter__(self) -> Iterator[StyledString]:
        return iter(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledStrings):
            return NotImplemented
        return self.fragments == other.fragments

    def __repr__(self) -> str:
        return f"StyledStrings({self.fragments!r})"

    def __str__(self) -> str:
        return self.render()

    def render(self, policy: Optional[TransitionPolicy] = None) -> str:
        return render_sequence(((s.style, s.value) for s in self.fragments), policy)

    def values(self) -> Iterator[Any]:
        """Iterate over the raw, unstyled values."""
        return (s.value for s in self.fragments)

    def unstyled(self) -> str:
        """All fragment text concatenated, without escape codes."""
        return ''.join(s.plain for s in self.fragments)

    def unstyled_len(self) -> int:
        return sum(len(s) for s in self.fragments)

    def substring(self, start: int, end: int) -> StyledStrings:
        """
        Slice by visible character position.

        Positions ignore escape codes, so a cut never lands inside one, and
        fragments cut at either edge keep their style. An `end` past the
        text behaves as unbounded; a `start` past it gives an empty result.
        """
        pieces: list[StyledString] = []
        if end <= start:
            return StyledStrings(pieces)

        offset = 0
        for fragment in self.fragments:
            text = fragment.plain
            lo = max(start, offset)
            hi = min(end, offset + len(text))
            if lo < hi:
                pieces.append(StyledString(text[lo - offset:hi - offset], fragment.style))
            offset += len(text)
            if offset >= end:
                break

        return StyledStrings(pieces)
