"""Tests for transitions between adjacent styles."""

import pytest

from ansi_style.core.color import Color
from ansi_style.core.difference import DifferenceKind, TransitionPolicy, between
from ansi_style.core.style import Style

CONSERVATIVE = TransitionPolicy.CONSERVATIVE


class TestMinimalTransitions:

    def test_adding_bold(self) -> None:
        diff = Color.GREEN.normal().difference(Color.GREEN.bold())
        assert diff.kind == DifferenceKind.EXTRA_STYLES
        assert diff.codes == ("1",)
        assert diff.sequence() == "\x1b[1m"

    def test_removing_bold(self) -> None:
        diff = Color.GREEN.bold().difference(Color.GREEN.normal())
        assert diff.kind == DifferenceKind.EXTRA_STYLES
        assert diff.sequence() == "\x1b[22m"

    def test_identical_styles(self) -> None:
        assert Color.GREEN.bold().difference(Color.GREEN.bold()).kind == DifferenceKind.NO_DIFFERENCE
        assert Color.GREEN.normal().infix(Color.GREEN.normal()) == ""
        assert Style().infix(Style()) == ""

    def test_color_change(self) -> None:
        diff = Color.RED.normal().difference(Color.BLUE.normal())
        assert diff.kind == DifferenceKind.EXTRA_STYLES
        assert diff.codes == ("34",)

    def test_color_change_to_extended(self) -> None:
        assert Color.RED.normal().infix(Color.fixed(134).normal()) == "\x1b[38;5;134m"

    def test_adding_color_to_attribute(self) -> None:
        assert Style().bold().infix(Color.GREEN.bold()) == "\x1b[32m"

    @pytest.mark.parametrize("attribute, code", [
        ("italic", 23),
        ("underline", 24),
        ("blink", 25),
        ("reverse", 27),
        ("hidden", 28),
        ("strikethrough", 29),
    ])
    def test_attribute_off_codes(self, attribute: str, code: int) -> None:
        styled = getattr(Color.RED.normal(), attribute)()
        assert styled.infix(Color.RED.normal()) == f"\x1b[{code}m"

    @pytest.mark.parametrize("attribute", [
        "bold", "dimmed", "italic", "underline", "blink", "reverse", "hidden", "strikethrough",
    ])
    def test_removal_to_plain_is_reset(self, attribute: str) -> None:
        styled = getattr(Style(), attribute)()
        diff = styled.difference(Style())
        assert diff.kind == DifferenceKind.RESET
        assert diff.sequence() == "\x1b[0m"

    @pytest.mark.parametrize("attribute", [
        "bold", "dimmed", "italic", "underline", "blink", "reverse", "hidden", "strikethrough",
    ])
    def test_addition_from_plain(self, attribute: str) -> None:
        styled = getattr(Style(), attribute)()
        diff = Style().difference(styled)
        assert diff.kind == DifferenceKind.EXTRA_STYLES
        assert diff.sequence() == styled.prefix()

    def test_dimmed_to_white(self) -> None:
        assert Color.WHITE.dimmed().infix(Color.WHITE.normal()) == "\x1b[22m"

    def test_intensity_survivor_is_reapplied(self) -> None:
        both = Style().bold().dimmed()
        assert both.infix(Style().dimmed()) == "\x1b[22;2m"
        assert both.infix(Style().bold()) == "\x1b[22;1m"

    def test_foreground_removal(self) -> None:
        diff = Color.RED.on(Color.BLUE).difference(Style().on(Color.BLUE))
        assert diff.kind == DifferenceKind.EXTRA_STYLES
        assert diff.codes == ("39",)

    def test_background_removal(self) -> None:
        assert Color.RED.on(Color.BLUE).infix(Color.RED.normal()) == "\x1b[49m"

    def test_default_foreground_removal(self) -> None:
        diff = Color.DEFAULT.on(Color.BLUE).difference(Style().on(Color.BLUE))
        assert diff.kind == DifferenceKind.EXTRA_STYLES
        assert diff.sequence() == "\x1b[39m"
        # With nothing left, ESC[0m is shorter than ESC[39m
        assert Color.DEFAULT.normal().difference(Style()).kind == DifferenceKind.RESET

    def test_rgb_color_change(self) -> None:
        steel = Color.rgb(70, 130, 180)
        ink = Color.rgb(5, 10, 15)
        assert steel.infix(ink) == "\x1b[38;2;5;10;15m"
        assert Style().on(steel).infix(Style().on(ink)) == "\x1b[48;2;5;10;15m"

    def test_multiple_removals(self) -> None:
        diff = Color.RED.bold().underline().difference(Color.RED.normal())
        assert diff.kind == DifferenceKind.EXTRA_STYLES
        assert diff.sequence() == "\x1b[22;24m"

    def test_tie_prefers_targeted(self) -> None:
        # ESC[22;23;25m and ESC[0mESC[4;31m are the same length
        busy = Color.RED.bold().italic().blink().underline()
        diff = busy.difference(Color.RED.underline())
        assert diff.kind == DifferenceKind.EXTRA_STYLES
        assert diff.sequence() == "\x1b[22;23;25m"

    def test_reset_when_shorter(self) -> None:
        busy = Style().bold().italic().underline().blink()
        diff = busy.difference(Color.RED.normal())
        assert diff.kind == DifferenceKind.RESET
        assert diff.sequence() == "\x1b[0m\x1b[31m"

    def test_depends_only_on_the_two_styles(self) -> None:
        first = between(Color.RED.bold(), Color.RED.normal())
        second = between(Color.RED.bold(), Color.RED.normal())
        assert first == second


class TestConservativeTransitions:

    def test_removal_forces_reset(self) -> None:
        diff = Color.GREEN.bold().difference(Color.GREEN.normal(), CONSERVATIVE)
        assert diff.kind == DifferenceKind.RESET
        assert diff.sequence() == "\x1b[0m\x1b[32m"

    def test_dimmed_to_white(self) -> None:
        assert Color.WHITE.dimmed().infix(Color.WHITE.normal(), CONSERVATIVE) == "\x1b[0m\x1b[37m"

    def test_dimmed_to_plain(self) -> None:
        assert Style().dimmed().infix(Style(), CONSERVATIVE) == "\x1b[0m"

    def test_color_removal_forces_reset(self) -> None:
        diff = Color.RED.on(Color.BLUE).difference(Color.RED.normal(), CONSERVATIVE)
        assert diff.kind == DifferenceKind.RESET

    def test_additions_stay_targeted(self) -> None:
        assert Color.WHITE.normal().infix(Color.WHITE.bold(), CONSERVATIVE) == "\x1b[1m"
        assert Color.WHITE.normal().infix(Color.BLUE.normal(), CONSERVATIVE) == "\x1b[34m"

    def test_identical_styles(self) -> None:
        assert Color.BLUE.bold().infix(Color.BLUE.bold(), CONSERVATIVE) == ""
