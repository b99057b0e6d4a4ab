"""Pytest configuration shared by the test modules."""

import pytest

from ansi_style.core.color import Color
from ansi_style.core.style import Style
from ansi_style.cli.app import POLICY_ENV_VAR


@pytest.fixture(autouse=True)
def default_policy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keep tests independent of the caller's environment.

    Tests that exercise ANSI_STYLE_POLICY set it explicitly.
    """
    monkeypatch.delenv(POLICY_ENV_VAR, raising=False)


@pytest.fixture
def red() -> Style:
    return Color.RED.normal()


@pytest.fixture
def red_bold() -> Style:
    return Color.RED.bold()


@pytest.fixture
def plain() -> Style:
    return Style()
