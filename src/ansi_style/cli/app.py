"""Typer CLI application for painting text and inspecting SGR codes."""

import logging
import os
from typing import Annotated

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from ansi_style.core.constants import ESC
from ansi_style.core.difference import TransitionPolicy
from ansi_style.core.style import Style
from ansi_style.parse import parse_style
from ansi_style.render.sequence import render_sequence

POLICY_ENV_VAR = "ANSI_STYLE_POLICY"


def visible(codes: str) -> str:
    """Make escape sequences printable: '\\x1b[1m' -> 'ESC[1m'."""
    return codes.replace(ESC, "ESC")


def policy_from_env() -> TransitionPolicy:
    """
    Policy from the ANSI_STYLE_POLICY environment variable.

    Accepts 'minimal' or 'conservative' (case-insensitive); anything else
    raises ValueError. Unset means MINIMAL.
    """
    value = os.environ.get(POLICY_ENV_VAR)
    if not value:
        return TransitionPolicy.MINIMAL
    try:
        return TransitionPolicy(value.strip().lower())
    except ValueError:
        raise ValueError(
            f"{POLICY_ENV_VAR} must be 'minimal' or 'conservative', got {value!r}"
        ) from None


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install ansi-style[cli]")

    app = typer.Typer(
        name="ansi-style",
        help="Paint text with ANSI styles and inspect the escape codes they produce.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def style_arg(description: str, param_hint: str) -> Style:
        try:
            return parse_style(description)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint=param_hint)

    def policy_for(conservative: bool) -> TransitionPolicy:
        if conservative:
            return TransitionPolicy.CONSERVATIVE
        try:
            return policy_from_env()
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log transition decisions")] = False,
    ) -> None:
        """Paint text with ANSI styles and inspect the escape codes they produce."""
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
                force=True,
            )

    @app.command()
    def paint(
        text: Annotated[str, typer.Argument(help="Text to paint")],
        style: Annotated[str, typer.Option("--style", "-s", help='Style description, e.g. "bold red on blue"')] = "plain",
    ) -> None:
        """Print TEXT wrapped in the escape codes for a style."""
        print(style_arg(style, "--style").paint(text))

    @app.command()
    def codes(
        style: Annotated[str, typer.Argument(help='Style description, e.g. "bold red"')],
    ) -> None:
        """Show the prefix and suffix sequences of a style."""
        parsed = style_arg(style, "STYLE")
        if parsed.is_plain():
            console.print("[dim]plain style: no escape codes[/]")
            return
        console.print(f"[bold]prefix:[/] {visible(parsed.prefix())}", highlight=False)
        console.print(f"[bold]suffix:[/] {visible(parsed.suffix())}", highlight=False)

    @app.command()
    def transition(
        source: Annotated[str, typer.Argument(help="Style of the preceding text")],
        target: Annotated[str, typer.Argument(help="Style of the following text")],
        conservative: Annotated[bool, typer.Option("--conservative", "-c", help="Reset instead of sending off-codes")] = False,
    ) -> None:
        """Show the codes needed to switch from one style to another."""
        difference = style_arg(source, "SOURCE").difference(
            style_arg(target, "TARGET"), policy_for(conservative)
        )
        codes_text = difference.sequence()
        console.print(
            f"[bold]{difference.kind.value}:[/] {visible(codes_text) or '(nothing)'}",
            highlight=False,
        )

    @app.command()
    def describe(
        style: Annotated[str, typer.Argument(help='Style description, e.g. "bold red"')],
    ) -> None:
        """Describe a parsed style."""
        console.print(style_arg(style, "STYLE").describe(), markup=False, highlight=False)

    @app.command()
    def sequence(
        fragments: Annotated[list[str], typer.Argument(help='Fragments as "STYLE=TEXT"')],
        conservative: Annotated[bool, typer.Option("--conservative", "-c", help="Reset instead of sending off-codes")] = False,
        show_codes: Annotated[bool, typer.Option("--show-codes", help="Print escape codes in visible form")] = False,
    ) -> None:
        """Render several styled fragments with minimal codes between them."""
        pairs: list[tuple[Style, str]] = []
        for fragment in fragments:
            description, sep, text = fragment.partition("=")
            if not sep:
                raise typer.BadParameter(f"Expected STYLE=TEXT, got {fragment!r}", param_hint="FRAGMENTS")
            pairs.append((style_arg(description, "FRAGMENTS"), text))

        output = render_sequence(pairs, policy_for(conservative))
        if show_codes:
            console.print(visible(output), markup=False, highlight=False)
        else:
            print(output)

    return app
