"""Weave CLI - demo scenes for the text and stack builders.

Commands:
- text: Build the greeting demo with the text builder
- stack: Build the symbol list demo with the stack builder
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from weave import __version__
from weave.commands import stack_command, text_command
from weave.display import print_error
from weave.exceptions import WeaveError

app = typer.Typer(
    help="Weave - declarative composition builders.\n\nRender the built-in demo scenes.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"weave {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log builder activity to stderr")
    ] = False,
) -> None:
    """Weave - declarative composition builders."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@app.command()
def text(
    even: Annotated[
        bool, typer.Option("--even/--odd", help="Which branch the conditional takes")
    ] = True,
    value: Annotated[
        Optional[int], typer.Option("--value", help="Optional value; omit to skip its line")
    ] = None,
    count: Annotated[int, typer.Option("--count", "-n", min=0, help="Loop iterations")] = 5,
    plain: Annotated[bool, typer.Option("--plain", help="Print the raw string")] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Config file (default: .weave/config.yaml)"),
    ] = None,
) -> None:
    """Build the greeting demo with the text builder.

    Examples:
        weave text                  # even branch, five numbers
        weave text --odd --value 1  # odd branch, optional line shown
        weave text --plain -n 0     # raw output, empty loop
    """
    try:
        text_command(even, value, count, plain=plain, config_path=config)
    except WeaveError as e:
        print_error(escape(e.message))
        raise typer.Exit(1) from e


@app.command()
def stack(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Config file (default: .weave/config.yaml)"),
    ] = None,
    axis: Annotated[
        Optional[str], typer.Option("--axis", help="horizontal or vertical")
    ] = None,
    spacing: Annotated[Optional[float], typer.Option("--spacing", help="Gap between rows")] = None,
    alignment: Annotated[
        Optional[str], typer.Option("--alignment", help="leading, center, trailing, ...")
    ] = None,
) -> None:
    """Build the symbol list demo with the stack builder.

    Examples:
        weave stack
        weave stack --axis vertical --spacing 10 --alignment leading
    """
    try:
        stack_command(config, axis=axis, spacing=spacing, alignment=alignment)
    except WeaveError as e:
        print_error(escape(e.message))
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
