"""Text command implementation."""

from pathlib import Path

import typer

from weave.config import load_config, load_config_file
from weave.demos import render_greeting
from weave.display import print_text


def text_command(
    is_even: bool,
    value: int | None,
    count: int,
    plain: bool = False,
    config_path: Path | None = None,
) -> None:
    """Build and print the greeting demo.

    Args:
        is_even: Which branch of the conditional to take
        value: Optional value; None skips the optional line
        count: Number of loop iterations
        plain: Print the raw string instead of a panel
        config_path: Explicit config file; defaults to .weave/config.yaml

    Raises:
        ConfigurationError: If the config file is invalid
    """
    config = load_config_file(config_path) if config_path else load_config()
    text = render_greeting(is_even, value, count, config=config.text)
    if plain:
        typer.echo(text.plain, nl=False)
        return
    print_text(text, title="Greeting")
