"""Stack command implementation."""

from pathlib import Path

from weave.config import load_config, load_config_file, merge_overrides
from weave.demos import SYMBOLS, symbol_list
from weave.display import print_view_tree


def stack_command(
    config_path: Path | None = None,
    axis: str | None = None,
    spacing: float | None = None,
    alignment: str | None = None,
) -> None:
    """Build and print the symbol list demo as a view tree.

    The loaded config is passed to the builder directly; the process-wide
    default configuration is left untouched.

    Args:
        config_path: Explicit config file; defaults to .weave/config.yaml
        axis: Override for the stack axis
        spacing: Override for the stack spacing
        alignment: Override for the stack alignment

    Raises:
        ConfigurationError: If the config file or an override is invalid
    """
    config = load_config_file(config_path) if config_path else load_config()
    config = merge_overrides(config, axis=axis, spacing=spacing, alignment=alignment)
    view = symbol_list("This is a heading", SYMBOLS, config=config.stack)
    print_view_tree(view, title="Symbols")
