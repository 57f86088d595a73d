"""CLI command implementations."""

from weave.commands.stack import stack_command
from weave.commands.text import text_command

__all__ = [
    "stack_command",
    "text_command",
]
