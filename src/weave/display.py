"""Rich display utilities for Weave results."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree

from weave.views.models import StackView, View

console = Console()


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]✗[/] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[bold blue]ℹ[/] {message}")


def view_tree(view: View, tree: Tree | None = None) -> Tree:
    """Build a rich Tree mirroring a view hierarchy.

    Stacks become branches with their arranged subviews as children,
    in arrangement order.
    """
    label = Text(view.describe())
    node = Tree(label) if tree is None else tree.add(label)
    if isinstance(view, StackView):
        for child in view.arranged_subviews:
            view_tree(child, node)
    return node


def print_view_tree(view: View, title: str = "Stack") -> None:
    """Print a view hierarchy inside a panel."""
    console.print(Panel(view_tree(view), title=f"[bold]{title}[/]", border_style="cyan"))


def print_text(text: Text, title: str = "Text") -> None:
    """Print built text inside a panel, showing line breaks as-is."""
    console.print(Panel(text, title=f"[bold]{title}[/]", border_style="green"))
