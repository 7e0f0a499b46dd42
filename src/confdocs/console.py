"""Console messages for confdocs.

Everything here goes to stderr; stdout carries only the rendered document
so it can be redirected into a file.
"""

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True, highlight=False)


def _emit(symbol: str, style: str, msg: str) -> None:
    # Setting names and defaults may contain brackets; never read them as markup
    console.print(f"[{style}]{symbol}[/{style}] {escape(msg)}")


def info(msg: str) -> None:
    """Print an informational message."""
    _emit("ℹ", "blue", msg)


def warning(msg: str) -> None:
    """Print an advisory, e.g. a missing option replaced by its default."""
    _emit("⚠", "yellow", msg)


def error(msg: str) -> None:
    _emit("✗", "red", msg)
