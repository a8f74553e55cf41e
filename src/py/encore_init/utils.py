"""Utility helpers for encore-init."""

from collections.abc import Sequence

from rich.console import Console

__all__ = ("console", "format_command")

console = Console()
"""Shared console for all user-facing output."""


def format_command(command: "Sequence[str] | None") -> str:
    """Render a command line for display.

    Args:
        command: The command and its arguments.

    Returns:
        The space-joined command, or an empty string when there is none.
    """
    if not command:
        return ""
    return " ".join(command)
