"""
Utilities module for the arena.

Provides console printing helpers with rich formatting and the health bar
used by the stat tables.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, width=100)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any, console: Console | None = None) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.
        console (Console | None): The console to render with. Defaults to
            the module console.

    Returns:
        str: The captured output as a string.

    """
    console = console or _console
    with console.capture() as capture:
        console.print(content, markup=True, end="")
    return capture.get()


def format_number(value: float) -> str:
    """Formats a stat value, dropping the fractional part when it is zero."""
    return f"{value:g}"


def make_bar(
    current: float, maximum: float, length: int = 10, color: str = "white"
) -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (float): The current value.
        maximum (float): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    if maximum <= 0:
        return ""
    # Compute the filled part of the bar.
    ratio = min(max(current / maximum, 0.0), 1.0)
    filled = int(ratio * length)
    # Compute the empty part of the bar.
    empty = length - filled
    # Start by creating the bar with the filled part.
    bar = f"[{color}]" + "▮" * filled
    # If there is an empty part, add it to the bar.
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
