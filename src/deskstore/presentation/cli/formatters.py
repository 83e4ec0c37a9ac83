"""Rich formatting utilities for the CLI.

Knows nothing about the store; only renders values and messages.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

console = Console()


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


def success_message(message: str) -> None:
    """Print a green confirmation line."""
    console.print(f"[green]✔ {message}[/]")


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


def plain(text: str) -> None:
    """Print *text* exactly, without markup or wrapping."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# Values / documents
# ---------------------------------------------------------------------------


def render_value(value: Any) -> str:
    """JSON rendering of a single setting value."""
    return json.dumps(value, ensure_ascii=False)


def json_panel(document: dict, title: str = "storage.json") -> None:
    """Render the document inside a syntax-highlighted panel."""
    raw = json.dumps(document, indent=2, ensure_ascii=False)
    console.print(
        Panel(
            Syntax(raw, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )
