from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from ..core_types import MessageLike


def _describe(message: MessageLike) -> tuple[str, str]:
    text = getattr(message, "message", str(message))
    fields = getattr(message, "fields", {}) or {}
    details = ", ".join(f"{key}={value}" for key, value in fields.items())
    return text, details


def render_console(messages: Iterable[MessageLike], console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="Processing Report")
    table.add_column("Level", overflow="fold")
    table.add_column("Message", overflow="fold")
    table.add_column("Details", overflow="fold")

    for message in messages:
        text, details = _describe(message)
        table.add_row(message.log_level.value.upper(), text, details)

    if len(table.rows) == 0:
        console.print("[green]No messages recorded.[/green]")
        return

    console.print(table)
