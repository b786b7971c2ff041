"""Rich components for presenting an executor's state.

Kept apart from the commands so `fetch` and future commands share the same
tables and panels.
"""

from __future__ import annotations

from typing import Any

from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from remote_data.core.domain.models import Blob
from remote_data.core.errors import HTTPStatusError, RemoteDataError


def build_state_table(*, data: Any, error: RemoteDataError | None, loading: bool) -> Table:
    """Summary of the `data` / `error` / `loading` cells."""

    table = Table(title="Request state")
    table.add_column("Cell", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("loading", "yes" if loading else "no")
    table.add_row("data", describe_body(data))
    table.add_row("error", Text(str(error), style="red") if error else Text("-", style="dim"))
    return table


def describe_body(data: Any) -> str:
    if data is None:
        return "-"
    if isinstance(data, Blob):
        return f"{data.content_type} blob ({data.size} bytes)"
    if isinstance(data, str) and data.startswith("blob:"):
        return f"object URL {data}"
    if isinstance(data, dict):
        return f"JSON object ({len(data)} keys)"
    if isinstance(data, list):
        return f"JSON array ({len(data)} items)"
    return type(data).__name__


def build_body_panel(data: Any) -> Panel | None:
    """Pretty JSON for decoded JSON bodies; None for binary results."""

    if data is None or isinstance(data, Blob):
        return None
    if isinstance(data, str) and data.startswith("blob:"):
        return None
    return Panel(JSON.from_data(data), title=Text("Response", style="bold green"), border_style="green")


def build_error_panel(error: RemoteDataError) -> Panel:
    title = Text(type(error).__name__, style="bold red")
    body = Text(str(error))
    if isinstance(error, HTTPStatusError) and error.status in (401, 403):
        body.append("\n\nCheck the access token (`remote-data doctor setup-auth`).", style="dim")
    return Panel(body, title=title, border_style="red")
