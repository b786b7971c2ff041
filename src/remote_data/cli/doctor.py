"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from remote_data.adapters.http_client import build_async_client
from remote_data.adapters.session_store import SessionStore
from remote_data.core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings, url: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Show effective settings and check connectivity to the base URL."""

    settings = AppSettings()
    session = SessionStore.from_settings(settings)

    table = Table(title="remote-data Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if session.is_authenticated:
        table.add_row("Access token", "OK", "Authenticated requests enabled")
    else:
        table.add_row("Access token", "OPTIONAL", "No token -> --auth requests go out unauthenticated")

    timeout = f"{settings.http_timeout_seconds}s" if settings.http_timeout_seconds else "none"
    table.add_row("Timeout", "OK", timeout)
    table.add_row("Upload field", "OK", settings.file_field)
    table.add_row("Stale responses", "OK", "discarded" if settings.discard_stale else "last settlement wins")
    table.add_row("User config", "OK", str(get_user_env_file()))

    if settings.base_url:
        ok_http, detail_http = asyncio.run(_check_http(settings, settings.base_url))
        table.add_row("Base URL", "OK" if ok_http else "FAIL", f"{settings.base_url} ({detail_http})")
    else:
        table.add_row("Base URL", "OPTIONAL", "Not set -> targets must be absolute URLs")

    _console.print(table)


@app.command(name="setup-auth")
def setup_auth() -> None:
    """Interactive setup of base URL and access token (stored in the user config .env)."""

    settings = AppSettings()

    base_url = typer.prompt("Base URL", default=settings.base_url or "", show_default=True).strip()
    token = typer.prompt("Access token", hide_input=True, confirmation_prompt=False).strip()

    if not token:
        raise typer.BadParameter("access token is required")

    env_path = write_user_env_vars(
        {
            "REMOTE_DATA_BASE_URL": base_url or None,
            "REMOTE_DATA_ACCESS_TOKEN": token,
        }
    )

    _console.print(f"[green]Saved auth config to:[/green] {env_path}")
