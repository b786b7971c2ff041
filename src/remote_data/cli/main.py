"""`remote-data` command line.

`fetch` runs one exchange through `RequestExecutor` and renders the resulting
state; `doctor` groups the environment checks.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console

from remote_data.adapters.http_client import build_async_client
from remote_data.adapters.object_urls import get_object_url_registry
from remote_data.adapters.session_store import SessionStore
from remote_data.cli import doctor
from remote_data.cli.log_setup import configure_logging
from remote_data.cli.ui_components import build_body_panel, build_error_panel, build_state_table
from remote_data.core.config import AppSettings
from remote_data.core.domain.models import Blob, FileUpload, HttpMethod, UserData
from remote_data.core.services.request_executor import RequestExecutor

app = typer.Typer(no_args_is_help=True, help="Fetch remote data with reactive request state.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request/response details."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


def _parse_fields(fields: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in fields:
        if "=" not in item:
            raise typer.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--field")
        key, value = item.split("=", 1)
        out[key.strip()] = value
    return out


def _build_payload(
    *,
    json_body: str | None,
    fields: list[str],
    file: Path | None,
    settings: AppSettings,
) -> Any:
    if json_body is not None:
        if fields or file is not None:
            raise typer.BadParameter("--json cannot be combined with --field/--file", param_hint="--json")
        try:
            return json.loads(json_body)
        except ValueError:
            # Not JSON: sent verbatim as the body.
            return json_body

    payload: dict[str, Any] = _parse_fields(fields)
    if file is not None:
        payload[settings.file_field] = FileUpload.from_path(file)
    return payload or None


def _write_output(data: Any, output: Path) -> Path:
    output.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, Blob):
        output.write_bytes(data.content)
    elif isinstance(data, str) and data in get_object_url_registry():
        output.write_bytes(get_object_url_registry().resolve(data).content)
    else:
        output.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    return output


@app.command()
def fetch(
    url: str = typer.Argument(..., help="Absolute URL, or path relative to REMOTE_DATA_BASE_URL."),
    method: str = typer.Option("GET", "--method", "-X", help="HTTP method."),
    auth: bool = typer.Option(False, "--auth/--no-auth", help="Send the session's bearer token."),
    token: Optional[str] = typer.Option(None, "--token", help="Access token for this call (implies --auth)."),
    json_body: Optional[str] = typer.Option(None, "--json", help="JSON (or raw string) request body."),
    fields: Optional[List[str]] = typer.Option(None, "--field", "-F", help="Form field KEY=VALUE (repeatable)."),
    file: Optional[Path] = typer.Option(None, "--file", exists=True, dir_okay=False, help="File for the upload field."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the response body to this path."),
) -> None:
    """Run one request and show the resulting data / error / loading state."""

    settings = AppSettings()
    try:
        http_method = HttpMethod.parse(method)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--method") from exc

    payload = _build_payload(json_body=json_body, fields=fields or [], file=file, settings=settings)

    session = SessionStore.from_settings(settings)
    if token:
        session.sign_in(UserData(access_token=token))
        auth = True

    async def go() -> RequestExecutor:
        async with build_async_client(settings) as client:
            executor = RequestExecutor(
                url,
                auth,
                http_method,
                payload,
                credentials=session,
                client=client,
                settings=settings,
            )
            await executor.execute_result()
            return executor

    executor = asyncio.run(go())

    _console.print(
        build_state_table(
            data=executor.data.value,
            error=executor.error.value,
            loading=executor.loading.value,
        )
    )

    error = executor.error.value
    if error is not None:
        _console.print(build_error_panel(error))
        raise typer.Exit(code=1)

    panel = build_body_panel(executor.data.value)
    if panel is not None:
        _console.print(panel)

    if output is not None:
        path = _write_output(executor.data.value, output)
        _console.print(f"[green]Saved response to:[/green] {path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
