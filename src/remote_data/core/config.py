"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP client, session store, object URLs) read config the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "remote-data"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "remote-data"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "remote-data"
    return Path.home() / ".config" / "remote-data"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# remote-data user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Every field can be set through a `REMOTE_DATA_*` environment variable or
    one of the `.env` files listed in `model_config`.
    """

    model_config = SettingsConfigDict(
        env_prefix="REMOTE_DATA_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str | None = Field(
        default=None,
        description="Base URL prepended to relative targets.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (None waits for the transport).",
    )
    user_agent: str = Field(
        default="remote-data/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    access_token: str | None = Field(
        default=None,
        description="Bearer token used to seed the default session store.",
    )
    file_field: str = Field(
        default="medicalFile",
        min_length=1,
        description="Payload key whose file value switches the body to multipart.",
    )
    discard_stale: bool = Field(
        default=False,
        description="Ignore settlements of superseded invocations on the same executor.",
    )
    object_url_origin: str = Field(
        default="null",
        min_length=1,
        description="Origin embedded in generated blob: URLs.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level used by the CLI handler.",
    )
