"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets the toolchain service and the doctor read configuration consistently.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "surface-area-runner"

_ENV_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


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
    """Write or update variables in the user's global .env.

    Keys with a `None` value are left as they were.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# surface-area-runner user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed, validated at the edge (env vars) so the core never parses strings.
    - A single configuration contract for the CLI, the toolchain and the doctor.
    """

    model_config = SettingsConfigDict(
        env_prefix="SURFACE_AREA_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    toolchain: str = Field(
        default="cargo",
        min_length=1,
        description="Executable of the build/run/test toolchain.",
    )
    cargo_args: list[str] = Field(
        default_factory=list,
        description="Extra toolchain flags placed before the `--` separator (e.g. --release).",
    )

    log_env_var: str = Field(
        default="RUST_LOG",
        description="Environment variable controlling the engine's log verbosity.",
    )
    log_level: str = Field(
        default="trace",
        min_length=1,
        description="Value exported through `log_env_var` before any command runs.",
    )

    sample_input: str = Field(
        default="data/2632.kml",
        min_length=1,
        description="Sample KML used by `testdata`, relative to the project root.",
    )
    project_dir: Path | None = Field(
        default=None,
        description="Toolchain working directory. Unset: nearest ancestor with Cargo.toml.",
    )

    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Optional limit for a toolchain run (seconds). Unset: wait indefinitely.",
    )

    harness_log_level: str = Field(
        default="WARNING",
        description="Log level of the harness itself (not the engine).",
    )

    @field_validator("log_env_var")
    @classmethod
    def _check_env_name(cls, value: str) -> str:
        if not _ENV_NAME_RE.match(value):
            raise ValueError(f"not a valid environment variable name: {value!r}")
        return value
