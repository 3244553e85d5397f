"""Project and sample-data resolution.

This module lives in `core/` because:
- it centralizes *where* the engine project and its sample data live
- it avoids duplicating path logic between the toolchain service and the doctor.

The sample data itself is not shipped here; it belongs to the engine project.
"""

from __future__ import annotations

from pathlib import Path

from core.config import AppSettings

MANIFEST_NAME = "Cargo.toml"


def find_manifest_dir(start: Path | None = None) -> Path | None:
    """Nearest directory (from `start` upwards) holding a `Cargo.toml`.

    Order:
    1) `start` itself (defaults to the cwd)
    2) each parent, up to the filesystem root
    """

    start = (start or Path.cwd()).resolve()
    for candidate in (start, *start.parents):
        if (candidate / MANIFEST_NAME).is_file():
            return candidate
    return None


def project_root(settings: AppSettings) -> Path:
    """Working directory for every toolchain invocation.

    Rules:
    - If `project_dir` is configured, it is used as-is.
    - Otherwise the nearest ancestor of the cwd with a manifest.
    - Otherwise the cwd (the toolchain will report the missing manifest).
    """

    if settings.project_dir is not None:
        return settings.project_dir
    return find_manifest_dir() or Path.cwd()


def sample_input_path(settings: AppSettings) -> Path:
    """Absolute location of the `testdata` sample, for diagnostics."""

    path = Path(settings.sample_input)
    if path.is_absolute():
        return path
    return project_root(settings) / path
