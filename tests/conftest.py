"""Shared fixtures: isolated settings, a recording runner, a working directory of their own."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import pytest

from core.config import AppSettings
from core.domain.models import Invocation, InvocationOutcome, ProcessEnvironment
from core.services.toolchain import Toolchain


class RecordingRunner:
    """Fake `ProcessRunner`: remembers every launch, never starts a process."""

    def __init__(self, exit_code: int = 0, stdout: str | None = None) -> None:
        self.exit_code = exit_code
        self.stdout = stdout
        self.calls: list[dict[str, object]] = []

    def run(
        self,
        invocation: Invocation,
        *,
        env: Mapping[str, str],
        timeout: float | None = None,
        capture_output: bool = False,
    ) -> InvocationOutcome:
        self.calls.append(
            {
                "argv": list(invocation.argv),
                "cwd": invocation.cwd,
                "env": dict(env),
                "timeout": timeout,
                "capture_output": capture_output,
            }
        )
        return InvocationOutcome(
            argv=list(invocation.argv),
            exit_code=self.exit_code,
            stdout=self.stdout if capture_output else None,
        )

    @property
    def argvs(self) -> list[list[str]]:
        return [call["argv"] for call in self.calls]  # type: ignore[misc]


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    for key in list(os.environ):
        if key.upper().startswith("SURFACE_AREA_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    root = tmp_path / "engine"
    (root / "data").mkdir(parents=True)
    (root / "Cargo.toml").write_text('[package]\nname = "surface_area"\n', encoding="utf-8")
    (root / "data" / "2632.kml").write_text("<kml/>\n", encoding="utf-8")
    return root


@pytest.fixture()
def settings(project: Path) -> AppSettings:
    return AppSettings(project_dir=project)


@pytest.fixture()
def environment() -> ProcessEnvironment:
    return ProcessEnvironment(variables={"RUST_LOG": "trace"})


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def toolchain(settings: AppSettings, environment: ProcessEnvironment, runner: RecordingRunner) -> Toolchain:
    return Toolchain(settings, environment, runner, base_env={"PATH": "/usr/bin"})
