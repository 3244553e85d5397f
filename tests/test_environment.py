"""Environment initializer and the process environment value."""

from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

from core.config import AppSettings
from core.domain.models import ProcessEnvironment
from core.environment import EnvironmentInitializer
from core.errors import EXIT_INITIALIZATION_FAILURE, InitializationError


def test_defaults_enable_trace_logging() -> None:
    environment = EnvironmentInitializer().initialize(AppSettings())

    assert environment.variables == {"RUST_LOG": "trace"}


def test_configured_variable_and_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SURFACE_AREA_LOG_ENV_VAR", "ENGINE_LOG")
    monkeypatch.setenv("SURFACE_AREA_LOG_LEVEL", "debug")

    environment = EnvironmentInitializer().initialize(AppSettings())

    assert environment.get("ENGINE_LOG") == "debug"
    assert environment.get("RUST_LOG") is None


def test_runs_once_per_initializer() -> None:
    settings = AppSettings()
    initializer = EnvironmentInitializer()
    initializer.initialize(settings)

    assert initializer.initialized
    with pytest.raises(InitializationError):
        initializer.initialize(settings)


def test_failed_initialization_leaves_guard_open() -> None:
    initializer = EnvironmentInitializer()

    with pytest.raises(InitializationError):
        initializer.initialize(AppSettings(log_level=" "))

    assert not initializer.initialized
    assert initializer.initialize(AppSettings()).get("RUST_LOG") == "trace"


def test_blank_level_is_fatal() -> None:
    with pytest.raises(InitializationError) as info:
        EnvironmentInitializer().initialize(AppSettings(log_level="   "))

    assert info.value.exit_code == EXIT_INITIALIZATION_FAILURE


def test_os_environ_is_left_alone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RUST_LOG", raising=False)

    EnvironmentInitializer().initialize(AppSettings())

    assert "RUST_LOG" not in os.environ


def test_apply_layers_over_base_without_mutating_it() -> None:
    environment = ProcessEnvironment(variables={"RUST_LOG": "trace"})
    base = {"PATH": "/bin", "RUST_LOG": "warn"}

    merged = environment.apply(base)

    assert merged == {"PATH": "/bin", "RUST_LOG": "trace"}
    assert base["RUST_LOG"] == "warn"


def test_environment_is_frozen() -> None:
    environment = ProcessEnvironment(variables={"RUST_LOG": "trace"})

    with pytest.raises(ValidationError):
        environment.variables = {}  # type: ignore[misc]


def test_exports_are_shell_quoted() -> None:
    environment = ProcessEnvironment(variables={"RUST_LOG": "surface_area=trace,geo=info warn"})

    assert environment.as_exports() == ["export RUST_LOG='surface_area=trace,geo=info warn'"]
    assert ProcessEnvironment(variables={"RUST_LOG": "trace"}).as_exports() == ["export RUST_LOG=trace"]
