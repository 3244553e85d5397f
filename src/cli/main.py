"""Process entry point and composition root.

Order of operations:
1. settings are loaded (pydantic-settings)
2. the process environment is initialized, exactly once
3. the registry is assembled and `argv[0]` is dispatched
4. the handler's exit code becomes the process status
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console

from adapters.process_runner import SubprocessRunner
from cli.doctor import DoctorCommand
from cli.ui_components import build_commands_table, print_error
from core.config import AppSettings
from core.domain.commands import CommandName
from core.domain.models import InvocationOutcome, ProcessEnvironment
from core.environment import EnvironmentInitializer
from core.errors import EXIT_INTERRUPTED, HarnessError, InitializationError
from core.interfaces.runner import ProcessRunner
from core.log import setup_logging
from core.services.dispatcher import Dispatcher
from core.services.handlers import FixedInputRun, ForwardingRun, PrintEnvironment, TestRun
from core.services.registry import CommandRegistry
from core.services.toolchain import Toolchain


class ShowCommands:
    summary = "list the available commands"

    def __init__(self, console: Console, registry: Callable[[], CommandRegistry]) -> None:
        self.console = console
        self._registry = registry

    def __call__(self, args: Sequence[str]) -> InvocationOutcome:
        self.console.print(build_commands_table(self._registry()))
        return InvocationOutcome.success()


def load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise InitializationError(
            f"invalid configuration: {fields}",
            hint=str(exc),
        ) from exc
    except SettingsError as exc:
        raise InitializationError(
            f"invalid configuration: {exc}",
            hint='list values are JSON, e.g. SURFACE_AREA_CARGO_ARGS=\'["--release"]\'',
        ) from exc


def build_registry(
    settings: AppSettings,
    environment: ProcessEnvironment,
    runner: ProcessRunner,
    *,
    console: Console,
) -> CommandRegistry:
    toolchain = Toolchain(settings, environment, runner)
    registry: CommandRegistry | None = None

    def current() -> CommandRegistry:
        assert registry is not None
        return registry

    registry = CommandRegistry(
        {
            CommandName.TESTDATA: FixedInputRun(toolchain, settings.sample_input),
            CommandName.COMPUTE: ForwardingRun(toolchain),
            CommandName.TEST: TestRun(toolchain),
            CommandName.INIT: PrintEnvironment(environment),
            CommandName.DOCTOR: DoctorCommand(settings, toolchain, console),
            CommandName.HELP: ShowCommands(console, current),
        }
    )
    return registry


def main(
    argv: Sequence[str] | None = None,
    *,
    runner: ProcessRunner | None = None,
    console: Console | None = None,
    err_console: Console | None = None,
    initializer: EnvironmentInitializer | None = None,
) -> int:
    """Run one command and return the status to exit with."""

    argv = list(sys.argv[1:] if argv is None else argv)
    console = console or Console()
    err_console = err_console or Console(stderr=True)

    try:
        settings = load_settings()
        setup_logging(settings.harness_log_level, console=err_console)
        environment = (initializer or EnvironmentInitializer()).initialize(settings)
    except InitializationError as exc:
        print_error(err_console, exc)
        return exc.exit_code

    registry = build_registry(settings, environment, runner or SubprocessRunner(), console=console)

    def report(error: HarnessError) -> None:
        print_error(err_console, error)

    try:
        return Dispatcher(registry, reporter=report).dispatch(argv)
    except KeyboardInterrupt:
        err_console.print("[yellow]interrupted[/yellow]")
        return EXIT_INTERRUPTED


def run() -> None:
    raise SystemExit(main())
