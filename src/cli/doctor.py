"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from dataclasses import dataclass, field

import typer
from rich.console import Console

from cli.ui_components import build_doctor_table
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.models import InvocationOutcome
from core.errors import HarnessError
from core.resources_loader import MANIFEST_NAME, project_root, sample_input_path
from core.services.toolchain import Toolchain

app = typer.Typer(no_args_is_help=True, help="Toolchain diagnostics and user configuration.")


@dataclass
class DoctorContext:
    settings: AppSettings
    toolchain: Toolchain
    console: Console = field(default_factory=Console)


def _state(ctx: typer.Context) -> DoctorContext:
    state = ctx.find_object(DoctorContext)
    if state is None:
        raise typer.BadParameter("doctor must be started through `surface-area doctor`")
    return state


def _check_version(toolchain: Toolchain) -> tuple[bool, str]:
    try:
        outcome = toolchain.version()
    except HarnessError as exc:
        return False, exc.message
    if not outcome.ok:
        return False, f"exit status {outcome.exit_code}"
    lines = (outcome.stdout or "").strip().splitlines()
    return True, lines[0] if lines else "OK"


@app.command()
def check(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    state = _state(ctx)
    settings = state.settings

    table = build_doctor_table()
    failed = False

    # Toolchain
    located = shutil.which(settings.toolchain)
    if located:
        table.add_row("Toolchain", "OK", located)
        ok_version, detail_version = _check_version(state.toolchain)
        table.add_row("Toolchain version", "OK" if ok_version else "FAIL", detail_version)
        failed = failed or not ok_version
    else:
        table.add_row("Toolchain", "FAIL", f"{settings.toolchain} not found on PATH")
        failed = True

    # Project
    root = project_root(settings)
    if (root / MANIFEST_NAME).is_file():
        table.add_row("Project", "OK", str(root))
    else:
        table.add_row("Project", "FAIL", f"no {MANIFEST_NAME} in {root}")
        failed = True

    sample = sample_input_path(settings)
    if sample.is_file():
        table.add_row("Sample input", "OK", str(sample))
    else:
        table.add_row("Sample input", "MISSING", f"{sample} (needed by `testdata`)")

    # Engine environment
    table.add_row("Engine log", "OK", f"{settings.log_env_var}={settings.log_level}")
    if settings.timeout_seconds is None:
        table.add_row("Timeout", "OK", "none (waits for the toolchain)")
    else:
        table.add_row("Timeout", "OK", f"{settings.timeout_seconds:g}s")

    user_env = get_user_env_file()
    table.add_row("User config", "OK" if user_env.exists() else "OPTIONAL", str(user_env))

    state.console.print(table)

    if failed:
        state.console.print("\n[yellow]Note:[/yellow] fix the FAIL rows, or run `surface-area doctor setup`.")
        raise typer.Exit(code=1)


@app.command()
def setup(ctx: typer.Context) -> None:
    """Interactive setup (stores config in the user config .env)."""

    state = _state(ctx)
    settings = state.settings

    toolchain = typer.prompt("Toolchain executable", default=settings.toolchain, show_default=True).strip()
    log_level = typer.prompt(f"{settings.log_env_var} level", default=settings.log_level, show_default=True).strip()
    sample = typer.prompt("Sample KML for `testdata`", default=settings.sample_input, show_default=True).strip()
    project = typer.prompt(
        "Project directory (empty: search for Cargo.toml)",
        default=str(settings.project_dir or ""),
        show_default=False,
    ).strip()

    if not toolchain or not log_level or not sample:
        raise typer.BadParameter("toolchain, level and sample input are required")

    env_path = write_user_env_vars(
        {
            "SURFACE_AREA_TOOLCHAIN": toolchain,
            "SURFACE_AREA_LOG_LEVEL": log_level,
            "SURFACE_AREA_SAMPLE_INPUT": sample,
            "SURFACE_AREA_PROJECT_DIR": project or None,
        }
    )

    state.console.print(f"[green]Saved config to:[/green] {env_path}")


class DoctorCommand:
    """Handler running the doctor sub-app with the forwarded arguments."""

    summary = "check the toolchain setup (check) or store user config (setup)"

    def __init__(self, settings: AppSettings, toolchain: Toolchain, console: Console | None = None) -> None:
        self.context = DoctorContext(settings=settings, toolchain=toolchain, console=console or Console())

    def __call__(self, args: Sequence[str]) -> InvocationOutcome:
        command = typer.main.get_command(app)
        try:
            command.main(
                args=list(args),
                prog_name="surface-area doctor",
                obj=self.context,
                standalone_mode=True,
            )
        except SystemExit as exc:
            return InvocationOutcome(exit_code=_exit_status(exc.code))
        return InvocationOutcome.success()


def _exit_status(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1
