"""SubprocessRunner against real (Python) child processes."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from adapters.process_runner import SubprocessRunner, normalize_returncode
from core.domain.models import Invocation
from core.errors import (
    EXIT_TOOLCHAIN_LAUNCH,
    EXIT_TOOLCHAIN_TIMEOUT,
    ToolchainLaunchError,
    ToolchainTimeoutError,
)
from core.interfaces.runner import ProcessRunner


def _python(code: str, cwd: Path | None = None) -> Invocation:
    return Invocation(argv=[sys.executable, "-c", code], cwd=cwd)


def test_is_a_process_runner() -> None:
    assert isinstance(SubprocessRunner(), ProcessRunner)


def test_exit_status_is_passed_through() -> None:
    outcome = SubprocessRunner().run(_python("import sys; sys.exit(3)"), env={})

    assert outcome.exit_code == 3
    assert not outcome.ok
    assert outcome.stdout is None


def test_child_sees_exactly_the_given_environment(tmp_path: Path) -> None:
    code = "import os; print(os.environ.get('RUST_LOG')); print(os.getcwd())"

    outcome = SubprocessRunner().run(
        _python(code, cwd=tmp_path),
        env={"RUST_LOG": "trace", "SYSTEMROOT": "C:\\Windows"},
        capture_output=True,
    )

    lines = outcome.stdout.splitlines()
    assert outcome.ok
    assert lines[0] == "trace"
    assert Path(lines[1]).resolve() == tmp_path.resolve()


def test_missing_toolchain_is_a_launch_error() -> None:
    invocation = Invocation(argv=["surface-area-no-such-toolchain", "run"])

    with pytest.raises(ToolchainLaunchError) as info:
        SubprocessRunner().run(invocation, env={})

    assert info.value.exit_code == EXIT_TOOLCHAIN_LAUNCH
    assert "surface-area-no-such-toolchain" in info.value.message


def test_missing_working_directory_is_not_a_missing_toolchain(tmp_path: Path) -> None:
    invocation = _python("print(1)", cwd=tmp_path / "nope")

    with pytest.raises(ToolchainLaunchError) as info:
        SubprocessRunner().run(invocation, env={})

    assert info.value.exit_code == EXIT_TOOLCHAIN_LAUNCH
    assert "working directory does not exist" in info.value.message
    assert info.value.hint == "set SURFACE_AREA_PROJECT_DIR"


def test_timeout_is_reported() -> None:
    with pytest.raises(ToolchainTimeoutError) as info:
        SubprocessRunner().run(_python("import time; time.sleep(10)"), env={}, timeout=0.2)

    assert info.value.exit_code == EXIT_TOOLCHAIN_TIMEOUT


@pytest.mark.parametrize(("returncode", "expected"), [(0, 0), (1, 1), (101, 101), (-9, 137), (-15, 143)])
def test_normalize_returncode(returncode: int, expected: int) -> None:
    assert normalize_returncode(returncode) == expected
