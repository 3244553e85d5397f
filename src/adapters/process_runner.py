"""Wrapper around `subprocess`.

Why a wrapper:
- Standardizes how the toolchain is launched (no shell, explicit env, cwd).
- Maps launch failures and timeouts onto the harness' error taxonomy.
- Easy to test: the core only sees `core.interfaces.runner.ProcessRunner`.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping

from core.domain.models import Invocation, InvocationOutcome
from core.errors import ToolchainLaunchError, ToolchainTimeoutError

logger = logging.getLogger(__name__)


def normalize_returncode(returncode: int) -> int:
    """Child killed by signal N (negative code) -> 128 + N, like a shell."""

    if returncode < 0:
        return 128 + (-returncode)
    return returncode


class SubprocessRunner:
    """Runs the child synchronously, inheriting stdio unless output is captured."""

    def run(
        self,
        invocation: Invocation,
        *,
        env: Mapping[str, str],
        timeout: float | None = None,
        capture_output: bool = False,
    ) -> InvocationOutcome:
        executable = invocation.argv[0]
        if invocation.cwd is not None and not invocation.cwd.is_dir():
            raise ToolchainLaunchError(
                f"working directory does not exist: {invocation.cwd}",
                hint="set SURFACE_AREA_PROJECT_DIR",
            )
        try:
            completed = subprocess.run(
                invocation.argv,
                cwd=invocation.cwd,
                env=dict(env),
                timeout=timeout,
                stdout=subprocess.PIPE if capture_output else None,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ToolchainLaunchError(
                f"toolchain not found: {executable}",
                hint="install it or set SURFACE_AREA_TOOLCHAIN",
            ) from exc
        except PermissionError as exc:
            raise ToolchainLaunchError(f"toolchain is not executable: {executable}") from exc
        except NotADirectoryError as exc:
            raise ToolchainLaunchError(f"working directory is not usable: {invocation.cwd}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ToolchainTimeoutError(
                f"{invocation.display()} did not finish within {timeout:g}s",
                hint="raise or unset SURFACE_AREA_TIMEOUT_SECONDS",
            ) from exc

        exit_code = normalize_returncode(completed.returncode)
        logger.debug("%s exited with %d", executable, exit_code)
        return InvocationOutcome(
            argv=list(invocation.argv),
            exit_code=exit_code,
            stdout=completed.stdout if capture_output else None,
        )
