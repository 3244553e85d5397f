"""Error taxonomy and exit codes of the harness.

Exit statuses are stable:

| Status | Meaning |
|---|---|
| child's own | the handler's outcome, passed through |
| 2 | no command given |
| 78 | configuration could not be initialized |
| 124 | the toolchain exceeded the configured timeout |
| 126 | the toolchain could not be launched |
| 127 | unknown command name |
| 130 | interrupted |

A failing child is not an error here: it is an `InvocationOutcome` with a
non-zero exit code and travels back to the process boundary as a value.
"""

from __future__ import annotations

from collections.abc import Sequence

EXIT_MISSING_COMMAND = 2
EXIT_INITIALIZATION_FAILURE = 78
EXIT_TOOLCHAIN_TIMEOUT = 124
EXIT_TOOLCHAIN_LAUNCH = 126
EXIT_UNKNOWN_COMMAND = 127
EXIT_INTERRUPTED = 130


class HarnessError(Exception):
    """Base class for errors that end the process with a dedicated status."""

    exit_code: int = 1

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class MissingCommandError(HarnessError):
    exit_code = EXIT_MISSING_COMMAND

    def __init__(self, available: Sequence[str] = ()) -> None:
        hint = f"available commands: {', '.join(available)}" if available else None
        super().__init__("missing command: usage: surface-area <command> [args...]", hint=hint)
        self.available = list(available)


class UnknownCommandError(HarnessError):
    exit_code = EXIT_UNKNOWN_COMMAND

    def __init__(self, name: str | None, available: Sequence[str] = ()) -> None:
        hint = f"available commands: {', '.join(available)}" if available else None
        super().__init__(f"unknown command: {name!r}", hint=hint)
        self.name = name
        self.available = list(available)


class InitializationError(HarnessError):
    """Process-wide configuration could not be established; nothing was dispatched."""

    exit_code = EXIT_INITIALIZATION_FAILURE


class ToolchainLaunchError(HarnessError):
    exit_code = EXIT_TOOLCHAIN_LAUNCH


class ToolchainTimeoutError(HarnessError):
    exit_code = EXIT_TOOLCHAIN_TIMEOUT
