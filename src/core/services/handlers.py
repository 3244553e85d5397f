"""Handlers bound to command names.

Each handler receives the arguments after the command name, performs one
operation and returns its `InvocationOutcome` as-is.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from core.domain.models import InvocationOutcome, ProcessEnvironment
from core.services.toolchain import Toolchain

logger = logging.getLogger(__name__)


class FixedInputRun:
    """Runs the engine against the configured sample input (smoke test)."""

    summary = "run the engine on the bundled sample KML"

    def __init__(self, toolchain: Toolchain, sample_input: str) -> None:
        self.toolchain = toolchain
        self.sample_input = sample_input

    def __call__(self, args: Sequence[str]) -> InvocationOutcome:
        if args:
            logger.debug("testdata ignores its arguments: %s", list(args))
        return self.toolchain.run([self.sample_input])


class ForwardingRun:
    summary = "run the engine with the given arguments"

    def __init__(self, toolchain: Toolchain) -> None:
        self.toolchain = toolchain

    def __call__(self, args: Sequence[str]) -> InvocationOutcome:
        return self.toolchain.run(args)


class TestRun:
    summary = "run the engine's test suite with the given arguments"

    # Not a pytest test class despite the name.
    __test__ = False

    def __init__(self, toolchain: Toolchain) -> None:
        self.toolchain = toolchain

    def __call__(self, args: Sequence[str]) -> InvocationOutcome:
        return self.toolchain.test(args)


class PrintEnvironment:
    """Prints the process environment as `export` lines.

    Usage: `eval "$(surface-area init)"` applies it to the current shell.
    """

    summary = "print the engine environment as shell exports"

    def __init__(self, environment: ProcessEnvironment, stream: TextIO | None = None) -> None:
        self.environment = environment
        self._stream = stream

    def __call__(self, args: Sequence[str]) -> InvocationOutcome:
        stream = self._stream or sys.stdout
        for line in self.environment.as_exports():
            stream.write(line + "\n")
        stream.flush()
        return InvocationOutcome.success()
