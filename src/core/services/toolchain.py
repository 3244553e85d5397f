"""Toolchain service.

Turns "run the engine" / "run the tests" into concrete Cargo command lines
and launches them through the injected `ProcessRunner`, with the process
environment layered over the inherited one.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence

from core.config import AppSettings
from core.domain.models import Invocation, InvocationOutcome, ProcessEnvironment
from core.interfaces.runner import ProcessRunner
from core.resources_loader import project_root

logger = logging.getLogger(__name__)


class Toolchain:
    def __init__(
        self,
        settings: AppSettings,
        environment: ProcessEnvironment,
        runner: ProcessRunner,
        *,
        base_env: Mapping[str, str] | None = None,
    ) -> None:
        self.settings = settings
        self.environment = environment
        self.runner = runner
        self._base_env = base_env

    def run(self, args: Sequence[str]) -> InvocationOutcome:
        """`cargo run [cargo_args] -- <args>`: everything after `--` reaches the engine."""

        argv = [self.settings.toolchain, "run", *self.settings.cargo_args, "--", *args]
        return self._launch(argv)

    def test(self, args: Sequence[str]) -> InvocationOutcome:
        """`cargo test [cargo_args] <args>`: Cargo interprets the arguments itself."""

        argv = [self.settings.toolchain, "test", *self.settings.cargo_args, *args]
        return self._launch(argv)

    def version(self) -> InvocationOutcome:
        return self._launch([self.settings.toolchain, "--version"], capture_output=True)

    def _launch(self, argv: list[str], *, capture_output: bool = False) -> InvocationOutcome:
        invocation = Invocation(argv=argv, cwd=project_root(self.settings))
        base = os.environ if self._base_env is None else self._base_env
        logger.debug("launching %s (cwd=%s)", invocation.display(), invocation.cwd)
        return self.runner.run(
            invocation,
            env=self.environment.apply(base),
            timeout=self.settings.timeout_seconds,
            capture_output=capture_output,
        )
