"""Environment initializer.

Builds the process-wide configuration (the engine's log verbosity) once, at
startup, before anything is dispatched. The result is an explicit value that
is handed to the toolchain service; `os.environ` is never modified.
"""

from __future__ import annotations

import logging

from core.config import AppSettings
from core.domain.models import ProcessEnvironment
from core.errors import InitializationError

logger = logging.getLogger(__name__)


class EnvironmentInitializer:
    """Owns the run-once guard; the entry point creates one per process."""

    def __init__(self) -> None:
        self._environment: ProcessEnvironment | None = None

    @property
    def initialized(self) -> bool:
        return self._environment is not None

    def initialize(self, settings: AppSettings) -> ProcessEnvironment:
        """Create the process environment. A second call is an error."""

        if self._environment is not None:
            raise InitializationError("process environment already initialized")

        level = settings.log_level.strip()
        if not level:
            raise InitializationError(
                f"empty value for {settings.log_env_var}",
                hint="set SURFACE_AREA_LOG_LEVEL (e.g. trace, debug, info)",
            )

        self._environment = ProcessEnvironment(variables={settings.log_env_var: level})
        logger.debug("process environment: %s", self._environment.variables)
        return self._environment
