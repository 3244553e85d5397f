"""Command dispatcher.

`argv[0]` selects the handler, `argv[1:]` is handed over untouched, and the
handler's exit code becomes the process status without translation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from core.errors import HarnessError, MissingCommandError
from core.services.registry import CommandRegistry

logger = logging.getLogger(__name__)

ErrorReporter = Callable[[HarnessError], None]


def _log_error(error: HarnessError) -> None:
    logger.error("%s", error.message)
    if error.hint:
        logger.error("%s", error.hint)


class Dispatcher:
    def __init__(self, registry: CommandRegistry, *, reporter: ErrorReporter | None = None) -> None:
        self.registry = registry
        self.reporter = reporter or _log_error

    def dispatch(self, argv: Sequence[str]) -> int:
        """Run exactly one handler and return the status to exit with."""

        try:
            if not argv:
                raise MissingCommandError(self.registry.names())
            name, rest = argv[0], list(argv[1:])
            handler = self.registry.resolve(name)
            logger.debug("dispatching %r with %d argument(s)", name, len(rest))
            outcome = handler(rest)
        except HarnessError as exc:
            self.reporter(exc)
            return exc.exit_code

        logger.debug("%r finished with status %d", name, outcome.exit_code)
        return outcome.exit_code
