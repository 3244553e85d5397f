"""Command handler contract."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from core.domain.models import InvocationOutcome


@runtime_checkable
class CommandHandler(Protocol):
    """Accepts the arguments after the command name and yields an outcome.

    Handlers do not retry, suppress or translate a failing child.
    """

    summary: str

    def __call__(self, args: Sequence[str]) -> InvocationOutcome: ...
