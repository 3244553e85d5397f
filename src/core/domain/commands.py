"""Command names understood by the dispatcher.

This module centralizes the closed set of operations the harness exposes.
Keeping it in the domain layer lets the registry, the CLI help output and
the tests share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class CommandName(str, Enum):
    """Every command the registry must bind to a handler."""

    TESTDATA = "testdata"
    COMPUTE = "compute"
    TEST = "test"
    INIT = "init"
    DOCTOR = "doctor"
    HELP = "help"

    @classmethod
    def parse(cls, value: str | None) -> "CommandName | None":
        """Exact, case-sensitive lookup; `None` for empty or unknown names."""

        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
