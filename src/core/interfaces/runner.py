"""Process runner contract.

Why Protocol:
- A structural contract (duck typing) without rigid inheritance.
- Lets the subprocess adapter be swapped for a recording fake in tests,
  so the dispatcher is exercised without launching Cargo.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from core.domain.models import Invocation, InvocationOutcome


@runtime_checkable
class ProcessRunner(Protocol):
    """Minimal contract for launching the external toolchain.

    Design rules:
    - `run` is synchronous and blocks until the child exits.
    - Returns the child's status as an outcome; raises only when the child
      could not be started or timed out.
    """

    def run(
        self,
        invocation: Invocation,
        *,
        env: Mapping[str, str],
        timeout: float | None = None,
        capture_output: bool = False,
    ) -> InvocationOutcome:
        """Run `invocation` with exactly `env` as its environment."""

        ...
