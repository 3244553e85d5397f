"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Frozen models give us immutable values that are validated once at the edge.
- The dispatcher, the handlers and the runner exchange the same structures.

Note:
- These models describe *what* is run and *what came back*, not *how*.
"""

from __future__ import annotations

import shlex
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ProcessEnvironment(BaseModel):
    """Process-wide configuration set once before any command runs.

    It is injected into whatever launches the toolchain instead of being
    written into `os.environ`.
    """

    model_config = ConfigDict(frozen=True)

    variables: dict[str, str] = Field(
        default_factory=dict,
        description="Variables layered over the inherited environment of every child.",
    )

    def apply(self, base: Mapping[str, str]) -> dict[str, str]:
        """New mapping with our variables over `base`; `base` is untouched."""

        merged = dict(base)
        merged.update(self.variables)
        return merged

    def get(self, name: str) -> str | None:
        return self.variables.get(name)

    def as_exports(self) -> list[str]:
        """Shell `export` lines, suitable for `eval`."""

        return [f"export {key}={shlex.quote(value)}" for key, value in self.variables.items()]


class Invocation(BaseModel):
    """A single external command line and where to run it."""

    model_config = ConfigDict(frozen=True)

    argv: list[str] = Field(
        ...,
        min_length=1,
        description="Executable followed by its arguments, passed without a shell.",
    )
    cwd: Path | None = Field(
        default=None,
        description="Working directory of the child (inherited when unset).",
    )

    def display(self) -> str:
        return shlex.join(self.argv)


class InvocationOutcome(BaseModel):
    """Result of a handler: success or a failure code, never an exception.

    The dispatcher propagates `exit_code` as the process status untouched.
    """

    model_config = ConfigDict(frozen=True)

    argv: list[str] = Field(
        default_factory=list,
        description="Command line that produced this outcome (empty for in-process handlers).",
    )
    exit_code: int = Field(
        ...,
        ge=0,
        description="Process status reported by the child (or the handler).",
    )
    stdout: str | None = Field(
        default=None,
        description="Captured standard output, only when capture was requested.",
    )

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @classmethod
    def success(cls) -> "InvocationOutcome":
        return cls(exit_code=0)
