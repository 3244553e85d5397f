"""Command registry.

A fixed mapping from `CommandName` to handler, complete at construction and
read-only afterwards.
"""

from __future__ import annotations

from collections.abc import ItemsView, Mapping
from types import MappingProxyType

from core.domain.commands import CommandName
from core.errors import UnknownCommandError
from core.interfaces.handler import CommandHandler


class CommandRegistry:
    def __init__(self, handlers: Mapping[CommandName, CommandHandler]) -> None:
        missing = [name.value for name in CommandName if name not in handlers]
        if missing:
            raise ValueError(f"no handler registered for: {', '.join(missing)}")
        extra = [str(key) for key in handlers if not isinstance(key, CommandName)]
        if extra:
            raise ValueError(f"not a command name: {', '.join(extra)}")

        ordered = {name: handlers[name] for name in CommandName}
        self._handlers: Mapping[CommandName, CommandHandler] = MappingProxyType(ordered)

    def resolve(self, name: str | None) -> CommandHandler:
        """Handler for `name`; `UnknownCommandError` for empty or unknown names."""

        command = CommandName.parse(name)
        if command is None:
            raise UnknownCommandError(name, self.names())
        return self._handlers[command]

    def names(self) -> list[str]:
        return [name.value for name in self._handlers]

    def items(self) -> ItemsView[CommandName, CommandHandler]:
        return self._handlers.items()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and CommandName.parse(name) is not None

    def __len__(self) -> int:
        return len(self._handlers)
