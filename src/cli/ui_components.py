"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets the dispatcher's error reporter, `help` and `doctor` share tables/styles.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.errors import HarnessError
from core.services.registry import CommandRegistry


def print_error(console: Console, error: HarnessError) -> None:
    """Prints a harness error (and its hint) on the given console.

    Why here:
    - The core only raises; presenting is a CLI concern.
    - Plain text, no markup interpretation of user-supplied names.
    """

    console.print(Text.assemble(("error: ", "bold red"), error.message))
    if error.hint:
        console.print(Text(error.hint, style="dim"))


def build_commands_table(registry: CommandRegistry) -> Table:
    table = Table(title="surface-area <command> [args...]", title_justify="left")
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    for name, handler in registry.items():
        table.add_row(name.value, handler.summary)
    return table


def build_doctor_table() -> Table:
    table = Table(title="surface-area doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
