"""``volenv status`` — report registry and broadcast availability.

Checks whether the ``winreg`` backend is importable and whether
``user32.SendMessageTimeoutW`` resolves on this host.
"""

from __future__ import annotations

import platform

from rich.console import Console
from rich.table import Table

from volenv.bridge.broadcast import is_broadcast_available
from volenv.bridge.registry import VOLATILE_SCOPE_PATH, is_registry_available
from volenv.config import config

console = Console()


def _status_cell(ok: bool) -> str:
    return "[green]available[/green]" if ok else "[yellow]unavailable[/yellow]"


def status_cmd() -> None:
    """Show which parts of the publish path work on this host."""
    table = Table(title="volenv status")
    table.add_column("Component", style="cyan")
    table.add_column("Status")
    table.add_column("Detail", style="dim")

    table.add_row("Platform", platform.system() or "unknown", platform.release())
    table.add_row(
        "Registry (winreg)",
        _status_cell(is_registry_available()),
        f"HKCU\\{VOLATILE_SCOPE_PATH}",
    )
    broadcast_detail = (
        f"timeout {config.broadcast_timeout_ms} ms"
        if config.broadcast_enabled
        else "disabled by VOLENV_BROADCAST_ENABLED"
    )
    table.add_row(
        "Broadcast (SendMessageTimeoutW)",
        _status_cell(is_broadcast_available()),
        broadcast_detail,
    )
    console.print(table)
