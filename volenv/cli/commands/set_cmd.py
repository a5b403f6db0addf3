"""``volenv set NAME VALUE`` — publish a variable into the volatile scope."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from volenv.bridge.broadcast import NullBroadcaster
from volenv.config import config
from volenv.core.registry_publisher import RegistryPublisher, VolatileEnvError

console = Console()


def set_cmd(
    name: str = typer.Argument(..., help="Environment variable name."),
    value: str = typer.Argument(..., help="String value to store (REG_SZ)."),
    no_broadcast: bool = typer.Option(
        False,
        "--no-broadcast",
        help="Write the value without sending WM_SETTINGCHANGE.",
    ),
) -> None:
    """Publish NAME=VALUE to HKCU\\Volatile Environment.

    The value survives until logoff or restart.  Running programs are
    notified unless --no-broadcast is given.
    """
    publisher = RegistryPublisher(
        broadcaster=NullBroadcaster() if no_broadcast else None,
        config=config,
    )
    try:
        publisher.publish(name, value)
    except ValueError as e:
        console.print(f"[red]Invalid variable:[/red] {escape(str(e))}")
        raise typer.Exit(code=2) from e
    except VolatileEnvError as e:
        console.print(f"[red]Publish failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]Published[/green] [bold]{escape(name)}[/bold]={escape(value)}")
