"""Typer subcommands for the ``volenv`` CLI."""
