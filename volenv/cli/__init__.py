"""volenv CLI — Typer-based command-line interface.

Provides the ``volenv`` command with ``set``, ``get`` and ``status``
subcommands.  All output uses Rich for formatted terminal display.
"""
