"""Environment reader — lookups in this process's inherited environment."""

from __future__ import annotations

import os


def read_current(name: str) -> str:
    """Return ``name`` from the current process environment, or ``""``.

    Reads ``os.environ`` only.  A value just written by ``publish`` is not
    visible here unless this process inherited it at startup.
    """
    return os.environ.get(name, "")
