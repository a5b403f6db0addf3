"""Registry bridge — scoped access to ``HKCU\\Volatile Environment``.

Bridge boundary
---------------
All ``winreg`` calls go through this module.  ``winreg`` only exists on
Windows; elsewhere the backend is ``None`` and every attempt to open the
volatile scope fails with ``ScopeUnavailableError``.

The registry handle is acquired and released inside a single ``with``
block and is never stored on any object.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

logger = logging.getLogger(__name__)

VOLATILE_SCOPE_PATH = "Volatile Environment"

# ---------------------------------------------------------------------------
# Try-import winreg
# ---------------------------------------------------------------------------

_WINREG_AVAILABLE: bool = False
_winreg: Any = None

try:
    import winreg as _winreg  # type: ignore[import-not-found,no-redef]

    _WINREG_AVAILABLE = True
except ImportError:
    logger.debug("winreg not importable — volatile registry scope unavailable.")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class VolatileEnvError(RuntimeError):
    """Base class for failures while publishing a volatile variable."""

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class ScopeUnavailableError(VolatileEnvError):
    """The volatile registry container could not be opened or created."""


class WriteFailedError(VolatileEnvError):
    """The container opened but the value write failed."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def is_registry_available() -> bool:
    """Return ``True`` if the ``winreg`` backend is importable."""
    return _WINREG_AVAILABLE


def default_backend() -> Any:
    """Return the platform ``winreg`` module, or ``None`` off Windows."""
    return _winreg


@contextmanager
def open_volatile_scope(backend: Any, access: int | None = None) -> Iterator[Any]:
    """Open or create the volatile scope and release it on exit.

    Windows creates ``Volatile Environment`` as a volatile key at logon;
    ``CreateKeyEx`` opens that existing key rather than making a new one.

    Parameters
    ----------
    backend:
        A ``winreg``-compatible module.  ``None`` means no registry on this
        platform.
    access:
        Access mask; defaults to ``KEY_SET_VALUE``.

    Raises
    ------
    ScopeUnavailableError
        If the backend is missing or ``CreateKeyEx`` fails.
    """
    if backend is None:
        raise ScopeUnavailableError(
            f"No registry backend on this platform; cannot open {VOLATILE_SCOPE_PATH!r}."
        )
    if access is None:
        access = backend.KEY_SET_VALUE

    try:
        key = backend.CreateKeyEx(
            backend.HKEY_CURRENT_USER, VOLATILE_SCOPE_PATH, 0, access
        )
    except OSError as exc:
        raise ScopeUnavailableError(
            f"Cannot open or create HKCU\\{VOLATILE_SCOPE_PATH}: {exc}"
        ) from exc

    with key:
        yield key


def read_published(name: str, backend: Any = None) -> str | None:
    """Read a single value from the volatile scope.

    Returns ``None`` when the value is absent, is not a ``REG_SZ`` string,
    or the scope cannot be read.
    Used for inspection only; publishing never reads back.
    """
    if backend is None:
        backend = _winreg
    if backend is None:
        return None
    try:
        with backend.OpenKey(
            backend.HKEY_CURRENT_USER, VOLATILE_SCOPE_PATH, 0, backend.KEY_QUERY_VALUE
        ) as key:
            value, value_type = backend.QueryValueEx(key, name)
    except OSError as exc:
        logger.debug("read_published(%r): %s", name, exc)
        return None
    if value_type != backend.REG_SZ:
        logger.debug("read_published(%r): not REG_SZ (type %s)", name, value_type)
        return None
    return value
