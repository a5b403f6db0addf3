"""Registry publisher — write one variable into the volatile scope, then announce it.

Sequence per call:

1. Open or create ``HKCU\\Volatile Environment`` with ``KEY_SET_VALUE``.
2. Write ``name`` as ``REG_SZ``, overwriting any prior value.
3. Release the handle (always, via ``with``).
4. Broadcast the settings change once, best-effort.

Only steps 1 and 2 can fail the call.  Windows discards the volatile scope
at logoff; nothing here ever deletes values.
"""

from __future__ import annotations

import logging
from typing import Any

from volenv.bridge.broadcast import Broadcaster, NullBroadcaster, resolve_broadcaster
from volenv.bridge.registry import (
    VOLATILE_SCOPE_PATH,
    ScopeUnavailableError,
    VolatileEnvError,
    WriteFailedError,
    default_backend,
    open_volatile_scope,
)
from volenv.config import VolenvConfig
from volenv.config import config as default_config

logger = logging.getLogger(__name__)

__all__ = [
    "RegistryPublisher",
    "ScopeUnavailableError",
    "VolatileEnvError",
    "WriteFailedError",
    "publish",
]

_UNSET: Any = object()


class RegistryPublisher:
    """Publishes process-originated variables into the volatile scope.

    Holds no handles or values between calls; each ``publish`` is an
    independent unit of work.  Concurrent callers are not serialized.

    Parameters
    ----------
    registry:
        ``winreg``-compatible backend.  Defaults to the platform ``winreg``
        module (``None`` off Windows).
    broadcaster:
        Object with a ``broadcast()`` method.  When omitted the primitive is
        resolved fresh after every successful write.
    config:
        Settings controlling whether and how long to broadcast.
    """

    def __init__(
        self,
        registry: Any = _UNSET,
        broadcaster: Broadcaster | None = None,
        config: VolenvConfig | None = None,
    ) -> None:
        self._registry = default_backend() if registry is _UNSET else registry
        self._broadcaster = broadcaster
        self._config = config or default_config

    def publish(self, name: str, value: str) -> None:
        """Store ``value`` under ``name`` and notify running processes.

        Raises
        ------
        ValueError
            If ``name`` is empty.
        ScopeUnavailableError
            If the volatile scope cannot be opened or created.  Nothing is
            written and no broadcast is attempted.
        WriteFailedError
            If the value write fails.  The handle is released first.
        """
        if not name:
            raise ValueError("Variable name must be a non-empty string.")

        try:
            with open_volatile_scope(self._registry) as key:
                self._write(key, name, value)
        except ScopeUnavailableError as exc:
            exc.name = name
            logger.error("Publishing %s failed: %s", name, exc)
            raise

        logger.info("Published %s to HKCU\\%s", name, VOLATILE_SCOPE_PATH)
        self._notify()

    def _write(self, key: Any, name: str, value: str) -> None:
        registry = self._registry
        try:
            registry.SetValueEx(key, name, 0, registry.REG_SZ, value)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Writing %s to HKCU\\%s failed: %s", name, VOLATILE_SCOPE_PATH, exc)
            raise WriteFailedError(
                f"Cannot write {name!r} to HKCU\\{VOLATILE_SCOPE_PATH}: {exc}",
                name=name,
            ) from exc

    def _broadcaster_for_call(self) -> Broadcaster:
        if self._broadcaster is not None:
            return self._broadcaster
        if not self._config.broadcast_enabled:
            return NullBroadcaster()
        return resolve_broadcaster(self._config.broadcast_timeout_ms)

    def _notify(self) -> None:
        try:
            self._broadcaster_for_call().broadcast()
        except Exception as exc:  # noqa: BLE001 — the write already succeeded
            logger.warning("Ignoring broadcast failure after publish: %s", exc)


def publish(name: str, value: str) -> None:
    """Publish with the platform registry and the configured broadcaster."""
    RegistryPublisher().publish(name, value)
