"""Change broadcaster — WM_SETTINGCHANGE notification for the "Environment" area.

Bridge boundary
---------------
Already-running processes (Explorer, shells) do not poll the registry.  A
``WM_SETTINGCHANGE`` broadcast tells them to reload their environment block.

The ``user32!SendMessageTimeoutW`` primitive is resolved through ``ctypes``
at the point of use.  Resolution may fail (non-Windows host, stripped-down
runtime); the result is then a ``NullBroadcaster`` that does nothing.

Every broadcaster's ``broadcast()`` returns ``None`` and never raises.  The
``send()`` method computes a ``BroadcastOutcome`` for logging and tests.
"""

from __future__ import annotations

import ctypes
import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from volenv.models.notification import (
    DEFAULT_TIMEOUT_MS,
    ERROR_TIMEOUT,
    BroadcastOutcome,
    NotificationRequest,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class Broadcaster(Protocol):
    """Anything that can announce an environment change."""

    def broadcast(self) -> None:
        """Announce the change.  Must not raise."""
        ...


# ---------------------------------------------------------------------------
# Primitive resolution
# ---------------------------------------------------------------------------


def resolve_send_message_timeout() -> Callable[..., int] | None:
    """Look up ``user32.SendMessageTimeoutW``.

    Returns the configured ctypes function, or ``None`` if the DLL or the
    procedure cannot be found on this host.
    """
    try:
        from ctypes import wintypes

        user32 = ctypes.WinDLL("user32", use_last_error=True)  # type: ignore[attr-defined]
        fn = user32.SendMessageTimeoutW
    except (AttributeError, ImportError, OSError, ValueError) as exc:
        logger.debug("SendMessageTimeoutW unavailable: %s", exc)
        return None

    fn.argtypes = [
        wintypes.HWND,
        wintypes.UINT,
        wintypes.WPARAM,
        wintypes.LPCWSTR,
        wintypes.UINT,
        wintypes.UINT,
        ctypes.POINTER(ctypes.c_size_t),
    ]
    fn.restype = ctypes.c_ssize_t
    return fn


def _last_error() -> int:
    return ctypes.get_last_error()  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Implementations
# ---------------------------------------------------------------------------


class NullBroadcaster:
    """No-op broadcaster used when the primitive is absent or disabled."""

    def send(self, request: NotificationRequest | None = None) -> BroadcastOutcome:
        return BroadcastOutcome.UNAVAILABLE

    def broadcast(self) -> None:
        logger.debug("Settings-changed broadcast skipped: no primitive.")


class Win32Broadcaster:
    """Broadcasts ``WM_SETTINGCHANGE`` through ``SendMessageTimeoutW``.

    Parameters
    ----------
    send_message:
        The resolved ``SendMessageTimeoutW`` callable.
    last_error:
        Returns the thread's last Win32 error code after a failed call.
    timeout_ms:
        Overall wait bound for the round trip across all top-level windows.
    """

    def __init__(
        self,
        send_message: Callable[..., int],
        last_error: Callable[[], int] = _last_error,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> None:
        self._send_message = send_message
        self._last_error = last_error
        self._timeout_ms = timeout_ms

    def send(self, request: NotificationRequest | None = None) -> BroadcastOutcome:
        """Issue one broadcast and classify the result."""
        if request is None:
            request = NotificationRequest(timeout_ms=self._timeout_ms)

        result = self._send_message(
            request.target,
            request.message,
            request.wparam,
            request.category,
            request.flags,
            request.timeout_ms,
            None,
        )
        if result:
            return BroadcastOutcome.DELIVERED
        if self._last_error() == ERROR_TIMEOUT:
            return BroadcastOutcome.TIMED_OUT
        return BroadcastOutcome.ABORTED

    def broadcast(self) -> None:
        """Fire-and-forget broadcast; the outcome is logged and dropped."""
        try:
            outcome = self.send()
        except Exception as exc:  # noqa: BLE001 — advisory call, never fatal
            logger.warning("Settings-changed broadcast failed: %s", exc)
            return
        logger.debug("Settings-changed broadcast outcome: %s", outcome.value)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve_broadcaster(timeout_ms: int = DEFAULT_TIMEOUT_MS) -> Win32Broadcaster | NullBroadcaster:
    """Return a working broadcaster, or the no-op variant if none resolves."""
    send_message = resolve_send_message_timeout()
    if send_message is None:
        return NullBroadcaster()
    return Win32Broadcaster(send_message, timeout_ms=timeout_ms)


def is_broadcast_available() -> bool:
    """Return ``True`` if ``SendMessageTimeoutW`` resolves on this host."""
    return resolve_send_message_timeout() is not None


def broadcast(timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None:
    """Resolve the primitive and broadcast once.  Never raises."""
    resolve_broadcaster(timeout_ms).broadcast()
