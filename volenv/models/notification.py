"""Notification models — the settings-changed broadcast request and its outcome."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

HWND_BROADCAST = 0xFFFF
WM_SETTINGCHANGE = 0x001A
SMTO_ABORTIFHUNG = 0x0002
ERROR_TIMEOUT = 1460

ENVIRONMENT_CATEGORY = "Environment"
DEFAULT_TIMEOUT_MS = 5000


class BroadcastOutcome(str, Enum):
    """Result of a single settings-changed broadcast.

    Computed by the broadcaster for logging and tests; never returned to
    the caller of ``publish``.
    """

    DELIVERED = "delivered"
    ABORTED = "aborted"
    TIMED_OUT = "timed_out"
    UNAVAILABLE = "unavailable"


class NotificationRequest(BaseModel):
    """A single WM_SETTINGCHANGE broadcast intent.

    Built fresh for every broadcast and discarded afterwards.
    """

    model_config = ConfigDict(frozen=True)

    target: int = HWND_BROADCAST
    message: int = WM_SETTINGCHANGE
    wparam: int = 0
    category: str = ENVIRONMENT_CATEGORY
    flags: int = SMTO_ABORTIFHUNG
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
