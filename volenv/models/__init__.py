"""volenv data models — Pydantic v2, frozen."""

from volenv.models.notification import (
    DEFAULT_TIMEOUT_MS,
    ENVIRONMENT_CATEGORY,
    BroadcastOutcome,
    NotificationRequest,
)

__all__ = [
    "BroadcastOutcome",
    "NotificationRequest",
    "DEFAULT_TIMEOUT_MS",
    "ENVIRONMENT_CATEGORY",
]
