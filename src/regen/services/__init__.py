"""Service layer exports."""

from .errors import FactoryError, RegenError
from .notifications import (
    ConditionHealedEvent,
    LoggingNotificationSink,
    NotificationLog,
    NotificationSink,
)
from .regen_service import RegenService

__all__ = [
    "ConditionHealedEvent",
    "FactoryError",
    "LoggingNotificationSink",
    "NotificationLog",
    "NotificationSink",
    "RegenError",
    "RegenService",
]
