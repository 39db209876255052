"""Notification events and sinks."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Protocol

from regen.domain.entities import Condition

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConditionHealedEvent:
    """Emitted once per successful regeneration."""

    character_id: str
    character_name: str
    cause_label: str
    healed: Condition
    side_effects: List[Condition] = field(default_factory=list)
    message: str = ""


class NotificationSink(Protocol):
    def send(self, event: ConditionHealedEvent) -> None:
        ...


@dataclass(slots=True)
class NotificationLog:
    """Keeps every event it is sent, in order."""

    events: List[ConditionHealedEvent] = field(default_factory=list)

    def send(self, event: ConditionHealedEvent) -> None:
        self.events.append(event)

    @property
    def messages(self) -> List[str]:
        return [event.message for event in self.events]


class LoggingNotificationSink:
    """Writes each event's message to the log at INFO level."""

    def send(self, event: ConditionHealedEvent) -> None:
        logger.info(event.message)
