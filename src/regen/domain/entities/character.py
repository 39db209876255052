"""Character model."""
from __future__ import annotations

from dataclasses import dataclass, field

from .body import Body
from .health import HealthTracker


@dataclass(eq=False, slots=True)
class Character:
    """A character whose conditions the engine inspects and mutates."""

    id: str
    name: str
    body: Body
    health: HealthTracker = field(init=False)
    notify_player: bool = True

    def __post_init__(self) -> None:
        self.health = HealthTracker(body=self.body)

    @property
    def label_short(self) -> str:
        return self.name

    @property
    def should_send_notification(self) -> bool:
        return self.notify_player
