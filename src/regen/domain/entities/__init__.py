"""Runtime entity exports."""

from .body import Body, BodyRegion
from .character import Character
from .condition import Condition, ConditionExtension, RemoveMarker
from .health import HealthTracker

__all__ = [
    "Body",
    "BodyRegion",
    "Character",
    "Condition",
    "ConditionExtension",
    "HealthTracker",
    "RemoveMarker",
]
