"""Side-effect rule structures."""
from __future__ import annotations

from dataclasses import dataclass

from .condition_def import ConditionDef


@dataclass(frozen=True, slots=True)
class SeverityRange:
    """Half-open ``[min, max)`` severity range."""

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass(frozen=True, slots=True)
class SideEffectRule:
    """Probability-weighted recipe for a condition granted after a cure."""

    condition_def: ConditionDef
    severity: SeverityRange
    scale_by_source: bool = False
    is_global: bool = False
    chance: float = 1.0
