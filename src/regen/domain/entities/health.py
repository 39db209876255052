"""In-memory condition store owned by a character."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List

from regen.domain.defs import ConditionVariant

from .body import Body, BodyRegion
from .condition import Condition


@dataclass(eq=False, slots=True)
class HealthTracker:
    """Ordered condition list plus the host primitives the engine calls into."""

    body: Body
    conditions: List[Condition] = field(default_factory=list)
    cache_invalidations: int = 0
    _missing_cache: FrozenSet[str] | None = field(default=None, init=False, repr=False)

    # ------------------------------------------------------------ Mutations
    def add(self, condition: Condition) -> None:
        if condition.region is None and condition.variant is not ConditionVariant.GENERIC:
            raise ValueError(
                f"Condition '{condition.definition.id}' is a {condition.variant.value} and needs a region."
            )
        if condition.region is not None and not self.body.contains(condition.region):
            raise ValueError(
                f"Region '{condition.region.id}' does not belong to this body."
            )
        self.conditions.append(condition)
        self.dirty_cache()

    def cure(self, condition: Condition) -> bool:
        """Remove a condition immediately. Unsafe while a caller iterates the list."""
        try:
            self.conditions.remove(condition)
        except ValueError:
            return False
        self.dirty_cache()
        return True

    def sweep(self) -> List[Condition]:
        """Drop every condition flagged for removal, as the host does once per tick."""
        removed = [condition for condition in self.conditions if condition.should_remove]
        if not removed:
            return []
        self.conditions = [condition for condition in self.conditions if not condition.should_remove]
        self.dirty_cache()
        return removed

    # --------------------------------------------------------------- Queries
    def conditions_on(self, region: BodyRegion) -> List[Condition]:
        return [condition for condition in self.conditions if condition.region is region]

    def region_is_missing(self, region: BodyRegion | None) -> bool:
        if region is None:
            return False
        return region.id in self._missing_region_ids()

    def has(self, condition: Condition) -> bool:
        return any(existing is condition for existing in self.conditions)

    # ----------------------------------------------------------------- Cache
    def dirty_cache(self) -> None:
        self._missing_cache = None
        self.cache_invalidations += 1

    def _missing_region_ids(self) -> FrozenSet[str]:
        if self._missing_cache is None:
            self._missing_cache = frozenset(
                condition.region.id
                for condition in self.conditions
                if condition.is_missing_marker and condition.region is not None
            )
        return self._missing_cache
