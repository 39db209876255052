"""Regeneration profile structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Collection, Tuple

from .condition_def import ConditionDef
from .side_effect_def import SideEffectRule


class InjuryListMode(Enum):
    """How injury-like conditions are listed when no explicit entry covers them."""

    NONE = "none"
    AUTO_ALLOW = "auto_allow"
    AUTO_DENY = "auto_deny"


def _freeze(defs: Collection[ConditionDef] | None) -> frozenset[ConditionDef] | None:
    return None if defs is None else frozenset(defs)


@dataclass(frozen=True, slots=True)
class SelectionConfig:
    """Allow/deny configuration for a single regeneration invocation.

    ``None`` for ``allow`` or ``deny`` means the list is not in use, which is
    different from an empty list.
    """

    deny: frozenset[ConditionDef] | None = None
    allow: frozenset[ConditionDef] | None = None
    can_heal_destroyed: bool = False
    injury_mode: InjuryListMode = InjuryListMode.NONE

    @classmethod
    def build(
        cls,
        *,
        deny: Collection[ConditionDef] | None = None,
        allow: Collection[ConditionDef] | None = None,
        can_heal_destroyed: bool = False,
        injury_mode: InjuryListMode = InjuryListMode.NONE,
    ) -> "SelectionConfig":
        return cls(
            deny=_freeze(deny),
            allow=_freeze(allow),
            can_heal_destroyed=can_heal_destroyed,
            injury_mode=injury_mode,
        )


@dataclass(frozen=True, slots=True)
class RegenProfileDef:
    """Named selection config plus the side effects it grants."""

    id: str
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    side_effects: Tuple[SideEffectRule, ...] = ()
