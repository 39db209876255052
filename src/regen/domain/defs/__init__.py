"""Domain definition exports."""

from .body_def import BodyDef, BodyPartDef
from .condition_def import ConditionDef, ConditionVariant
from .regen_profile_def import InjuryListMode, RegenProfileDef, SelectionConfig
from .side_effect_def import SeverityRange, SideEffectRule

__all__ = [
    "BodyDef",
    "BodyPartDef",
    "ConditionDef",
    "ConditionVariant",
    "InjuryListMode",
    "RegenProfileDef",
    "SelectionConfig",
    "SeverityRange",
    "SideEffectRule",
]
