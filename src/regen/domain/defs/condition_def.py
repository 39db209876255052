"""Condition definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ConditionVariant(Enum):
    """Runtime shape of a condition."""

    GENERIC = "generic"
    INJURY = "injury"
    MISSING_REGION = "missing_region"


@dataclass(frozen=True, slots=True)
class ConditionDef:
    """Static description of a kind of condition."""

    id: str
    label: str
    variant: ConditionVariant = ConditionVariant.GENERIC
    chronic: bool = False
    keep_on_region_restore: bool = False
    supports_extensions: bool = True
    regen_profile: str | None = None  # profile applied when this condition is a cause
