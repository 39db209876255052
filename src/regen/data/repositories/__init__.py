"""Repository exports."""

from .bodies_repo import BodiesRepository
from .conditions_repo import ConditionsRepository
from .regen_profiles_repo import RegenProfilesRepository

__all__ = [
    "BodiesRepository",
    "ConditionsRepository",
    "RegenProfilesRepository",
]
