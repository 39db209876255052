"""Factory helpers for runtime entities."""

from .character_factory import create_character
from .condition_factory import create_condition
from .id_factory import make_instance_id

__all__ = [
    "create_character",
    "create_condition",
    "make_instance_id",
]
