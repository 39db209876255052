"""Factory for creating condition instances from definitions."""
from __future__ import annotations

from regen.data.repositories import ConditionsRepository
from regen.domain.defs import ConditionVariant
from regen.domain.entities import Character, Condition
from regen.services.errors import FactoryError


def create_condition(
    condition_id: str,
    conditions_repo: ConditionsRepository,
    character: Character,
    *,
    region_id: str | None = None,
    severity: float = 1.0,
    permanent: bool = False,
) -> Condition:
    """Build a condition for ``character``. The caller decides when to attach it."""
    try:
        condition_def = conditions_repo.get(condition_id)
    except KeyError as exc:
        raise FactoryError(f"Condition '{condition_id}' not found.") from exc

    region = None
    if region_id is not None:
        try:
            region = character.body.get(region_id)
        except KeyError as exc:
            raise FactoryError(f"Region '{region_id}' not found on {character.name}.") from exc

    if condition_def.variant is not ConditionVariant.GENERIC and region is None:
        raise FactoryError(f"Condition '{condition_id}' must be attached to a region.")

    return Condition(definition=condition_def, severity=severity, region=region, permanent=permanent)
