"""Curable-condition queries and random selection."""
from __future__ import annotations

import logging
from typing import Collection, Iterator

from regen.core.rng import RNG
from regen.domain.classifier import is_allowed
from regen.domain.defs import ConditionDef, InjuryListMode, SelectionConfig
from regen.domain.entities import Character, Condition

logger = logging.getLogger(__name__)


def curable_conditions(
    character: Character,
    allow: Collection[ConditionDef] | None = None,
    deny: Collection[ConditionDef] | None = None,
    can_heal_destroyed: bool = False,
    mode: InjuryListMode = InjuryListMode.NONE,
) -> Iterator[Condition]:
    """Yield the character's conditions that the given lists allow curing.

    Conditions already waiting for the host's removal sweep are skipped, so a
    second invocation in the same tick cannot cure them twice.
    """
    health = character.health
    for condition in health.conditions:
        if condition.should_remove:
            continue
        if not is_allowed(condition, allow, deny, mode):
            continue
        if condition.is_missing_marker:
            if not can_heal_destroyed:
                continue
            # A region can only grow back onto a parent that is still there.
            parent = condition.region.parent if condition.region is not None else None
            if health.region_is_missing(parent):
                continue
        yield condition


def curable_permanent_conditions(
    character: Character,
    allow: Collection[ConditionDef] | None = None,
    deny: Collection[ConditionDef] | None = None,
    can_heal_destroyed: bool = False,
    mode: InjuryListMode = InjuryListMode.NONE,
) -> Iterator[Condition]:
    """Like curable_conditions, restricted to chronic, permanent or missing-region conditions."""
    for condition in curable_conditions(character, allow, deny, can_heal_destroyed, mode):
        if condition.permanent or condition.definition.chronic or condition.is_missing_marker:
            yield condition


def pick_random_curable(
    character: Character,
    cause: Condition | None,
    config: SelectionConfig,
    rng: RNG,
) -> Condition | None:
    """Return one uniformly chosen curable permanent condition other than ``cause``."""
    pool = [
        condition
        for condition in curable_permanent_conditions(
            character,
            allow=config.allow,
            deny=config.deny,
            can_heal_destroyed=config.can_heal_destroyed,
            mode=config.injury_mode,
        )
        if condition is not cause
    ]
    if not pool:
        logger.debug("No curable permanent condition on %s", character.name)
        return None
    return rng.choice(pool)
