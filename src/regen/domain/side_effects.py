"""Side-effect generation for cured conditions."""
from __future__ import annotations

import logging
from typing import Iterable, List

from regen.core.rng import RNG
from regen.domain.classifier import is_injury
from regen.domain.defs import ConditionVariant, SideEffectRule
from regen.domain.entities import Condition

logger = logging.getLogger(__name__)


def rule_applies(rule: SideEffectRule, rng: RNG) -> bool:
    """Roll a rule's chance. Certain rules do not consume a draw."""
    if rule.chance >= 1.0:
        return True
    return rng.random() < rule.chance


def roll_severity(rule: SideEffectRule, cured: Condition, rng: RNG) -> float:
    """
    Roll a severity in ``[min, max)`` and scale it by the cured condition.

    Injuries scale by the fraction of their region's hit points they
    covered; other conditions scale by raw severity. Missing regions have no
    meaningful severity, so their side effects always apply at full roll.
    """

    severity = rule.severity.min + rng.random() * rule.severity.span
    if rule.scale_by_source and not cured.is_missing_marker:
        if is_injury(cured):
            severity *= cured.severity / cured.region.hit_points
        else:
            severity *= cured.severity
    return severity


def generate_side_effects(
    cured: Condition,
    rules: Iterable[SideEffectRule] | None,
    rng: RNG,
) -> List[Condition]:
    """Build, without attaching, the side effects granted for curing ``cured``."""
    created: List[Condition] = []
    for rule in rules or ():
        if not rule_applies(rule, rng):
            continue
        region = None if rule.is_global else cured.region
        if region is None and rule.condition_def.variant is not ConditionVariant.GENERIC:
            logger.warning(
                "ConfigurableRegenUtility: Skipping side effect %s for %s; it needs a region.",
                rule.condition_def.id,
                cured.definition.id,
            )
            continue
        severity = roll_severity(rule, cured, rng)
        logger.debug(
            "Side effect %s rolled at severity %.3f for %s",
            rule.condition_def.id,
            severity,
            cured.definition.id,
        )
        created.append(Condition(definition=rule.condition_def, severity=severity, region=region))
    return created
