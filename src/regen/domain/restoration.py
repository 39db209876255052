"""Safe curing and recursive region restoration."""
from __future__ import annotations

import logging

from regen.domain.entities import BodyRegion, Character, Condition, RemoveMarker

logger = logging.getLogger(__name__)


def cure_one_safely(condition: Condition, character: Character, already_warned: bool = False) -> bool:
    """
    Cure a condition without shrinking the list the host may be iterating.

    Conditions that accept extensions get a RemoveMarker and are dropped by
    the host's next sweep. Anything else is cured on the spot, which the host
    may complain about mid-tick; the player is warned once per walk.

    Returns True when an immediate cure happened.
    """

    if condition.supports_deferred_removal():
        if not condition.should_remove:
            condition.attach(RemoveMarker())
        return False
    if not already_warned:
        logger.warning(
            "ConfigurableRegenUtility: Attempting to cure %s during a health tick. "
            "This may cause a harmless error.",
            condition.definition.id,
        )
    character.health.cure(condition)
    return True


def restore_region(character: Character, region: BodyRegion | None) -> None:
    """Clear a region and everything below it, then refresh the health cache once."""
    if region is None:
        logger.error("ConfigurableRegenUtility: Tried to restore null region")
        return
    _restore_recursive(character, region, already_warned=False)
    character.health.dirty_cache()


def _restore_recursive(character: Character, region: BodyRegion, already_warned: bool) -> bool:
    # Curing can shrink the live list, so walk a copy.
    snapshot = tuple(character.health.conditions)
    for condition in snapshot:
        if condition.region is region and not condition.definition.keep_on_region_restore:
            already_warned = cure_one_safely(condition, character, already_warned) or already_warned
    for child in region.children:
        already_warned = _restore_recursive(character, child, already_warned)
    return already_warned
