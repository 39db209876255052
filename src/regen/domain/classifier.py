"""Allow/deny classification for individual conditions."""
from __future__ import annotations

from typing import Collection

from regen.domain.defs import ConditionDef, ConditionVariant, InjuryListMode
from regen.domain.entities import Condition

_INJURY_VARIANTS = (ConditionVariant.INJURY, ConditionVariant.MISSING_REGION)


def is_injury(condition: Condition) -> bool:
    """Return True for injuries and missing-region markers."""
    return condition.variant in _INJURY_VARIANTS


def is_allowed(
    condition: Condition,
    allow: Collection[ConditionDef] | None = None,
    deny: Collection[ConditionDef] | None = None,
    mode: InjuryListMode = InjuryListMode.NONE,
) -> bool:
    """
    Check a condition against an allow list, a deny list and the injury mode.

    The deny list always wins, even over an auto-allowed injury. When any
    allow list is in use (explicit or ``AUTO_ALLOW``), only conditions it
    covers pass. An explicit allow entry can pull a single injury out of
    ``AUTO_DENY``, and a deny entry can exclude one from ``AUTO_ALLOW``.
    Combining an explicit allow list with an explicit deny list works but is
    rarely what a profile author wants.
    """

    if deny is not None and condition.definition in deny:
        return False
    if allow is not None or mode is InjuryListMode.AUTO_ALLOW:
        if allow is not None and condition.definition in allow:
            return True
        if mode is InjuryListMode.AUTO_ALLOW and is_injury(condition):
            return True
        return False
    if mode is InjuryListMode.AUTO_DENY and is_injury(condition):
        return False
    return True
