from __future__ import annotations

import pytest

from regen.domain.classifier import is_allowed, is_injury
from regen.domain.defs import InjuryListMode
from regen.domain.entities import Condition
from tests.helpers.regen_builders import BAD_BACK, CUT, FLU, MISSING_PART, SCAR


def _condition(definition) -> Condition:
    return Condition(definition=definition)


def test_is_injury_covers_injuries_and_missing_regions() -> None:
    assert is_injury(_condition(SCAR)) is True
    assert is_injury(_condition(MISSING_PART)) is True
    assert is_injury(_condition(BAD_BACK)) is False


def test_no_lists_accepts_everything() -> None:
    for definition in (BAD_BACK, SCAR, MISSING_PART):
        assert is_allowed(_condition(definition)) is True


@pytest.mark.parametrize("mode", list(InjuryListMode))
def test_deny_wins_over_allow_and_mode(mode: InjuryListMode) -> None:
    condition = _condition(SCAR)

    assert is_allowed(condition, allow={SCAR}, deny={SCAR}, mode=mode) is False


def test_deny_and_allow_with_same_kind_rejects() -> None:
    condition = _condition(BAD_BACK)

    assert is_allowed(condition, allow={BAD_BACK}, deny={BAD_BACK}) is False


def test_allow_list_restricts_to_members() -> None:
    assert is_allowed(_condition(BAD_BACK), allow={BAD_BACK}) is True
    assert is_allowed(_condition(FLU), allow={BAD_BACK}) is False
    assert is_allowed(_condition(SCAR), allow={BAD_BACK}) is False


def test_empty_allow_list_rejects_everything() -> None:
    assert is_allowed(_condition(BAD_BACK), allow=set()) is False


def test_auto_allow_accepts_injuries_only() -> None:
    mode = InjuryListMode.AUTO_ALLOW

    assert is_allowed(_condition(SCAR), mode=mode) is True
    assert is_allowed(_condition(MISSING_PART), mode=mode) is True
    assert is_allowed(_condition(BAD_BACK), mode=mode) is False


def test_auto_allow_combines_with_explicit_allow() -> None:
    mode = InjuryListMode.AUTO_ALLOW

    assert is_allowed(_condition(BAD_BACK), allow={BAD_BACK}, mode=mode) is True
    assert is_allowed(_condition(CUT), allow={BAD_BACK}, mode=mode) is True
    assert is_allowed(_condition(FLU), allow={BAD_BACK}, mode=mode) is False


def test_deny_entry_excludes_single_injury_from_auto_allow() -> None:
    mode = InjuryListMode.AUTO_ALLOW

    assert is_allowed(_condition(SCAR), deny={SCAR}, mode=mode) is False
    assert is_allowed(_condition(CUT), deny={SCAR}, mode=mode) is True


def test_auto_deny_rejects_injuries() -> None:
    mode = InjuryListMode.AUTO_DENY

    assert is_allowed(_condition(SCAR), mode=mode) is False
    assert is_allowed(_condition(MISSING_PART), mode=mode) is False
    assert is_allowed(_condition(BAD_BACK), mode=mode) is True


def test_allow_entry_rescues_injury_from_auto_deny() -> None:
    mode = InjuryListMode.AUTO_DENY

    assert is_allowed(_condition(SCAR), allow={SCAR}, mode=mode) is True
    # The allow list is now in use, so everything else it omits is rejected.
    assert is_allowed(_condition(BAD_BACK), allow={SCAR}, mode=mode) is False
