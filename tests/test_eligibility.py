from __future__ import annotations

import itertools

import pytest

from regen.core.rng import RNG
from regen.domain.defs import InjuryListMode, SelectionConfig
from regen.domain.eligibility import (
    curable_conditions,
    curable_permanent_conditions,
    pick_random_curable,
)
from regen.domain.entities import RemoveMarker
from tests.helpers.regen_builders import (
    BAD_BACK,
    CAUSE,
    CUT,
    FLU,
    MISSING_PART,
    SCAR,
    add_condition,
    make_character,
)
from tests.helpers.scripted_rng import ScriptedRNG


def _populated_character():
    character = make_character()
    conditions = {
        "cause": add_condition(character, CAUSE),
        "bad_back": add_condition(character, BAD_BACK),
        "flu": add_condition(character, FLU),
        "scar": add_condition(character, SCAR, "left_leg", severity=6.0, permanent=True),
        "cut": add_condition(character, CUT, "left_arm", severity=4.0),
        "missing_thumb": add_condition(character, MISSING_PART, "left_thumb"),
    }
    return character, conditions


def test_curable_preserves_native_order() -> None:
    character, _ = _populated_character()

    result = list(curable_conditions(character, can_heal_destroyed=True))

    assert result == character.health.conditions


def test_missing_markers_need_can_heal_destroyed() -> None:
    character, conditions = _populated_character()

    without = list(curable_conditions(character))
    with_destroyed = list(curable_conditions(character, can_heal_destroyed=True))

    assert conditions["missing_thumb"] not in without
    assert conditions["missing_thumb"] in with_destroyed


def test_missing_marker_with_missing_parent_is_never_offered() -> None:
    character = make_character()
    hand = add_condition(character, MISSING_PART, "left_hand")
    thumb = add_condition(character, MISSING_PART, "left_thumb")

    result = list(curable_conditions(character, can_heal_destroyed=True))

    assert hand in result
    assert thumb not in result


def test_missing_marker_on_root_region_is_offered() -> None:
    character = make_character()
    torso = add_condition(character, MISSING_PART, "torso")

    assert list(curable_conditions(character, can_heal_destroyed=True)) == [torso]


@pytest.mark.parametrize(
    "allow, mode",
    list(itertools.product([None, {SCAR}, {SCAR, BAD_BACK}], list(InjuryListMode))),
)
def test_denied_kind_never_curable(allow, mode) -> None:
    character, _ = _populated_character()

    result = list(curable_conditions(character, allow=allow, deny={SCAR}, can_heal_destroyed=True, mode=mode))

    assert all(condition.definition != SCAR for condition in result)


def test_allow_list_filters_kinds() -> None:
    character, conditions = _populated_character()

    result = list(curable_conditions(character, allow={BAD_BACK, FLU}))

    assert result == [conditions["bad_back"], conditions["flu"]]


def test_auto_allow_adds_injuries_to_allow_list() -> None:
    character, conditions = _populated_character()

    result = list(
        curable_conditions(character, allow={FLU}, can_heal_destroyed=True, mode=InjuryListMode.AUTO_ALLOW)
    )

    assert result == [conditions["flu"], conditions["scar"], conditions["cut"], conditions["missing_thumb"]]


def test_curable_permanent_keeps_chronic_permanent_and_missing() -> None:
    character, conditions = _populated_character()

    result = list(curable_permanent_conditions(character, can_heal_destroyed=True))

    assert result == [conditions["bad_back"], conditions["scar"], conditions["missing_thumb"]]


@pytest.mark.parametrize("mode", list(InjuryListMode))
@pytest.mark.parametrize("can_heal_destroyed", [False, True])
def test_curable_permanent_is_subset_of_curable(mode, can_heal_destroyed) -> None:
    character, _ = _populated_character()

    curable = list(curable_conditions(character, can_heal_destroyed=can_heal_destroyed, mode=mode))
    permanent = list(curable_permanent_conditions(character, can_heal_destroyed=can_heal_destroyed, mode=mode))

    assert all(condition in curable for condition in permanent)


def test_pick_random_excludes_cause() -> None:
    character = make_character()
    cause = add_condition(character, BAD_BACK)
    other = add_condition(character, BAD_BACK)
    config = SelectionConfig()

    for seed in range(20):
        assert pick_random_curable(character, cause, config, RNG(seed)) is other


def test_pick_random_returns_none_when_only_cause_qualifies() -> None:
    character = make_character()
    cause = add_condition(character, BAD_BACK)

    assert pick_random_curable(character, cause, SelectionConfig(), ScriptedRNG()) is None


def test_pick_random_returns_none_for_empty_health() -> None:
    character = make_character()
    cause = add_condition(make_character("Other"), CAUSE)

    assert pick_random_curable(character, cause, SelectionConfig(), ScriptedRNG()) is None


def test_pick_random_uses_injected_rng() -> None:
    character, conditions = _populated_character()
    config = SelectionConfig.build(can_heal_destroyed=True)

    picked = pick_random_curable(character, conditions["cause"], config, ScriptedRNG(choice_index=2))

    assert picked is conditions["missing_thumb"]


def test_pick_random_is_reproducible_with_seed() -> None:
    character, conditions = _populated_character()
    config = SelectionConfig.build(can_heal_destroyed=True)

    picks_a = [pick_random_curable(character, conditions["cause"], config, RNG(7)) for _ in range(3)]
    picks_b = [pick_random_curable(character, conditions["cause"], config, RNG(7)) for _ in range(3)]

    assert picks_a == picks_b


def test_conditions_pending_removal_are_not_curable() -> None:
    character, conditions = _populated_character()
    conditions["bad_back"].attach(RemoveMarker())

    result = list(curable_conditions(character, can_heal_destroyed=True))

    assert conditions["bad_back"] not in result
    assert conditions["flu"] in result
