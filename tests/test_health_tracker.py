from __future__ import annotations

import pytest

from regen.domain.entities import BodyRegion, Condition, RemoveMarker
from tests.helpers.regen_builders import BAD_BACK, CARCINOMA, MISSING_PART, SCAR, add_condition, make_character


def test_add_rejects_foreign_region() -> None:
    character = make_character()
    stranger = BodyRegion(id="left_arm", label="left arm", hit_points=30)

    with pytest.raises(ValueError):
        character.health.add(Condition(definition=SCAR, region=stranger))


def test_region_missing_tracks_markers_through_cache() -> None:
    character = make_character()
    arm = character.body.get("left_arm")

    assert character.health.region_is_missing(arm) is False
    marker = add_condition(character, MISSING_PART, "left_arm")
    assert character.health.region_is_missing(arm) is True
    character.health.cure(marker)
    assert character.health.region_is_missing(arm) is False


def test_region_missing_is_false_for_no_region() -> None:
    assert make_character().health.region_is_missing(None) is False


def test_sweep_removes_only_marked_conditions() -> None:
    character = make_character()
    keep = add_condition(character, BAD_BACK)
    drop = add_condition(character, SCAR, "left_leg")
    drop.attach(RemoveMarker())

    assert character.health.sweep() == [drop]
    assert character.health.conditions == [keep]
    assert character.health.sweep() == []


def test_attach_refused_without_extension_support() -> None:
    condition = Condition(definition=CARCINOMA)

    with pytest.raises(TypeError):
        condition.attach(RemoveMarker())


def test_remove_marker_debug_string() -> None:
    condition = Condition(definition=BAD_BACK)
    condition.attach(RemoveMarker())

    assert condition.debug_string() == "Should be removed next tick."


def test_cure_of_absent_condition_returns_false() -> None:
    character = make_character()

    assert character.health.cure(Condition(definition=BAD_BACK)) is False


def test_conditions_on_region() -> None:
    character = make_character()
    scar = add_condition(character, SCAR, "left_leg")
    add_condition(character, BAD_BACK)

    assert character.health.conditions_on(character.body.get("left_leg")) == [scar]


@pytest.mark.parametrize("definition", [SCAR, MISSING_PART])
def test_add_rejects_regionless_injury(definition) -> None:
    character = make_character()

    with pytest.raises(ValueError):
        character.health.add(Condition(definition=definition))

    assert character.health.conditions == []
