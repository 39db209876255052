"""Regeneration service: cure one permanent condition and apply its side effects."""
from __future__ import annotations

import logging
from typing import Collection, Iterable

from regen.core.rng import RNG
from regen.data.repositories import RegenProfilesRepository
from regen.domain.defs import ConditionDef, InjuryListMode, RegenProfileDef, SelectionConfig, SideEffectRule
from regen.domain.eligibility import pick_random_curable
from regen.domain.entities import Character, Condition
from regen.domain.restoration import cure_one_safely, restore_region
from regen.domain.side_effects import generate_side_effects
from regen.services.errors import RegenError
from regen.services.messages import render_message
from regen.services.notifications import ConditionHealedEvent, NotificationLog, NotificationSink

logger = logging.getLogger(__name__)


class RegenService:
    """Entry point the host calls whenever a regenerating condition fires."""

    def __init__(
        self,
        rng: RNG,
        notifications: NotificationSink | None = None,
        profiles_repo: RegenProfilesRepository | None = None,
    ) -> None:
        self._rng = rng
        self._notifications = notifications if notifications is not None else NotificationLog()
        self._profiles_repo = profiles_repo

    def try_heal_random_permanent_condition(
        self,
        character: Character,
        cause: Condition,
        deny: Collection[ConditionDef] | None = None,
        allow: Collection[ConditionDef] | None = None,
        side_effects: Iterable[SideEffectRule] | None = None,
        can_heal_destroyed: bool = False,
        injury_mode: InjuryListMode = InjuryListMode.NONE,
    ) -> ConditionHealedEvent | None:
        """
        Cure one random curable permanent condition on ``character``.

        ``cause`` is the condition doing the healing and is never cured by
        its own invocation. Side effects are rolled before the cure but only
        attached afterwards, so a region restoration never sweeps them up.

        Returns the healed event, or None when nothing was eligible.
        """

        config = SelectionConfig.build(
            deny=deny,
            allow=allow,
            can_heal_destroyed=can_heal_destroyed,
            injury_mode=injury_mode,
        )
        healed = pick_random_curable(character, cause, config, self._rng)
        if healed is None:
            return None

        added = generate_side_effects(healed, side_effects, self._rng)

        if healed.is_missing_marker:
            restore_region(character, healed.region)
        else:
            cure_one_safely(healed, character, already_warned=False)

        for condition in added:
            character.health.add(condition)

        logger.debug(
            "%s cured %s on %s (%d side effects)",
            cause.definition.id,
            healed.definition.id,
            character.name,
            len(added),
        )
        event = ConditionHealedEvent(
            character_id=character.id,
            character_name=character.label_short,
            cause_label=cause.label_cap,
            healed=healed,
            side_effects=added,
            message=render_message(
                "permanent_condition_healed",
                cause=cause.label_cap,
                character=character.label_short,
                condition=healed.label,
            ),
        )
        if character.should_send_notification:
            self._notifications.send(event)
        return event

    def heal_with_profile(
        self,
        character: Character,
        cause: Condition,
        profile: RegenProfileDef,
    ) -> ConditionHealedEvent | None:
        selection = profile.selection
        return self.try_heal_random_permanent_condition(
            character,
            cause,
            deny=selection.deny,
            allow=selection.allow,
            side_effects=profile.side_effects,
            can_heal_destroyed=selection.can_heal_destroyed,
            injury_mode=selection.injury_mode,
        )

    def on_cause_fired(self, character: Character, cause: Condition) -> ConditionHealedEvent | None:
        """Hook target: run the profile configured on the cause's definition."""
        profile_id = cause.definition.regen_profile
        if profile_id is None:
            raise RegenError(f"Condition '{cause.definition.id}' has no regeneration profile.")
        if self._profiles_repo is None:
            raise RegenError("No regeneration profiles repository configured.")
        try:
            profile = self._profiles_repo.get(profile_id)
        except KeyError as exc:
            raise RegenError(
                f"Condition '{cause.definition.id}' references unknown profile '{profile_id}'."
            ) from exc
        return self.heal_with_profile(character, cause, profile)
