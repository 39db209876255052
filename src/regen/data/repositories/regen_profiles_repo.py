"""Regeneration profiles repository."""
from __future__ import annotations

from typing import Dict, List

from regen.data.errors import DataReferenceError, DataValidationError
from regen.data.repositories.base import RepositoryBase
from regen.data.repositories.conditions_repo import ConditionsRepository
from regen.domain.defs import (
    ConditionDef,
    ConditionVariant,
    InjuryListMode,
    RegenProfileDef,
    SelectionConfig,
    SeverityRange,
    SideEffectRule,
)

_MODES = {mode.value: mode for mode in InjuryListMode}


class RegenProfilesRepository(RepositoryBase[RegenProfileDef]):
    """Loads regeneration profiles and resolves their condition references."""

    def __init__(self, conditions_repo: ConditionsRepository | None = None, base_path=None) -> None:
        super().__init__("regen_profiles.json", base_path)
        self._conditions_repo = conditions_repo or ConditionsRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, RegenProfileDef]:
        profiles: Dict[str, RegenProfileDef] = {}
        for raw_id, payload in raw.items():
            context = f"regen profile '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_known_fields(
                data,
                set(),
                {"deny", "allow", "can_heal_destroyed", "injury_mode", "side_effects"},
                context,
            )
            mode_name = self._require_str(data.get("injury_mode", "none"), f"{context} injury_mode")
            if mode_name not in _MODES:
                raise DataValidationError(f"{context} injury_mode must be one of {sorted(_MODES)}.")

            selection = SelectionConfig.build(
                deny=self._resolve_optional_list(data.get("deny"), f"{context} deny"),
                allow=self._resolve_optional_list(data.get("allow"), f"{context} allow"),
                can_heal_destroyed=self._require_bool(
                    data.get("can_heal_destroyed", False), f"{context} can_heal_destroyed"
                ),
                injury_mode=_MODES[mode_name],
            )
            side_effects = self._parse_side_effects(data.get("side_effects", []), context)
            profiles[raw_id] = RegenProfileDef(id=raw_id, selection=selection, side_effects=side_effects)
        return profiles

    def _resolve_optional_list(self, value: object, context: str) -> List[ConditionDef] | None:
        if value is None:
            return None
        return [self._resolve_condition(condition_id, context) for condition_id in self._require_str_list(value, context)]

    def _resolve_condition(self, condition_id: str, context: str) -> ConditionDef:
        try:
            return self._conditions_repo.get(condition_id)
        except KeyError as exc:
            raise DataReferenceError(f"{context} references unknown condition '{condition_id}'.") from exc

    def _parse_side_effects(self, value: object, context: str) -> tuple[SideEffectRule, ...]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} side_effects must be a list.")
        rules: List[SideEffectRule] = []
        for index, entry in enumerate(value):
            entry_context = f"{context} side_effects[{index}]"
            data = self._require_mapping(entry, entry_context)
            self._assert_known_fields(
                data,
                {"condition", "severity"},
                {"scale_by_source", "is_global", "chance"},
                entry_context,
            )
            condition_def = self._resolve_condition(
                self._require_str(data["condition"], f"{entry_context} condition"), entry_context
            )
            severity_data = self._require_mapping(data["severity"], f"{entry_context} severity")
            self._assert_known_fields(severity_data, {"min", "max"}, set(), f"{entry_context} severity")
            low = self._require_number(severity_data["min"], f"{entry_context} severity min")
            high = self._require_number(severity_data["max"], f"{entry_context} severity max")
            if low > high:
                raise DataValidationError(f"{entry_context} severity min must not exceed max.")
            chance = self._require_number(data.get("chance", 1.0), f"{entry_context} chance")
            if not 0.0 <= chance <= 1.0:
                raise DataValidationError(f"{entry_context} chance must be between 0 and 1.")
            is_global = self._require_bool(data.get("is_global", False), f"{entry_context} is_global")
            if is_global and condition_def.variant is not ConditionVariant.GENERIC:
                raise DataValidationError(
                    f"{entry_context} cannot grant {condition_def.variant.value} condition "
                    f"'{condition_def.id}' globally; it needs a region."
                )
            rules.append(
                SideEffectRule(
                    condition_def=condition_def,
                    severity=SeverityRange(min=low, max=high),
                    scale_by_source=self._require_bool(
                        data.get("scale_by_source", False), f"{entry_context} scale_by_source"
                    ),
                    is_global=is_global,
                    chance=chance,
                )
            )
        return tuple(rules)
