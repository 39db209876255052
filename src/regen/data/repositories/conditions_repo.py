"""Condition definitions repository."""
from __future__ import annotations

from typing import Dict

from regen.data.errors import DataValidationError
from regen.data.repositories.base import RepositoryBase
from regen.domain.defs import ConditionDef, ConditionVariant

_VARIANTS = {variant.value: variant for variant in ConditionVariant}


class ConditionsRepository(RepositoryBase[ConditionDef]):
    """Loads and validates condition definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("conditions.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ConditionDef]:
        conditions: Dict[str, ConditionDef] = {}
        for raw_id, payload in raw.items():
            context = f"condition '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_known_fields(
                data,
                {"label"},
                {"variant", "chronic", "keep_on_region_restore", "supports_extensions", "regen_profile"},
                context,
            )
            variant_name = self._require_str(data.get("variant", "generic"), f"{context} variant")
            if variant_name not in _VARIANTS:
                raise DataValidationError(
                    f"{context} variant must be one of {sorted(_VARIANTS)}."
                )
            regen_profile = data.get("regen_profile")
            if regen_profile is not None:
                regen_profile = self._require_str(regen_profile, f"{context} regen_profile")

            conditions[raw_id] = ConditionDef(
                id=raw_id,
                label=self._require_str(data["label"], f"{context} label"),
                variant=_VARIANTS[variant_name],
                chronic=self._require_bool(data.get("chronic", False), f"{context} chronic"),
                keep_on_region_restore=self._require_bool(
                    data.get("keep_on_region_restore", False), f"{context} keep_on_region_restore"
                ),
                supports_extensions=self._require_bool(
                    data.get("supports_extensions", True), f"{context} supports_extensions"
                ),
                regen_profile=regen_profile,
            )
        return conditions
