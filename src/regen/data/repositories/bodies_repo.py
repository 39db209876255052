"""Body templates repository."""
from __future__ import annotations

from typing import Dict, Set

from regen.data.errors import DataValidationError
from regen.data.repositories.base import RepositoryBase
from regen.domain.defs import BodyDef, BodyPartDef


class BodiesRepository(RepositoryBase[BodyDef]):
    """Loads body templates as trees of parts."""

    def __init__(self, base_path=None) -> None:
        super().__init__("bodies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, BodyDef]:
        bodies: Dict[str, BodyDef] = {}
        for raw_id, payload in raw.items():
            context = f"body '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_known_fields(data, {"label", "root"}, set(), context)
            seen: Set[str] = set()
            root = self._parse_part(data["root"], f"{context} root", seen)
            bodies[raw_id] = BodyDef(
                id=raw_id,
                label=self._require_str(data["label"], f"{context} label"),
                root=root,
            )
        return bodies

    def _parse_part(self, value: object, context: str, seen: Set[str]) -> BodyPartDef:
        data = self._require_mapping(value, context)
        self._assert_known_fields(data, {"id", "label", "hit_points"}, {"children"}, context)
        part_id = self._require_str(data["id"], f"{context} id")
        if part_id in seen:
            raise DataValidationError(f"{context} reuses part id '{part_id}'.")
        seen.add(part_id)
        hit_points = self._require_int(data["hit_points"], f"{context} hit_points")
        if hit_points <= 0:
            raise DataValidationError(f"{context} hit_points must be positive.")
        raw_children = data.get("children", [])
        if not isinstance(raw_children, list):
            raise DataValidationError(f"{context} children must be a list.")
        children = tuple(
            self._parse_part(child, f"{context} > {part_id}[{index}]", seen)
            for index, child in enumerate(raw_children)
        )
        return BodyPartDef(
            id=part_id,
            label=self._require_str(data["label"], f"{context} label"),
            hit_points=hit_points,
            children=children,
        )
