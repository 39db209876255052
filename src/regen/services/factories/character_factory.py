"""Factory for creating characters from body templates."""
from __future__ import annotations

from regen.core.rng import RNG
from regen.data.repositories import BodiesRepository
from regen.domain.defs import BodyPartDef
from regen.domain.entities import Body, BodyRegion, Character
from regen.services.errors import FactoryError

from .id_factory import make_instance_id


def create_character(
    body_id: str,
    name: str,
    bodies_repo: BodiesRepository,
    rng: RNG,
    *,
    notify_player: bool = True,
) -> Character:
    """Instantiate a character with a fresh region tree for ``body_id``."""
    try:
        body_def = bodies_repo.get(body_id)
    except KeyError as exc:
        raise FactoryError(f"Body '{body_id}' not found.") from exc

    body = Body(root=_build_region(body_def.root))
    return Character(
        id=make_instance_id("character", rng),
        name=name,
        body=body,
        notify_player=notify_player,
    )


def _build_region(part_def: BodyPartDef) -> BodyRegion:
    region = BodyRegion(id=part_def.id, label=part_def.label, hit_points=part_def.hit_points)
    for child_def in part_def.children:
        region.add_child(_build_region(child_def))
    return region
