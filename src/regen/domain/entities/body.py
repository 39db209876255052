"""Body region tree models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List


@dataclass(eq=False, slots=True)
class BodyRegion:
    """A node in a character's body-part hierarchy."""

    id: str
    label: str
    hit_points: int
    parent: BodyRegion | None = field(default=None, repr=False)
    children: List[BodyRegion] = field(default_factory=list, repr=False)

    def add_child(self, child: BodyRegion) -> BodyRegion:
        child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator[BodyRegion]:
        """Yield this region and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(eq=False, slots=True)
class Body:
    """Owns a region tree and indexes it by id."""

    root: BodyRegion
    _index: Dict[str, BodyRegion] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._index = {}
        for region in self.root.walk():
            if region.id in self._index:
                raise ValueError(f"Duplicate body region id '{region.id}'.")
            self._index[region.id] = region

    def get(self, region_id: str) -> BodyRegion:
        try:
            return self._index[region_id]
        except KeyError as exc:
            raise KeyError(region_id) from exc

    def contains(self, region: BodyRegion) -> bool:
        return self._index.get(region.id) is region

    def regions(self) -> List[BodyRegion]:
        return list(self.root.walk())
