"""Body template structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True, slots=True)
class BodyPartDef:
    """One node of a body template."""

    id: str
    label: str
    hit_points: int
    children: Tuple["BodyPartDef", ...] = ()

    def walk(self) -> Iterator["BodyPartDef"]:
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True, slots=True)
class BodyDef:
    """Named body template."""

    id: str
    label: str
    root: BodyPartDef
