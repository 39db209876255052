"""Condition instances attached to a character."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from regen.domain.defs import ConditionDef, ConditionVariant

from .body import BodyRegion


class ConditionExtension:
    """Behaviour attached to a condition that the host consults every tick."""

    @property
    def should_remove(self) -> bool:
        return False

    def debug_string(self) -> str:
        return ""


class RemoveMarker(ConditionExtension):
    """One-shot marker asking the host's next sweep to drop its condition."""

    @property
    def should_remove(self) -> bool:
        return True

    def debug_string(self) -> str:
        # Visible on a live condition only if the host never swept it.
        return "Should be removed next tick."


@dataclass(eq=False, slots=True)
class Condition:
    """One affliction instance. Compared by identity."""

    definition: ConditionDef
    severity: float = 1.0
    region: BodyRegion | None = None
    permanent: bool = False
    extensions: List[ConditionExtension] = field(default_factory=list)

    @property
    def variant(self) -> ConditionVariant:
        return self.definition.variant

    @property
    def is_missing_marker(self) -> bool:
        return self.definition.variant is ConditionVariant.MISSING_REGION

    @property
    def label(self) -> str:
        if self.region is None:
            return self.definition.label
        return f"{self.definition.label} ({self.region.label})"

    @property
    def label_cap(self) -> str:
        text = self.label
        return text[:1].upper() + text[1:]

    def supports_deferred_removal(self) -> bool:
        return self.definition.supports_extensions

    @property
    def should_remove(self) -> bool:
        return any(extension.should_remove for extension in self.extensions)

    def attach(self, extension: ConditionExtension) -> None:
        if not self.supports_deferred_removal():
            raise TypeError(f"Condition '{self.definition.id}' does not accept extensions.")
        self.extensions.append(extension)

    def debug_string(self) -> str:
        return "\n".join(text for text in (ext.debug_string() for ext in self.extensions) if text)
