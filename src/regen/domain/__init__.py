"""Domain layer: definitions, entities and the regeneration rules."""
