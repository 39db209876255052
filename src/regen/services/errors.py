"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class RegenError(Exception):
    """Raised when a regeneration trigger is misconfigured."""
