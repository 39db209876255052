"""Errors raised while loading regen definitions (conditions, bodies, profiles)."""


class DataError(Exception):
    """Root of every definition-loading failure."""


class DataLoadError(DataError):
    """A definitions file could not be read or is not valid JSON."""


class DataValidationError(DataError):
    """A definition has the wrong shape, a bad value, or an unknown field.

    Also raised for rules that could never be applied safely, such as a global
    side effect that grants an injury.
    """


class DataReferenceError(DataError):
    """A regen profile or side effect names a condition that is not defined."""
