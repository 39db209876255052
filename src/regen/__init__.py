"""Configurable regeneration of permanent conditions."""

__version__ = "0.1.0"
