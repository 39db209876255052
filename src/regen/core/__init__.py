"""Core helpers shared by the domain and service layers."""

from .rng import RNG

__all__ = ["RNG"]
