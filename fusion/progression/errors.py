"""Errors raised by progression calculations."""
from __future__ import annotations


class ProgressionError(ValueError):
    """Base class for invalid progression inputs."""


class MalformedTierSpec(ProgressionError):
    """Raised when a tier identifier does not decode to six ordered level limits."""


class InvalidLevel(ProgressionError):
    """Raised when a level is negative or above the unit's current ceiling."""


class InvalidExperience(ProgressionError):
    """Raised for experience outside the domain of the curve."""


class InvalidUpgrade(ProgressionError):
    """Raised for an SEF counter or evolution step outside its bracket."""


class UnsupportedRarity(ProgressionError):
    """Raised when a rarity does not belong to the tier's generation."""


__all__ = [
    "ProgressionError",
    "MalformedTierSpec",
    "InvalidLevel",
    "InvalidExperience",
    "InvalidUpgrade",
    "UnsupportedRarity",
]
