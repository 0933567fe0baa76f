"""Level ceilings, experience curve and stat interpolation for fighters."""

from .calculator import ProgressionCalculator
from .ceiling import Bracket, bracket_for_evolution, bracket_for_rarity
from .errors import (
    InvalidExperience,
    InvalidLevel,
    InvalidUpgrade,
    MalformedTierSpec,
    ProgressionError,
    UnsupportedRarity,
)
from .formulas import cumulative_xp, level_cost, level_from_experience, level_from_total_xp
from .tiers import KNOWN_TIERS, Tier, TierSpec

__all__ = [
    "ProgressionCalculator",
    "Bracket",
    "bracket_for_evolution",
    "bracket_for_rarity",
    "ProgressionError",
    "MalformedTierSpec",
    "InvalidLevel",
    "InvalidExperience",
    "InvalidUpgrade",
    "UnsupportedRarity",
    "level_cost",
    "cumulative_xp",
    "level_from_experience",
    "level_from_total_xp",
    "Tier",
    "TierSpec",
    "KNOWN_TIERS",
]
