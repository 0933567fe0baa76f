"""Tier identifiers and the level limits they encode.

A tier identifier packs a generation tag and six level limits into one string,
``t1_10_18_20_36_30_60``: three brackets of (ceiling at SEF 0, ceiling at full
SEF). Brackets are selected either by evolution step or by rarity; with rarity
the generation decides which three rarities map to brackets 0..2.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from fusion.engine.logger import ChannelLogger
from fusion.fighters.stats import Rarity
from fusion.progression.errors import MalformedTierSpec, UnsupportedRarity

TIER_LEVEL_COUNT = 6
BRACKET_COUNT = TIER_LEVEL_COUNT // 2
DEFAULT_DENOMINATOR = 4
FINAL_BRACKET_DEFAULT_DENOMINATOR = 5


class Tier(str, Enum):
    T1_10_18_20_36_30_60 = "t1_10_18_20_36_30_60"
    T2_20_36_30_54_40_80 = "t2_20_36_30_54_40_80"
    T2_30_54_40_72_50_100 = "t2_30_54_40_72_50_100"
    T3_30_54_40_72_60_84 = "t3_30_54_40_72_60_84"
    T3_40_72_50_90_70_98 = "t3_40_72_50_90_70_98"
    T3_30_54_40_72_60_96 = "t3_30_54_40_72_60_96"
    T3_30_54_40_72_60_108 = "t3_30_54_40_72_60_108"
    T3_40_72_50_90_70_112 = "t3_40_72_50_90_70_112"
    T3_40_72_50_90_70_126 = "t3_40_72_50_90_70_126"


KNOWN_TIERS: Tuple[str, ...] = tuple(tier.value for tier in Tier)

# Highest-rarity brackets advance by a tier-specific number of SEF steps.
FINAL_BRACKET_DENOMINATORS: Dict[str, int] = {
    Tier.T1_10_18_20_36_30_60.value: 5,
    Tier.T2_20_36_30_54_40_80.value: 5,
    Tier.T2_30_54_40_72_50_100.value: 5,
    Tier.T3_30_54_40_72_60_84.value: 2,
    Tier.T3_40_72_50_90_70_98.value: 2,
    Tier.T3_30_54_40_72_60_96.value: 3,
    Tier.T3_40_72_50_90_70_112.value: 3,
    Tier.T3_30_54_40_72_60_108.value: 4,
    Tier.T3_40_72_50_90_70_126.value: 4,
}

GENERATION_RARITIES: Dict[str, Tuple[Rarity, Rarity, Rarity]] = {
    "t1": (Rarity.COMMON, Rarity.UNCOMMON, Rarity.RARE),
    "t2": (Rarity.UNCOMMON, Rarity.RARE, Rarity.EPIC),
    "t3": (Rarity.RARE, Rarity.EPIC, Rarity.LEGENDARY),
}


def _validate_denominators() -> None:
    missing = [tier for tier in KNOWN_TIERS if tier not in FINAL_BRACKET_DENOMINATORS]
    if missing:
        raise RuntimeError(f"No final bracket denominator for tiers: {', '.join(missing)}")
    for tier, denominator in FINAL_BRACKET_DENOMINATORS.items():
        if denominator not in (2, 3, 4, 5):
            raise RuntimeError(f"Denominator {denominator} for {tier} is outside 2..5")


_validate_denominators()


@dataclass(frozen=True)
class TierSpec:
    """Decoded tier identifier."""

    generation: str
    levels: Tuple[int, int, int, int, int, int]

    @classmethod
    def parse(cls, identifier: str, logger: Optional[ChannelLogger] = None) -> "TierSpec":
        if isinstance(identifier, Tier):
            identifier = identifier.value
        if not isinstance(identifier, str):
            raise MalformedTierSpec(f"Tier identifier must be a string, got {identifier!r}")
        text = identifier.strip()
        generation, sep, remainder = text[:2], text[2:3], text[3:]
        if len(generation) != 2 or generation[0] != "t" or not generation[1].isdigit() or sep != "_":
            raise MalformedTierSpec(f"Tier '{identifier}' has no generation prefix")
        tokens = remainder.split("_")
        if len(tokens) != TIER_LEVEL_COUNT:
            raise MalformedTierSpec(
                f"Tier '{identifier}' encodes {len(tokens)} level limits, expected {TIER_LEVEL_COUNT}"
            )
        levels = []
        for token in tokens:
            if not (token.isascii() and token.isdigit()):
                raise MalformedTierSpec(f"Tier '{identifier}' has non-numeric level limit '{token}'")
            levels.append(int(token))
        for bracket in range(BRACKET_COUNT):
            low, high = levels[2 * bracket], levels[2 * bracket + 1]
            if low > high:
                raise MalformedTierSpec(
                    f"Tier '{identifier}' bracket {bracket} has minimum {low} above maximum {high}"
                )
        spec = cls(generation=generation, levels=tuple(levels))
        if logger and logger.enabled:
            logger.debug("Decoded tier %s -> %s", identifier, spec.levels)
        return spec

    @property
    def identifier(self) -> str:
        return self.encode()

    def encode(self) -> str:
        return "_".join([self.generation, *(str(level) for level in self.levels)])

    def bracket_limits(self, bracket: int) -> Tuple[int, int]:
        """Return (minimum, maximum) level ceiling for ``bracket``."""

        return self.levels[2 * bracket], self.levels[2 * bracket + 1]

    def rarity_bracket(self, rarity: Rarity) -> int:
        rarities = GENERATION_RARITIES.get(self.generation)
        if rarities is None:
            raise UnsupportedRarity(
                f"Generation '{self.generation}' has no rarity progression"
            )
        try:
            rarity = Rarity.parse(rarity)
        except ValueError as exc:
            raise UnsupportedRarity(f"Unknown rarity {rarity!r}") from exc
        if rarity not in rarities:
            names = ", ".join(r.value for r in rarities)
            raise UnsupportedRarity(
                f"Rarity '{rarity.value}' is not part of {self.generation} ({names})"
            )
        return rarities.index(rarity)

    def rarity_denominator(self, bracket: int) -> int:
        if bracket < BRACKET_COUNT - 1:
            return DEFAULT_DENOMINATOR
        return FINAL_BRACKET_DENOMINATORS.get(self.encode(), FINAL_BRACKET_DEFAULT_DENOMINATOR)


__all__ = [
    "Tier",
    "TierSpec",
    "KNOWN_TIERS",
    "FINAL_BRACKET_DENOMINATORS",
    "GENERATION_RARITIES",
    "DEFAULT_DENOMINATOR",
]
