"""Experience curve and stat interpolation helpers."""
from __future__ import annotations

import math
from typing import Dict, Optional

from fusion.fighters.stats import StatBlock
from fusion.progression.errors import InvalidExperience

XP_CURVE_OFFSET = 0.07
XP_CURVE_SCALE = 100.0
XP_CURVE_EXPONENT = 61 / 1250
INVERSE_MIN_XP = 100

STRATEGY_CUMULATIVE = "cumulative"
STRATEGY_INVERSE = "inverse"


def round_half_up(value: float) -> int:
    """Round like the game client's ``Math.round``: halves go towards +inf."""

    return int(math.floor(value + 0.5))


def level_cost(level: int) -> int:
    """Experience needed to go from ``level - 1`` to ``level``."""

    return round_half_up(XP_CURVE_OFFSET + XP_CURVE_SCALE * math.exp(level * XP_CURVE_EXPONENT))


def cumulative_xp(level: int) -> int:
    """Total experience needed to reach ``level`` from level 0."""

    requirements = 0
    for current in range(1, level + 1):
        requirements += level_cost(current)
    return requirements


def level_from_experience(xp: float) -> int:
    """Inverse of :func:`level_cost`; only defined above 100 xp."""

    if xp <= INVERSE_MIN_XP:
        raise InvalidExperience(f"Inverse experience curve requires more than {INVERSE_MIN_XP} xp, got {xp}")
    return int(math.floor(math.log((xp - XP_CURVE_OFFSET) / XP_CURVE_SCALE) / XP_CURVE_EXPONENT))


def level_from_total_xp(total_xp: float, cap: Optional[int] = None) -> int:
    """Highest level whose cumulative requirement fits in ``total_xp``, up to ``cap``."""

    if total_xp < 0:
        raise InvalidExperience(f"Experience must be non-negative, got {total_xp}")
    level = 0
    requirements = level_cost(level + 1)
    while requirements <= total_xp and (cap is None or level < cap):
        level += 1
        requirements += level_cost(level + 1)
    return level


def estimate_level(
    total_xp: float,
    strategy: str = STRATEGY_CUMULATIVE,
    cap: Optional[int] = None,
) -> int:
    if strategy == STRATEGY_CUMULATIVE:
        return level_from_total_xp(total_xp, cap)
    if strategy == STRATEGY_INVERSE:
        if total_xp < 0:
            raise InvalidExperience(f"Experience must be non-negative, got {total_xp}")
        if total_xp <= INVERSE_MIN_XP:
            return 0
        return level_from_experience(total_xp)
    raise ValueError(f"Unknown level estimation strategy '{strategy}'")


def stat_increments(min_stats: StatBlock, max_stats: StatBlock, steps: float) -> Dict[str, float]:
    """Unrounded per-level stat gain across ``steps`` levels."""

    if steps <= 0:
        return {name: 0.0 for name in StatBlock.FIELDS}
    return {
        name: (getattr(max_stats, name) - getattr(min_stats, name)) / steps
        for name in StatBlock.FIELDS
    }


def interpolate_stats(min_stats: StatBlock, increments: Dict[str, float], level: float) -> StatBlock:
    values = {
        name: getattr(min_stats, name) + round_half_up(increments[name] * level)
        for name in StatBlock.FIELDS
    }
    return StatBlock(**values)


__all__ = [
    "XP_CURVE_OFFSET",
    "XP_CURVE_SCALE",
    "XP_CURVE_EXPONENT",
    "STRATEGY_CUMULATIVE",
    "STRATEGY_INVERSE",
    "round_half_up",
    "level_cost",
    "cumulative_xp",
    "level_from_experience",
    "level_from_total_xp",
    "estimate_level",
    "stat_increments",
    "interpolate_stats",
]
