"""Fighter progression calculator.

One calculator wraps one immutable fighter snapshot. The tier identifier is
decoded and the level ceiling resolved once, at construction; every other
figure (xp requirements, level estimates, stats) is derived on demand from
those two values and the snapshot.
"""
from __future__ import annotations

import math
from typing import Dict, Optional, Union

from fusion.engine.logger import ChannelLogger
from fusion.fighters.stats import StatBlock
from fusion.fighters.unit import FighterDetail, FighterFusion, FuseFighter
from .ceiling import Bracket, bracket_for_evolution, bracket_for_rarity, resolve_ceiling
from .errors import InvalidExperience, InvalidLevel
from .formulas import (
    INVERSE_MIN_XP,
    STRATEGY_CUMULATIVE,
    cumulative_xp,
    estimate_level,
    interpolate_stats,
    level_cost,
    level_from_experience,
    stat_increments,
)
from .tiers import TierSpec


class ProgressionCalculator:
    """Level ceiling, experience and stat figures for one fighter snapshot."""

    def __init__(
        self,
        tier: Union[str, TierSpec],
        bracket: Bracket,
        current_sef: int,
        total_xp: int,
        min_stats: StatBlock,
        max_stats: StatBlock,
        catalog_id: str = "",
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        if total_xp < 0:
            raise InvalidExperience(f"Total experience must be non-negative, got {total_xp}")
        self.tier = tier if isinstance(tier, TierSpec) else TierSpec.parse(tier, logger)
        self.bracket = bracket
        self.current_sef = current_sef
        self.total_xp = total_xp
        self.min_stats = min_stats
        self.max_stats = max_stats
        self.catalog_id = catalog_id
        self.logger = logger
        self._ceiling = resolve_ceiling(bracket, current_sef, logger)

    # ------------------------------------------------------------------
    # Construction from owned fighters
    # ------------------------------------------------------------------
    @classmethod
    def for_fusion(cls, unit: FighterFusion, logger: Optional[ChannelLogger] = None) -> "ProgressionCalculator":
        """Calculator for a fighter whose bracket follows its evolution step."""

        fighter = unit.fighter
        tier = TierSpec.parse(fighter.tier, logger)
        bracket = bracket_for_evolution(tier, unit.evolution_step, fighter.max_sef)
        return cls(
            tier,
            bracket,
            unit.current_sef,
            unit.total_xp,
            fighter.min_stats,
            fighter.max_stats,
            catalog_id=fighter.catalog_id,
            logger=logger,
        )

    @classmethod
    def for_fuse(cls, unit: FuseFighter, logger: Optional[ChannelLogger] = None) -> "ProgressionCalculator":
        """Calculator for a fighter whose bracket follows its rarity."""

        fighter = unit.fighter
        tier = TierSpec.parse(fighter.tier, logger)
        bracket = bracket_for_rarity(tier, unit.effective_rarity)
        return cls(
            tier,
            bracket,
            unit.current_sef,
            unit.total_xp,
            fighter.min_stats,
            fighter.max_stats,
            catalog_id=fighter.catalog_id,
            logger=logger,
        )

    @classmethod
    def from_unit(
        cls,
        unit: Union[FighterFusion, FuseFighter],
        logger: Optional[ChannelLogger] = None,
    ) -> "ProgressionCalculator":
        if isinstance(unit, FighterFusion):
            return cls.for_fusion(unit, logger)
        if isinstance(unit, FuseFighter):
            return cls.for_fuse(unit, logger)
        raise TypeError(f"Unsupported unit type {type(unit).__name__}")

    # ------------------------------------------------------------------
    # Level ceiling
    # ------------------------------------------------------------------
    def current_max_level(self) -> float:
        return self._ceiling

    def max_level_at_max_sef(self) -> int:
        return self.bracket.maximum

    @property
    def level_cap(self) -> int:
        """Highest whole level allowed by the current ceiling."""

        return int(math.floor(self._ceiling))

    def _check_level(self, level: int) -> None:
        if not isinstance(level, int):
            raise InvalidLevel(f"Level must be a whole number, got {level!r}")
        if level < 0 or level > self._ceiling:
            raise InvalidLevel(
                f"Level {level} is outside 0..{self._ceiling:g} for fighter {self.catalog_id or '?'}"
            )

    # ------------------------------------------------------------------
    # Experience
    # ------------------------------------------------------------------
    def xp_for_level(self, level: int) -> int:
        """Experience needed to advance from ``level - 1`` into ``level``."""

        self._check_level(level)
        return level_cost(level)

    def total_xp_for_level(self, level: int) -> int:
        """Cumulative experience needed to reach ``level`` from level 0."""

        self._check_level(level)
        return cumulative_xp(level)

    def level_reached_by_adding(self, fodder_xp: int, strategy: str = STRATEGY_CUMULATIVE) -> int:
        """Level the fighter would reach after absorbing ``fodder_xp``.

        The estimate never exceeds the current ceiling, so the result can be
        lower than the raw curve level when the fighter is capped.
        """

        if fodder_xp < 0:
            raise InvalidExperience(f"Fodder experience must be non-negative, got {fodder_xp}")
        summed_xp = self.total_xp + fodder_xp
        raw_level = estimate_level(summed_xp, strategy, cap=self.level_cap)
        level = min(raw_level, self.level_cap)
        if self.logger and self.logger.enabled:
            self.logger.debug(
                "%s: %d xp + %d fodder -> level %d (raw %d, cap %d, %s)",
                self.catalog_id or "fighter",
                self.total_xp,
                fodder_xp,
                level,
                raw_level,
                self.level_cap,
                strategy,
            )
        return level

    def current_level(self) -> int:
        return self.level_reached_by_adding(0)

    def current_xp(self) -> int:
        """Experience gathered towards the next level."""

        return self.total_xp - self.total_xp_for_level(self.current_level())

    def level_up_xp(self) -> int:
        """Experience the next level costs on its own."""

        return level_cost(self.current_level() + 1)

    def is_xp_enough_for_next_level(self, fodder_xp: int) -> bool:
        if fodder_xp <= INVERSE_MIN_XP:
            return False
        return level_from_experience(fodder_xp + 1) > self.current_level()

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------
    def level_up_increments(self) -> Dict[str, float]:
        """Unrounded stat gain per level across the current ceiling."""

        return stat_increments(self.min_stats, self.max_stats, self._ceiling)

    def stats_at(self, level: int) -> StatBlock:
        self._check_level(level)
        stats = interpolate_stats(self.min_stats, self.level_up_increments(), level)
        if self.logger and self.logger.enabled:
            self.logger.debug("%s stats at level %s: %s", self.catalog_id or "fighter", level, stats.to_dict())
        return stats

    def current_stats(self) -> StatBlock:
        return self.stats_at(self.current_level())

    def detail(self) -> FighterDetail:
        level = self.current_level()
        return FighterDetail(
            catalog_id=self.catalog_id,
            current_level=level,
            max_level=self._ceiling,
            current_xp=self.total_xp - cumulative_xp(level),
            level_up_xp=level_cost(level + 1),
            stats=self.stats_at(level),
        )


__all__ = ["ProgressionCalculator"]
