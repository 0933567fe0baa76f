"""Level ceiling resolution from tier brackets and SEF counters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fusion.engine.logger import ChannelLogger
from fusion.fighters.stats import Rarity
from fusion.progression.errors import InvalidUpgrade
from fusion.progression.tiers import BRACKET_COUNT, TierSpec


@dataclass(frozen=True)
class Bracket:
    """Pair of tier table indices plus the SEF steps needed to span them."""

    index: int
    minimum: int
    maximum: int
    denominator: int

    @property
    def min_index(self) -> int:
        return 2 * self.index

    @property
    def max_index(self) -> int:
        return 2 * self.index + 1

    def ceiling(self, current_sef: int) -> float:
        if current_sef < 0 or current_sef > self.denominator:
            raise InvalidUpgrade(
                f"SEF {current_sef} is outside 0..{self.denominator} for bracket {self.index}"
            )
        if self.denominator == 0:
            return float(self.minimum)
        # Multiply before dividing so full SEF lands exactly on the maximum.
        return self.minimum + (self.maximum - self.minimum) * current_sef / self.denominator


def bracket_for_evolution(tier: TierSpec, evolution_step: int, max_sef: int) -> Bracket:
    if not 0 <= evolution_step < BRACKET_COUNT:
        raise InvalidUpgrade(f"Evolution step {evolution_step} is outside 0..{BRACKET_COUNT - 1}")
    if max_sef < 0:
        raise InvalidUpgrade(f"Maximum SEF must be non-negative, got {max_sef}")
    minimum, maximum = tier.bracket_limits(evolution_step)
    return Bracket(index=evolution_step, minimum=minimum, maximum=maximum, denominator=max_sef)


def bracket_for_rarity(tier: TierSpec, rarity: Rarity) -> Bracket:
    index = tier.rarity_bracket(rarity)
    minimum, maximum = tier.bracket_limits(index)
    return Bracket(
        index=index,
        minimum=minimum,
        maximum=maximum,
        denominator=tier.rarity_denominator(index),
    )


def resolve_ceiling(
    bracket: Bracket,
    current_sef: int,
    logger: Optional[ChannelLogger] = None,
) -> float:
    ceiling = bracket.ceiling(current_sef)
    if logger and logger.enabled:
        logger.debug(
            "Ceiling %.2f for bracket %d (%d..%d over %d SEF, current %d)",
            ceiling,
            bracket.index,
            bracket.minimum,
            bracket.maximum,
            bracket.denominator,
            current_sef,
        )
    return ceiling


__all__ = ["Bracket", "bracket_for_evolution", "bracket_for_rarity", "resolve_ceiling"]
