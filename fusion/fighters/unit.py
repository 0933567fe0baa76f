"""Owned fighter snapshots fed to the progression calculator."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

from .data import FighterTemplate
from .stats import Rarity, StatBlock


@dataclass(frozen=True)
class FighterFusion:
    """An owned fighter whose bracket is chosen by its evolution step."""

    fighter: FighterTemplate
    current_sef: int = 0
    total_xp: int = 0
    evolution_step: int = 0

    @classmethod
    def from_dict(cls, data: Dict, fighter: FighterTemplate) -> "FighterFusion":
        return cls(
            fighter=fighter,
            current_sef=int(data.get("currentSef", 0)),
            total_xp=int(data.get("totalXp", 0)),
            evolution_step=int(data.get("evolutionStep", 0)),
        )

    def with_xp(self, total_xp: int) -> "FighterFusion":
        return replace(self, total_xp=total_xp)

    def with_sef(self, current_sef: int) -> "FighterFusion":
        return replace(self, current_sef=current_sef)


@dataclass(frozen=True)
class FuseFighter:
    """An owned fighter whose bracket is chosen by its rarity within the tier."""

    fighter: FighterTemplate
    current_sef: int = 0
    total_xp: int = 0
    rarity: Optional[Rarity] = None

    @property
    def effective_rarity(self) -> Rarity:
        return self.rarity or self.fighter.rarity

    @classmethod
    def from_dict(cls, data: Dict, fighter: FighterTemplate) -> "FuseFighter":
        rarity = data.get("rarity")
        return cls(
            fighter=fighter,
            current_sef=int(data.get("currentSef", data.get("sef", 0))),
            total_xp=int(data.get("totalXp", 0)),
            rarity=Rarity.parse(rarity) if rarity else None,
        )

    def with_xp(self, total_xp: int) -> "FuseFighter":
        return replace(self, total_xp=total_xp)

    def with_sef(self, current_sef: int) -> "FuseFighter":
        return replace(self, current_sef=current_sef)


@dataclass(frozen=True)
class FighterDetail:
    """Progression figures shown on the fighter detail view."""

    catalog_id: str
    current_level: int
    max_level: float
    current_xp: int
    level_up_xp: int
    stats: StatBlock

    def to_dict(self) -> Dict:
        return {
            "catalogId": self.catalog_id,
            "currentLevel": self.current_level,
            "maxLevel": self.max_level,
            "currentXp": self.current_xp,
            "levelUpXp": self.level_up_xp,
            "stats": self.stats.to_dict(),
        }


__all__ = ["FighterFusion", "FuseFighter", "FighterDetail"]
