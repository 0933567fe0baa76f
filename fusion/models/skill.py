"""Fighter skill records."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict


class StatsType(str, Enum):
    HP = "hp"
    ATK = "atk"
    DEF = "def"
    WIS = "wis"
    AGI = "agi"


class SkillLevel(str, Enum):
    NOVICE = "novice"
    ADEPT = "adept"
    ELITE = "elite"


class SkillRank(IntEnum):
    NOVICE = 1
    ADEPT = 2
    ELITE = 3


class SkillType(str, Enum):
    NATURAL = "natural"
    MAGICAL = "magical"
    RANDOM = "random"
    SUPPORT = "support"
    DOUBLE = "double"
    SPECIAL = "special"


@dataclass(frozen=True)
class Skill:
    stat: StatsType
    name: str
    level: SkillLevel
    description: str
    cooldown: int
    rank: SkillRank
    type: SkillType

    @classmethod
    def from_dict(cls, data: Dict) -> "Skill":
        level = SkillLevel(data.get("level", "novice"))
        rank = data.get("rank")
        return cls(
            stat=StatsType(data["stat"]),
            name=data.get("name", ""),
            level=level,
            description=data.get("description", ""),
            cooldown=int(data.get("cooldown", 0)),
            rank=SkillRank(int(rank)) if rank is not None else SkillRank[level.name],
            type=SkillType(data.get("type", "natural")),
        )


__all__ = ["StatsType", "SkillLevel", "SkillRank", "SkillType", "Skill"]
