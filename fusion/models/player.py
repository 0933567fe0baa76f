"""Player and mission records exchanged with the game client."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple


class CrownType(str, Enum):
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"


class EncounterType(str, Enum):
    EMPTY = "empty"
    SERENDIPITY = "serendipity"
    BATTLE = "battle"
    END = "end"


# Share of mission steps (percent) that roll each encounter type.
ENCOUNTER_PERCENTAGES: Dict[EncounterType, int] = {
    EncounterType.EMPTY: 48,
    EncounterType.SERENDIPITY: 2,
    EncounterType.BATTLE: 50,
    EncounterType.END: 0,
}


@dataclass(frozen=True)
class Crown:
    type: CrownType
    amount: int

    @classmethod
    def from_dict(cls, data: Dict) -> "Crown":
        return cls(type=CrownType(str(data["type"]).lower()), amount=int(data.get("amount", 0)))


@dataclass(frozen=True)
class Player:
    id: int
    name: str
    jwt_token: str = ""
    player_class: int = 0
    current_xp: int = 0
    class_up_xp: int = 0
    bp_countdown: int = 0  # ms until battle points are full
    en_countdown: int = 0  # ms until energy is full
    crowns: Tuple[Crown, ...] = ()
    pfp_url: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> "Player":
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            jwt_token=data.get("jwtToken", ""),
            player_class=int(data.get("class", 0)),
            current_xp=int(data.get("currentXp", 0)),
            class_up_xp=int(data.get("classUpXp", 0)),
            bp_countdown=int(data.get("bpCountdown", 0)),
            en_countdown=int(data.get("enCountdown", 0)),
            crowns=tuple(Crown.from_dict(item) for item in data.get("crowns", [])),
            pfp_url=data.get("pfpUrl", ""),
        )

    def crown_count(self, crown_type: CrownType) -> int:
        return sum(crown.amount for crown in self.crowns if crown.type == crown_type)


@dataclass(frozen=True)
class Step:
    en_countdown: int
    current_progress: int
    encounter_type: EncounterType
    current_mission: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "Step":
        mission = data.get("currentMission")
        return cls(
            en_countdown=int(data.get("enCountdown", 0)),
            current_progress=int(data.get("currentProgress", 0)),
            encounter_type=EncounterType(data.get("encounterType", "empty")),
            current_mission=int(mission) if mission is not None else None,
        )


@dataclass(frozen=True)
class Mission:
    id: int
    code: str
    title: str
    steps: int
    completed: bool = False
    background: Optional[str] = None
    reward_preview: Optional[str] = None
    missions: Tuple["Mission", ...] = ()

    @classmethod
    def from_dict(cls, data: Dict) -> "Mission":
        return cls(
            id=int(data["id"]),
            code=data.get("code", ""),
            title=data.get("title", ""),
            steps=int(data.get("steps", 0)),
            completed=bool(data.get("completed", False)),
            background=data.get("background"),
            reward_preview=data.get("rewardPreview"),
            missions=tuple(Mission.from_dict(item) for item in data.get("missions", [])),
        )

    def iter_tree(self) -> Iterator["Mission"]:
        yield self
        for child in self.missions:
            yield from child.iter_tree()


__all__ = [
    "CrownType",
    "Crown",
    "Player",
    "EncounterType",
    "ENCOUNTER_PERCENTAGES",
    "Step",
    "Mission",
]
