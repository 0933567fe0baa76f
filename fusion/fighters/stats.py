"""Fighter stat blocks and catalog enums."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Tuple


class Rarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @classmethod
    def parse(cls, value: Any) -> "Rarity":
        if isinstance(value, Rarity):
            return value
        key = str(value).strip().lower()
        key = _RARITY_CODES.get(key, key)
        return cls(key)


# Short codes used by the web client.
_RARITY_CODES = {
    "c": "common",
    "uc": "uncommon",
    "r": "rare",
    "e": "epic",
    "l": "legendary",
    "legend": "legendary",
}


class Tribe(str, Enum):
    HEMI = "hemi"
    THERI = "theri"
    XANA = "xana"


class Sign(str, Enum):
    AIR = "air"
    EARTH = "earth"
    FIRE = "fire"
    LIGHTNING = "lightning"
    WATER = "water"


class FighterClass(str, Enum):
    CHAMP = "champ"
    GURU = "guru"
    ROGUE = "rogue"
    SCOUT = "scout"
    WARLOCK = "warlock"

    @classmethod
    def parse(cls, value: Any) -> "FighterClass":
        key = str(value).strip().lower()
        if key == "warlcok":
            key = "warlock"
        return cls(key)


def _coerce_stat(value: Any) -> float:
    number = float(value)
    if number < 0:
        raise ValueError(f"Stat values must be non-negative, got {value!r}")
    return int(number) if number.is_integer() else number


@dataclass(frozen=True)
class StatBlock:
    hp: float
    atk: float
    def_: float
    wis: float
    agi: float

    FIELDS: ClassVar[Tuple[str, ...]] = ("hp", "atk", "def_", "wis", "agi")

    _ALIASES: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "hp": ("hp", "health"),
        "atk": ("atk", "attack"),
        "def_": ("def", "def_", "defense", "defence"),
        "wis": ("wis", "wisdom"),
        "agi": ("agi", "agility"),
    }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatBlock":
        values: Dict[str, float] = {}
        for name, keys in cls._ALIASES.items():
            for key in keys:
                if key in data and data[key] is not None:
                    values[name] = _coerce_stat(data[key])
                    break
            else:
                raise KeyError(f"Stat block is missing '{keys[0]}'")
        return cls(**values)

    @classmethod
    def zero(cls) -> "StatBlock":
        return cls(hp=0, atk=0, def_=0, wis=0, agi=0)

    def to_dict(self) -> Dict[str, float]:
        return {
            "hp": self.hp,
            "atk": self.atk,
            "def": self.def_,
            "wis": self.wis,
            "agi": self.agi,
        }

    def as_tuple(self) -> Tuple[float, float, float, float, float]:
        return (self.hp, self.atk, self.def_, self.wis, self.agi)


__all__ = ["StatBlock", "Rarity", "Tribe", "Sign", "FighterClass"]
