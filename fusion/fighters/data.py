"""Fighter catalog data loading."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional

from fusion.engine.logger import ChannelLogger
from fusion.models.skill import Skill
from .stats import FighterClass, Rarity, Sign, StatBlock, Tribe


@dataclass(frozen=True)
class FighterTemplate:
    """Catalog entry shared by every owned copy of a fighter."""

    catalog_id: str
    name: str
    fighter_class: FighterClass
    rarity: Rarity
    tribe: Tribe
    sign: Sign
    tier: str
    min_stats: StatBlock
    max_stats: StatBlock
    max_sef: int = 4
    lore: str = ""
    skill: Optional[Skill] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "FighterTemplate":
        raw_id = data.get("catalogId", data.get("id"))
        if raw_id is None:
            raise KeyError("catalogId")
        catalog_id = str(raw_id)
        return cls(
            catalog_id=catalog_id,
            name=data.get("name", catalog_id),
            fighter_class=FighterClass.parse(data.get("class", data.get("fighterClass", "champ"))),
            rarity=Rarity.parse(data.get("rarity", "common")),
            tribe=Tribe(str(data.get("tribe", "hemi")).lower()),
            sign=Sign(str(data.get("sign", "air")).lower()),
            tier=str(data["tier"]),
            min_stats=StatBlock.from_dict(data["minStats"]),
            max_stats=StatBlock.from_dict(data["maxStats"]),
            max_sef=int(data.get("maxSef", 4)),
            lore=data.get("lore", ""),
            skill=Skill.from_dict(data["skill"]) if data.get("skill") else None,
        )

    @property
    def image_name(self) -> str:
        return f"fighter_{self.catalog_id}_image"

    @property
    def icon_name(self) -> str:
        return f"fighter_{self.catalog_id}_icon"

    def pedestal_name(self, rarity: Optional[Rarity] = None) -> str:
        rarity = rarity or self.rarity
        return f"img_pedestal_{self.tribe.value}_{rarity.value[0]}"


class FighterDatabase:
    """Loads fighter templates from JSON assets."""

    def __init__(self) -> None:
        self.fighters: Dict[str, FighterTemplate] = {}

    def load_directory(self, directory: Path, logger: Optional[ChannelLogger] = None) -> None:
        if not directory.exists():
            return
        for path in sorted(directory.glob("*.json")):
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, UnicodeDecodeError):
                if logger and logger.enabled:
                    logger.warning("Skipping undecodable fighter file %s", path.name)
                continue
            if isinstance(data, dict):
                data = [data]
            elif not isinstance(data, list):
                if logger and logger.enabled:
                    logger.warning("Skipping fighter file %s: expected an object or a list", path.name)
                continue
            for entry in data:
                if not isinstance(entry, dict):
                    if logger and logger.enabled:
                        logger.warning("Skipping non-object fighter entry in %s: %r", path.name, entry)
                    continue
                try:
                    fighter = FighterTemplate.from_dict(entry)
                except (KeyError, TypeError, ValueError) as exc:
                    if logger and logger.enabled:
                        logger.warning("Skipping fighter entry in %s: %s", path.name, exc)
                    continue
                self.fighters[fighter.catalog_id] = fighter
        if logger and logger.enabled:
            logger.info("Loaded %d fighters from %s", len(self.fighters), directory)

    def get(self, catalog_id: str) -> FighterTemplate:
        return self.fighters[catalog_id]

    def __iter__(self) -> Iterable[FighterTemplate]:
        return iter(self.fighters.values())

    def __len__(self) -> int:
        return len(self.fighters)


__all__ = ["FighterTemplate", "FighterDatabase"]
