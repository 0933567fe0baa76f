from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from fusion.assets.content import ContentManager
from fusion.engine.logger import ChannelLogger
from fusion.fighters.data import FighterDatabase, FighterTemplate
from fusion.fighters.stats import FighterClass, Rarity, Sign, StatBlock, Tribe
from fusion.fighters.unit import FighterFusion, FuseFighter
from fusion.models.skill import SkillRank, StatsType

STATS = {"hp": 10, "atk": 11, "def": 12, "wis": 13, "agi": 14}


def _entry(**overrides) -> dict:
    entry = {
        "catalogId": "7",
        "name": "Test Pup",
        "class": "scout",
        "rarity": "r",
        "tribe": "theri",
        "sign": "earth",
        "tier": "t1_10_18_20_36_30_60",
        "minStats": STATS,
        "maxStats": {"hp": 20, "attack": 21, "defense": 22, "wisdom": 23, "agility": 24},
        "maxSef": 5,
    }
    entry.update(overrides)
    return entry


def test_template_from_dict() -> None:
    template = FighterTemplate.from_dict(_entry())
    assert template.catalog_id == "7"
    assert template.fighter_class is FighterClass.SCOUT
    assert template.rarity is Rarity.RARE
    assert template.tribe is Tribe.THERI
    assert template.sign is Sign.EARTH
    assert template.max_sef == 5
    assert template.min_stats == StatBlock(hp=10, atk=11, def_=12, wis=13, agi=14)
    assert template.max_stats.def_ == 22
    assert template.skill is None
    assert template.pedestal_name() == "img_pedestal_theri_r"
    assert template.image_name == "fighter_7_image"
    assert template.icon_name == "fighter_7_icon"


def test_template_accepts_misspelled_warlock() -> None:
    assert FighterTemplate.from_dict(_entry(**{"class": "warlcok"})).fighter_class is FighterClass.WARLOCK


def test_template_requires_catalog_id() -> None:
    entry = _entry()
    del entry["catalogId"]
    with pytest.raises(KeyError):
        FighterTemplate.from_dict(entry)


def test_stat_block_aliases_and_errors() -> None:
    assert StatBlock.from_dict({"health": 1, "attack": 2, "defence": 3, "wisdom": 4, "agility": 5}).as_tuple() == (
        1,
        2,
        3,
        4,
        5,
    )
    with pytest.raises(KeyError):
        StatBlock.from_dict({"hp": 1, "atk": 2, "wis": 4, "agi": 5})
    with pytest.raises(ValueError):
        StatBlock.from_dict({**STATS, "hp": -1})
    assert StatBlock.from_dict({**STATS, "hp": "12.0"}).hp == 12
    assert StatBlock.zero().to_dict() == {"hp": 0, "atk": 0, "def": 0, "wis": 0, "agi": 0}


def test_rarity_codes() -> None:
    assert Rarity.parse("UC") is Rarity.UNCOMMON
    assert Rarity.parse("legend") is Rarity.LEGENDARY
    assert Rarity.parse(Rarity.EPIC) is Rarity.EPIC
    with pytest.raises(ValueError):
        Rarity.parse("mythic")


def test_database_skips_bad_files(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    directory = tmp_path / "fighters"
    directory.mkdir()
    (directory / "a_valid.json").write_text(json.dumps([_entry(), _entry(catalogId="8", tier=None, minStats={})]))
    (directory / "b_single.json").write_text(json.dumps(_entry(catalogId="9")))
    (directory / "c_broken.json").write_text("{not json")
    caplog.set_level(logging.INFO, logger="fusion")
    logger = ChannelLogger("content", logging.getLogger("fusion.content"), True)

    database = FighterDatabase()
    database.load_directory(directory, logger)

    assert len(database) == 2
    assert sorted(template.catalog_id for template in database) == ["7", "9"]
    assert database.get("9").name == "Test Pup"
    assert "c_broken.json" in caplog.text
    assert "Loaded 2 fighters" in caplog.text


def test_database_skips_malformed_documents(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    directory = tmp_path / "fighters"
    directory.mkdir()
    (directory / "a_bytes.json").write_bytes(b"\xff\xfe[")
    (directory / "b_entries.json").write_text(json.dumps([1, "x", _entry(catalogId="11")]))
    (directory / "c_scalar.json").write_text("5")
    caplog.set_level(logging.WARNING, logger="fusion")
    logger = ChannelLogger("content", logging.getLogger("fusion.content"), True)

    database = FighterDatabase()
    database.load_directory(directory, logger)

    assert [template.catalog_id for template in database] == ["11"]
    assert "a_bytes.json" in caplog.text
    assert "non-object fighter entry in b_entries.json" in caplog.text
    assert "c_scalar.json" in caplog.text


def test_content_manager_survives_malformed_catalog(tmp_path: Path) -> None:
    directory = tmp_path / "data" / "fighters"
    directory.mkdir(parents=True)
    (directory / "bad.json").write_bytes(b"\xff\xfe[")
    (directory / "scalar.json").write_text("5")
    content = ContentManager(tmp_path)
    content.load()
    assert len(content.fighters) == 0


def test_database_missing_directory(tmp_path: Path) -> None:
    database = FighterDatabase()
    database.load_directory(tmp_path / "missing")
    assert len(database) == 0


def test_bundled_catalog() -> None:
    content = ContentManager()
    content.load()
    assert len(content.fighters) == 3
    ember = content.fighters.get("1")
    assert ember.tier == "t1_10_18_20_36_30_60"
    assert ember.skill is not None
    assert ember.skill.stat is StatsType.ATK
    assert ember.skill.rank is SkillRank.NOVICE
    assert content.fighters.get("2").rarity is Rarity.UNCOMMON
    assert content.fighters.get("3").max_sef == 2


def test_content_manager_custom_root(tmp_path: Path) -> None:
    directory = tmp_path / "data" / "fighters"
    directory.mkdir(parents=True)
    (directory / "one.json").write_text(json.dumps(_entry()))
    content = ContentManager(tmp_path)
    content.load()
    assert [template.catalog_id for template in content.fighters] == ["7"]


def test_owned_fighter_snapshots() -> None:
    template = FighterTemplate.from_dict(_entry())
    fusion = FighterFusion.from_dict({"currentSef": 2, "totalXp": 300, "evolutionStep": 1}, template)
    assert (fusion.current_sef, fusion.total_xp, fusion.evolution_step) == (2, 300, 1)
    assert fusion.with_xp(10).total_xp == 10
    assert fusion.with_sef(3).current_sef == 3
    assert fusion.total_xp == 300

    fuse = FuseFighter.from_dict({"sef": 1, "rarity": "e"}, template)
    assert fuse.current_sef == 1
    assert fuse.effective_rarity is Rarity.EPIC
    assert FuseFighter(template).effective_rarity is Rarity.RARE
