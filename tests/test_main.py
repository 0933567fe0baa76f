from __future__ import annotations

import json
from pathlib import Path

import pytest

import main


def test_prints_progression_table(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.chdir(tmp_path)
    assert main.main(["1", "--sef", "4", "--xp", "105"]) == 0
    output = capsys.readouterr().out
    assert "Ember Cub" in output
    assert "max level 18, level 1, 0/110 xp to next" in output
    assert "  18     2956    208    220    108    180    168" in output


def test_unknown_fighter(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.chdir(tmp_path)
    assert main.main(["404"]) == 1
    assert "Unknown fighter '404'" in capsys.readouterr().out


def test_invalid_sef_reports_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.chdir(tmp_path)
    assert main.main(["3", "--sef", "4"]) == 1
    assert "SEF 4" in capsys.readouterr().out


def test_content_root_from_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    fighters = tmp_path / "content" / "data" / "fighters"
    fighters.mkdir(parents=True)
    (fighters / "only.json").write_text(
        json.dumps(
            {
                "catalogId": "x",
                "name": "Solo",
                "tier": "t1_2_2_2_2_2_2",
                "minStats": {"hp": 0, "atk": 0, "def": 0, "wis": 0, "agi": 0},
                "maxStats": {"hp": 2, "atk": 2, "def": 2, "wis": 2, "agi": 2},
            }
        )
    )
    (tmp_path / "settings.json").write_text(json.dumps({"contentRoot": str(tmp_path / "content")}))
    monkeypatch.chdir(tmp_path)
    assert main.main([]) == 0
    output = capsys.readouterr().out
    assert "x Solo" in output
    assert "Ember Cub" not in output
