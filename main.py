"""Print progression tables for fighters of the bundled catalog."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from fusion.assets.content import ContentManager
from fusion.engine.logger import init_logger
from fusion.fighters.unit import FighterFusion
from fusion.progression import ProgressionCalculator, ProgressionError


SETTINGS_PATH = Path("settings.json")


def load_settings() -> Dict[str, Any]:
    if not SETTINGS_PATH.exists():
        return {}
    try:
        return json.loads(SETTINGS_PATH.read_text())
    except json.JSONDecodeError:
        return {}


def progression_rows(calculator: ProgressionCalculator) -> List[str]:
    rows = []
    for level in range(0, calculator.level_cap + 1):
        stats = calculator.stats_at(level)
        rows.append(
            f"{level:>4} {calculator.total_xp_for_level(level):>8} "
            f"{stats.hp:>6} {stats.atk:>6} {stats.def_:>6} {stats.wis:>6} {stats.agi:>6}"
        )
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("fighter", nargs="?", help="catalog id; every fighter when omitted")
    parser.add_argument("--sef", type=int, default=0, help="current SEF counter")
    parser.add_argument("--step", type=int, default=0, help="evolution step (0-2)")
    parser.add_argument("--xp", type=int, default=0, help="accumulated experience")
    args = parser.parse_args(argv)

    settings = load_settings()
    logger = init_logger(SETTINGS_PATH)
    content_root = settings.get("contentRoot")
    content = ContentManager(Path(content_root) if content_root else None)
    content.load(logger.channel("content"))

    if args.fighter:
        if args.fighter not in content.fighters.fighters:
            print(f"Unknown fighter '{args.fighter}'")
            return 1
        fighters = [content.fighters.get(args.fighter)]
    else:
        fighters = list(content.fighters)

    status = 0
    for fighter in fighters:
        unit = FighterFusion(fighter, current_sef=args.sef, total_xp=args.xp, evolution_step=args.step)
        try:
            calculator = ProgressionCalculator.for_fusion(unit, logger.channel("progression"))
            detail = calculator.detail()
        except ProgressionError as exc:
            print(f"{fighter.catalog_id} {fighter.name}: {exc}")
            status = 1
            continue
        print(f"\n{fighter.catalog_id} {fighter.name} [{fighter.tier}]")
        print(
            f"max level {detail.max_level:g}, level {detail.current_level}, "
            f"{detail.current_xp}/{detail.level_up_xp} xp to next"
        )
        print(" lvl  tot. xp     hp    atk    def    wis    agi")
        for row in progression_rows(calculator):
            print(row)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
