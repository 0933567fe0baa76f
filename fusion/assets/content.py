"""Asset loading entry point."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from fusion.engine.logger import ChannelLogger
from fusion.fighters.data import FighterDatabase

DEFAULT_CONTENT_ROOT = Path(__file__).resolve().parent


class ContentManager:
    def __init__(self, root: Optional[Path] = None) -> None:
        self.root = Path(root) if root is not None else DEFAULT_CONTENT_ROOT
        self.fighters = FighterDatabase()

    def load(self, logger: Optional[ChannelLogger] = None) -> None:
        self.fighters.load_directory(self.root / "data" / "fighters", logger)


__all__ = ["ContentManager", "DEFAULT_CONTENT_ROOT"]
