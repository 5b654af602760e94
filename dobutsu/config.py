from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from dobutsu.core import Player
from dobutsu.policy import POLICIES


@dataclass
class PlayConfig:
    human_player: str = "sente"
    opponent: str = "heuristic"
    think_delay: float = 0.0
    seed: Optional[int] = None
    max_ply: int = 200
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        self.human_player = self.human_player.lower()
        if self.human_player not in ("sente", "gote"):
            raise ValueError(f"human_player must be 'sente' or 'gote', got {self.human_player!r}.")
        if self.opponent not in POLICIES:
            raise ValueError(f"opponent must be one of {sorted(POLICIES)}, got {self.opponent!r}.")
        if self.think_delay < 0:
            raise ValueError("think_delay must be non-negative.")
        if self.max_ply <= 0:
            raise ValueError("max_ply must be positive.")

    @property
    def human(self) -> Player:
        return Player.SENTE if self.human_player == "sente" else Player.GOTE


def load_play_config(path: Optional[Union[str, Path]] = None, **overrides: Any) -> PlayConfig:
    """Load a ``PlayConfig`` from YAML; keyword overrides set to ``None`` are ignored."""
    cfg: Dict[str, Any] = {}
    if path is not None:
        cfg_path = Path(path)
        if cfg_path.exists():
            cfg = yaml.safe_load(cfg_path.read_text()) or {}
    known = {f.name for f in fields(PlayConfig)}
    unknown = set(cfg) - known
    if unknown:
        raise ValueError(f"Unknown play config keys: {sorted(unknown)}")
    config = PlayConfig(**cfg)
    updates = {key: value for key, value in overrides.items() if value is not None}
    unknown = set(updates) - known
    if unknown:
        raise ValueError(f"Unknown play config keys: {sorted(unknown)}")
    return replace(config, **updates)
