from __future__ import annotations

from .config import CONFIG, RunnerConfig
from .geometry import Box, overlaps
from .obstacles import Obstacle, ObstacleKind, ObstacleSpawner
from .player import Player, PlayerState
from .session import GameSession, Phase

__all__ = [
    "CONFIG",
    "RunnerConfig",
    "Box",
    "overlaps",
    "Obstacle",
    "ObstacleKind",
    "ObstacleSpawner",
    "Player",
    "PlayerState",
    "GameSession",
    "Phase",
]
