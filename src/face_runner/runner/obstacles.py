from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import CONFIG, RunnerConfig
from .geometry import Box, overlaps
from .player import Player


class ObstacleKind(Enum):
    LOW = "low"    # 地面に置かれている（ジャンプで避ける）
    HIGH = "high"  # 宙に浮いている（しゃがんで避ける）


@dataclass
class Obstacle:
    """障害物。x だけが毎フレーム変化する"""
    x: float
    y: float
    width: int
    height: int
    kind: ObstacleKind
    speed: float

    @classmethod
    def create(cls, kind: ObstacleKind, config: RunnerConfig = CONFIG) -> "Obstacle":
        if kind is ObstacleKind.LOW:
            height = config.low_height
            y = config.ground_y - height
        else:
            height = config.high_height
            y = config.ground_y - config.high_clearance
        return cls(
            x=float(config.width),
            y=float(y),
            width=config.obstacle_width,
            height=height,
            kind=kind,
            speed=config.obstacle_speed,
        )

    @classmethod
    def spawn(cls, config: RunnerConfig = CONFIG, rng: Optional[random.Random] = None) -> "Obstacle":
        # 種類は五分五分
        r = (rng or random).random()
        kind = ObstacleKind.LOW if r > 0.5 else ObstacleKind.HIGH
        return cls.create(kind, config)

    def update(self) -> None:
        self.x -= self.speed

    def is_offscreen(self) -> bool:
        return self.x < -self.width

    def box(self) -> Box:
        return Box(left=self.x, top=self.y, width=self.width, height=self.height)

    def hits(self, player: Player) -> bool:
        return overlaps(player.box(), self.box())


class ObstacleSpawner:
    """一定間隔ごとに確率で障害物を生成する"""

    def __init__(self, config: RunnerConfig = CONFIG, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng or random.Random()

    def maybe_spawn(self, frame: int) -> Optional[Obstacle]:
        if frame % self.config.spawn_interval != 0:
            return None
        if self.rng.random() >= self.config.spawn_chance:
            return None
        return Obstacle.spawn(self.config, self.rng)
