from __future__ import annotations

import logging
import random
from enum import Enum, auto
from typing import List, Optional

from .config import CONFIG, RunnerConfig
from .geometry import Box
from .obstacles import Obstacle, ObstacleSpawner
from .player import Player

logger = logging.getLogger(__name__)

NEUTRAL = "neutral"


class Phase(Enum):
    START = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class GameSession:
    """
    ランナーゲームの状態一式。

    - START -> PLAYING（開始シグナル）
    - PLAYING -> GAME_OVER（障害物に衝突）
    - GAME_OVER -> PLAYING（開始シグナルでリスタート）

    PLAYING 以外のフェーズでは tick() は何も変更しない。
    """

    def __init__(self, config: RunnerConfig = CONFIG, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.spawner = ObstacleSpawner(config, rng)
        self.phase = Phase.START
        self.player = Player(config)
        self.obstacles: List[Obstacle] = []
        self.score = 0
        self.frames = 0
        self.current_label = NEUTRAL

    # --- ライフサイクル ---

    def start(self) -> bool:
        """開始/リスタート。プレイ中なら無視して False を返す"""
        if self.phase is Phase.PLAYING:
            return False
        self.score = 0
        self.frames = 0
        self.obstacles = []
        self.player = Player(self.config)
        self.current_label = NEUTRAL
        self.phase = Phase.PLAYING
        logger.info("game started")
        return True

    def game_over(self) -> None:
        self.phase = Phase.GAME_OVER
        logger.info("game over (score=%d)", self.score)

    def observe(self, label: str) -> None:
        # 分類器から届いた最新の表情ラベル
        self.current_label = label

    # --- 更新 ---

    def tick(self) -> None:
        if self.phase is not Phase.PLAYING:
            return

        self.frames += 1
        obstacle = self.spawner.maybe_spawn(self.frames)
        if obstacle is not None:
            self.obstacles.append(obstacle)

        # 削除しても取りこぼさないよう末尾から走査
        for i in range(len(self.obstacles) - 1, -1, -1):
            obs = self.obstacles[i]
            obs.update()
            if obs.hits(self.player):
                self.game_over()
                return
            if obs.is_offscreen():
                del self.obstacles[i]
                self.score += 1

        self.player.set_state(self.current_label)
        self.player.update()

    # --- 描画用の参照 ---

    def player_box(self) -> Box:
        return self.player.box()

    def obstacle_boxes(self) -> List[Box]:
        return [o.box() for o in self.obstacles]
