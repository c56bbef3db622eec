from __future__ import annotations

from enum import Enum, auto

from .config import CONFIG, RunnerConfig
from .geometry import Box

JUMP_LABELS = frozenset({"happy", "surprised"})
DUCK_LABELS = frozenset({"sad", "angry", "fearful", "disgusted"})


class PlayerState(Enum):
    RUNNING = auto()
    JUMPING = auto()
    DUCKING = auto()


class Player:
    """表情ラベルで操作するプレイヤー。y は足元の座標"""

    def __init__(self, config: RunnerConfig = CONFIG) -> None:
        self.config = config
        self.x = float(config.player_x)
        self.y = float(config.ground_y)
        self.vy = 0.0
        self.width = config.player_width
        self.height = config.normal_height
        self.state = PlayerState.RUNNING

    def is_on_ground(self) -> bool:
        return self.y >= self.config.ground_y

    def set_state(self, label: str) -> None:
        """表情ラベルから状態を決める。空中では何もしない"""
        if not self.is_on_ground():
            return
        if label in JUMP_LABELS:
            self.jump()
            self.state = PlayerState.JUMPING
        elif label in DUCK_LABELS:
            self.state = PlayerState.DUCKING
        else:
            self.state = PlayerState.RUNNING

    def jump(self) -> None:
        if self.is_on_ground():
            self.vy = self.config.jump_impulse

    def update(self) -> None:
        """1フレーム分の物理更新（位置 -> 速度 の順）"""
        self.y += self.vy
        self.vy += self.config.gravity

        ground_y = self.config.ground_y
        if self.y > ground_y:
            self.y = float(ground_y)
            self.vy = 0.0
            # 着地したら必ず走行に戻る
            if self.state is PlayerState.JUMPING:
                self.state = PlayerState.RUNNING

        if self.state is PlayerState.DUCKING and self.is_on_ground():
            self.height = self.config.duck_height
        else:
            self.height = self.config.normal_height

    def box(self) -> Box:
        return Box(left=self.x, top=self.y - self.height, width=self.width, height=self.height)
