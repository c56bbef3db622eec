from __future__ import annotations

import random
from typing import Optional

from ..events import Action, InputEvent
from .config import CONFIG, RunnerConfig
from .player import PlayerState
from .session import GameSession, Phase


class RunnerGame:
    """
    表情で操作する障害物ランナー。

    - 笑顔 / 驚き -> ジャンプ
    - 悲しみ / 怒り / 恐れ / 嫌悪 -> しゃがむ
    - それ以外 -> 走る
    - START（Space / Enter）で開始・リスタート
    """

    # 色（Pyxel のデフォルトパレット）
    _COLOR_BG = 0
    _COLOR_GROUND = 13
    _COLOR_PLAYER = 12
    _COLOR_PLAYER_DUCK = 6
    _COLOR_OBSTACLE = 8
    _COLOR_TEXT = 7
    _COLOR_ALERT = 8

    def __init__(self, config: RunnerConfig = CONFIG, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.width = config.width
        self.height = config.height
        self.session = GameSession(config, rng)
        self.quit_requested = False
        self.camera_frame = None  # パレット番号の2次元配列（左右反転済み）

    def on_event(self, event: InputEvent) -> None:
        """入力イベントを処理する"""
        if event.action == Action.QUIT:
            self.quit_requested = True
        elif event.action == Action.START:
            self.session.start()
        elif event.action == Action.EXPRESSION and event.label:
            self.session.observe(event.label)
        elif event.action == Action.CAMERA_FRAME and event.frame is not None:
            self.camera_frame = event.frame

    def update(self) -> None:
        self.session.tick()

    # --- 描画 ---

    def draw(self, px) -> None:
        px.cls(self._COLOR_BG)
        self._draw_camera(px)
        self._draw_ground(px)

        phase = self.session.phase
        if phase is Phase.START:
            self._draw_center(px, ["EXPRESSION RUNNER", "Press SPACE to start"], self._COLOR_TEXT)
            return

        self._draw_obstacles(px)
        self._draw_player(px)
        self._draw_hud(px)
        if phase is Phase.GAME_OVER:
            self._draw_center(
                px,
                ["GAME OVER", f"Score: {self.session.score}", "Press SPACE to restart"],
                self._COLOR_ALERT,
            )

    def _draw_camera(self, px) -> None:
        """左上にカメラ画像を描画する（分類器が見ている顔の確認用）"""
        frame = self.camera_frame
        if frame is None:
            return
        for y, row in enumerate(frame):
            for x, col in enumerate(row):
                px.pset(x, y, int(col))

    def _draw_ground(self, px) -> None:
        ground_y = self.config.ground_y
        px.rect(0, ground_y, self.width, self.height - ground_y, self._COLOR_GROUND)

    def _draw_player(self, px) -> None:
        box = self.session.player_box()
        ducking = self.session.player.state is PlayerState.DUCKING
        color = self._COLOR_PLAYER_DUCK if ducking else self._COLOR_PLAYER
        px.rect(int(box.left), int(box.top), int(box.width), int(box.height), color)

    def _draw_obstacles(self, px) -> None:
        for box in self.session.obstacle_boxes():
            px.rect(int(box.left), int(box.top), int(box.width), int(box.height), self._COLOR_OBSTACLE)

    def _draw_hud(self, px) -> None:
        px.text(20, 20, f"Score: {self.session.score}", self._COLOR_TEXT)
        px.text(20, 30, f"State: {self.session.current_label}", self._COLOR_TEXT)

    def _draw_center(self, px, lines: list[str], color: int) -> None:
        # Pyxel の標準フォントは 1 文字 4px 幅
        y = self.height // 2 - len(lines) * 6
        for line in lines:
            x = self.width // 2 - len(line) * 2
            px.text(x, y, line, color)
            y += 12
