from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RunnerConfig:
    # 画面
    width: int = 800
    height: int = 450
    ground_offset: int = 40       # 画面下端から地面までの距離

    # プレイヤー
    player_x: float = 50.0
    player_width: int = 50
    normal_height: int = 80
    duck_height: int = 40
    gravity: float = 0.8
    jump_impulse: float = -18.0

    # 障害物
    obstacle_width: int = 40
    obstacle_speed: float = 7.0
    low_height: int = 60
    high_height: int = 50
    high_clearance: int = 100     # HIGH 障害物の上端が地面からどれだけ上か

    # スポーン
    spawn_interval: int = 100     # 何フレームごとに抽選するか
    spawn_chance: float = 0.5

    @property
    def ground_y(self) -> int:
        return self.height - self.ground_offset


CONFIG = RunnerConfig()
