from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional
import time


class Action(Enum):
    # ゲーム内で扱う抽象アクション
    START = auto()       # 開始 / リスタート
    EXPRESSION = auto()  # 表情ラベルの更新
    CAMERA_FRAME = auto()  # プレビュー用のカメラ画像
    QUIT = auto()        # 終了要求


@dataclass
class InputEvent:
    # 入力イベント（抽象アクション＋任意の表情ラベル）
    action: Action
    label: Optional[str] = None  # EXPRESSION のときの表情名
    frame: Any = None  # CAMERA_FRAME のときのパレット番号配列
    timestamp: float = field(default_factory=time.time)  # イベント発生時刻（秒）
    note: Optional[str] = None  # 発生元（"keyboard" など）
