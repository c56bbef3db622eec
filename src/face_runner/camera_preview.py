from __future__ import annotations

from typing import Any

import cv2
import numpy as np

# Pyxel のデフォルトパレット（インデックス 0-15）
PALETTE = np.array(
    [
        (0x00, 0x00, 0x00),
        (0x2B, 0x33, 0x5F),
        (0x7E, 0x20, 0x72),
        (0x19, 0x95, 0x9C),
        (0x8B, 0x48, 0x52),
        (0x39, 0x5C, 0x98),
        (0xA9, 0xC1, 0xFF),
        (0xEE, 0xEE, 0xEE),
        (0xD4, 0x18, 0x6C),
        (0xD3, 0x84, 0x41),
        (0xE9, 0xC3, 0x5B),
        (0x70, 0xC6, 0xA9),
        (0x76, 0x96, 0xDE),
        (0xA3, 0xA3, 0xA3),
        (0xFF, 0x97, 0x98),
        (0xED, 0xC7, 0xB0),
    ],
    dtype=np.int32,
)


def make_preview(frame_rgb: Any, width: int = 160, height: int = 120) -> np.ndarray:
    """
    カメラ画像を縮小・左右反転し、パレット番号 (height, width) の配列にする。
    空のフレームは cv2.error になる。
    """
    small = cv2.resize(frame_rgb, (width, height), interpolation=cv2.INTER_AREA)
    mirrored = small[:, ::-1].astype(np.int32)
    # 各画素に最も近いパレット色を選ぶ
    diff = mirrored[:, :, None, :] - PALETTE[None, None, :, :]
    dist = (diff * diff).sum(axis=3)
    return dist.argmin(axis=2).astype(np.uint8)
