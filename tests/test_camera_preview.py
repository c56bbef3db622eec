from __future__ import annotations

import numpy as np

from face_runner.camera_preview import PALETTE, make_preview


def test_preview_is_mirrored_and_quantised():
    frame = np.zeros((2, 4, 3), dtype=np.uint8)
    frame[:, :2] = 255  # 左半分が白
    preview = make_preview(frame, width=4, height=2)

    assert preview.shape == (2, 4)
    # 左右反転して右半分が白（7）、左半分が黒（0）
    assert preview.tolist() == [[0, 0, 7, 7], [0, 0, 7, 7]]


def test_preview_picks_nearest_palette_colour():
    frame = np.empty((1, 1, 3), dtype=np.uint8)
    frame[0, 0] = PALETTE[8]
    assert make_preview(frame, width=1, height=1)[0, 0] == 8


def test_preview_default_size():
    frame = np.zeros((240, 320, 3), dtype=np.uint8)
    assert make_preview(frame).shape == (120, 160)
