from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional


def _get(shapes: Mapping[str, float], name: str) -> float:
    v = shapes.get(name.lower())
    return float(v) if v is not None else 0.0


def _pair(shapes: Mapping[str, float], prefix: str) -> float:
    # 左右ペアの blendshape を平均
    return (_get(shapes, prefix + "Left") + _get(shapes, prefix + "Right")) / 2.0


def _clip(v: float) -> float:
    return max(0.0, min(1.0, v))


def expression_scores(shapes: Mapping[str, float]) -> Dict[str, float]:
    """
    MediaPipe の blendshape 辞書（キーは小文字）から表情スコアを推定する。
    無い blendshape は 0 として扱う。
    """
    smile = _pair(shapes, "mouthSmile")
    frown = _pair(shapes, "mouthFrown")
    brow_down = _pair(shapes, "browDown")
    brow_outer_up = _pair(shapes, "browOuterUp")
    brow_inner_up = _get(shapes, "browInnerUp")
    eye_wide = _pair(shapes, "eyeWide")
    jaw_open = _get(shapes, "jawOpen")
    stretch = _pair(shapes, "mouthStretch")
    sneer = _pair(shapes, "noseSneer")
    upper_lip = _pair(shapes, "mouthUpperUp")

    scores = {
        "happy": _clip(smile),
        "surprised": _clip((jaw_open + eye_wide + (brow_inner_up + brow_outer_up) / 2.0) / 3.0),
        "sad": _clip((frown + brow_inner_up) / 2.0 - smile),
        "angry": _clip(brow_down - smile / 2.0),
        "fearful": _clip((eye_wide + stretch + brow_inner_up) / 3.0),
        "disgusted": _clip((sneer + upper_lip) / 2.0),
    }
    scores["neutral"] = _clip(1.0 - max(scores.values()))
    return scores


class FaceLandmarkerClassifier:
    """
    MediaPipe FaceLandmarker（VIDEO モード）で表情スコアを返す分類器。

    classify() は RGB フレームを受け取り、顔が無ければ None を返す。
    """

    def __init__(self, model_path: Optional[str] = None, delegate: Optional[str] = None) -> None:
        if model_path is None:
            base_dir = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
            model_path = os.path.join(base_dir, "assets", "models", "face_landmarker.task")
        self.model_path = model_path
        self._delegate = delegate
        self._detector = None  # type: ignore[assignment]
        self._mp_image_cls = None  # type: ignore[assignment]
        self._mp_format = None  # type: ignore[assignment]
        self._last_ts = -1

    def _ensure_detector(self) -> None:
        if self._detector is not None:
            return
        try:
            import mediapipe as mp  # type: ignore
            from mediapipe.tasks import python  # type: ignore
            from mediapipe.tasks.python import vision  # type: ignore
        except Exception as e:
            raise RuntimeError(f"Failed to import MediaPipe: {e}") from e

        base_opts_kwargs: dict[str, Any] = {"model_asset_path": self.model_path}
        if self._delegate:
            if self._delegate.upper() == "CPU":
                base_opts_kwargs["delegate"] = python.BaseOptions.Delegate.CPU
            elif self._delegate.upper() == "GPU":
                base_opts_kwargs["delegate"] = python.BaseOptions.Delegate.GPU

        options = vision.FaceLandmarkerOptions(
            base_options=python.BaseOptions(**base_opts_kwargs),
            output_face_blendshapes=True,
            num_faces=1,
            running_mode=vision.RunningMode.VIDEO,
        )
        self._detector = vision.FaceLandmarker.create_from_options(options)
        self._mp_image_cls = mp.Image
        self._mp_format = mp.ImageFormat.SRGB

    def classify(self, frame_rgb: Any, timestamp_ms: int) -> Optional[Dict[str, float]]:
        self._ensure_detector()
        # VIDEO モードではタイムスタンプが単調増加である必要がある
        timestamp_ms = max(int(timestamp_ms), self._last_ts + 1)
        self._last_ts = timestamp_ms

        mp_image = self._mp_image_cls(image_format=self._mp_format, data=frame_rgb)
        result = self._detector.detect_for_video(mp_image, timestamp_ms)  # type: ignore[union-attr]
        shapes = blendshapes_to_dict(result)
        if shapes is None:
            return None
        return expression_scores(shapes)

    def close(self) -> None:
        if self._detector is not None:
            self._detector.close()
            self._detector = None


def blendshapes_to_dict(result: Any) -> Optional[Dict[str, float]]:
    # 先頭の顔の blendshape 配列を {小文字名: スコア} に変換
    blends = getattr(result, "face_blendshapes", None)
    if not blends or not isinstance(blends, list):
        return None
    items = blends[0]
    if not isinstance(items, list):
        return None
    shapes: Dict[str, float] = {}
    for c in items:
        cname = getattr(c, "category_name", None)
        score = getattr(c, "score", None)
        if cname and (score is not None):
            shapes[str(cname).lower()] = float(score)
    return shapes
