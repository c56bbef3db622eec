from __future__ import annotations

import logging
import threading
import time
from queue import Queue
from typing import Any, Optional

import cv2

from ..camera_preview import make_preview
from ..events import Action, InputEvent
from ..expressions import DEFAULT_EXPRESSION, LatestValue, dominant_expression
from . import ExpressionClassifier

logger = logging.getLogger(__name__)


class ExpressionProvider:
    """
    Webカメラの映像から表情ラベルを推定する入力プロバイダ。

    - ワーカースレッドで「フレーム取得 -> 分類 -> ラベル化」を繰り返す
    - 最新ラベルは1スロットのメールボックスに上書き保存
    - 縮小・左右反転したカメラ画像も同様に保持（画面左上のプレビュー用）
    - poll() で新しいラベルがあれば EXPRESSION イベントを1つ発行
    - 分類に失敗したらログを出してラベルは据え置き、すぐ次を試す
    """

    def __init__(
        self,
        camera_index: int = 0,
        classifier: Optional[ExpressionClassifier] = None,
        capture: Any = None,
        frame_width: int = 320,
        frame_height: int = 240,
        fps: int | None = 15,
        buffersize: int = 1,
        use_mjpeg: bool = True,
        model_path: str | None = None,
        delegate: str | None = None,  # 'CPU' or 'GPU' を指定可能（Noneでデフォルト）
        preview_size: tuple[int, int] | None = (160, 120),  # None でプレビュー無効
    ) -> None:
        if classifier is None:
            from ..classifier import FaceLandmarkerClassifier

            classifier = FaceLandmarkerClassifier(model_path=model_path, delegate=delegate)
        self._classifier = classifier

        if capture is None:
            capture = self._open_camera(camera_index, frame_width, frame_height, fps, buffersize, use_mjpeg)
        self._cap = capture

        self._time_base = time.monotonic()
        self.latest: LatestValue[str] = LatestValue()
        self.preview: LatestValue[Any] = LatestValue()
        self._preview_size = preview_size
        self._classify_error_logged = False
        self._running = False
        self._worker: Optional[threading.Thread] = None

    @staticmethod
    def _open_camera(
        camera_index: int,
        frame_width: int,
        frame_height: int,
        fps: int | None,
        buffersize: int,
        use_mjpeg: bool,
    ) -> Any:
        # カメラ初期化（軽量化のためFPS/バッファ等を設定）
        cap = cv2.VideoCapture(camera_index)
        if not cap.isOpened():
            raise RuntimeError(f"Cannot open camera index {camera_index}.")
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, frame_width)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, frame_height)
        if fps is not None:
            cap.set(cv2.CAP_PROP_FPS, int(fps))
        cap.set(cv2.CAP_PROP_BUFFERSIZE, int(buffersize))
        if use_mjpeg:
            fourcc = cv2.VideoWriter_fourcc(*"MJPG")
            cap.set(cv2.CAP_PROP_FOURCC, fourcc)
        return cap

    def start(self, _out_queue: Queue | None = None) -> None:
        if self._running:
            return
        self._running = True
        self._worker = threading.Thread(target=self._run_worker, name="ExpressionWorker", daemon=True)
        self._worker.start()

    def stop(self) -> None:
        self._running = False
        worker = self._worker
        if worker and worker.is_alive():
            worker.join(timeout=1.0)
        self._worker = None

        close = getattr(self._classifier, "close", None)
        if callable(close):
            close()
        if self._cap is not None:
            self._cap.release()

    def _run_worker(self) -> None:
        while self._running:
            try:
                self.step()
            except Exception:
                # ドライバ起因の例外でもワーカーは止めない
                logger.warning("camera frame processing failed; retrying", exc_info=True)
                time.sleep(0.01)

    def step(self) -> bool:
        """フレームを1枚処理する。ラベルを更新したら True"""
        ok, frame_bgr = self._cap.read()
        if not ok or frame_bgr is None:
            time.sleep(0.01)
            return False

        try:
            rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
            if self._preview_size is not None:
                self.preview.put(make_preview(rgb, *self._preview_size))
        except cv2.error:
            logger.warning("dropping unreadable camera frame", exc_info=True)
            return False

        timestamp_ms = int((time.monotonic() - self._time_base) * 1000)
        try:
            scores = self._classifier.classify(rgb, timestamp_ms)
        except Exception:
            # 毎フレーム失敗し続ける場合でもトレースバックは最初の1回だけ
            if not self._classify_error_logged:
                logger.warning("expression classification failed; keeping last label", exc_info=True)
                self._classify_error_logged = True
            else:
                logger.debug("expression classification failed again")
            return False
        self._classify_error_logged = False

        # 顔が見つからなければ neutral
        label = dominant_expression(scores) if scores else DEFAULT_EXPRESSION
        self.latest.put(label)
        return True

    def poll(self, px, out_queue: Queue) -> None:  # type: ignore[override]
        frame = self.preview.consume()
        if frame is not None:
            out_queue.put(InputEvent(action=Action.CAMERA_FRAME, frame=frame[0], note="expression"))

        payload = self.latest.consume()
        if payload is None:
            return
        label, _ = payload
        out_queue.put(InputEvent(action=Action.EXPRESSION, label=label, note="expression"))
