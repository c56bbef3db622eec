from __future__ import annotations

from queue import Queue
from typing import Any, Mapping, Optional, Protocol


class ThreadedProvider(Protocol):
    # 自前のスレッドで動き、App の起動/終了に合わせて start/stop される
    def start(self, out_queue: Queue) -> None: ...
    def stop(self) -> None: ...


class PollingProvider(Protocol):
    # 毎フレーム App から呼ばれ、InputEvent をキューへ積む
    def poll(self, px, out_queue: Queue) -> None: ...


class ExpressionClassifier(Protocol):
    # RGB フレームから {表情名: スコア} を返す。顔が無ければ None
    def classify(self, frame_rgb: Any, timestamp_ms: int) -> Optional[Mapping[str, float]]: ...
