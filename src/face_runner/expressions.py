from __future__ import annotations

import numbers
import threading
from typing import Any, Generic, Mapping, Optional, Tuple, TypeVar

EXPRESSIONS = ("happy", "sad", "angry", "fearful", "disgusted", "surprised", "neutral")
DEFAULT_EXPRESSION = "neutral"

T = TypeVar("T")


def dominant_expression(scores: Optional[Mapping[str, Any]]) -> str:
    """
    最もスコアが高い表情名を返す。

    - 同点の場合は先に出てきた方を優先
    - 0 を超えるスコアが無ければ "neutral"
    - 数値でない値は無視する（壊れた出力は未検出扱い）
    """
    best_score = 0.0
    best = DEFAULT_EXPRESSION
    if not scores:
        return best
    try:
        items = list(scores.items())
    except AttributeError:
        return best
    for name, score in items:
        if isinstance(score, bool) or not isinstance(score, numbers.Real):
            continue
        if score > best_score:
            best_score = float(score)
            best = str(name)
    return best


class LatestValue(Generic[T]):
    """
    最新値だけを保持する1スロットのメールボックス。

    ワーカースレッドが put() で上書きし、メインループが consume() で
    ブロックせずに取り出す。同じ値を二度返さない。
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._seq = 0
        self._consumed_seq = 0

    def put(self, value: T) -> None:
        with self._lock:
            self._value = value
            self._seq += 1

    def peek(self) -> Optional[T]:
        with self._lock:
            return self._value

    def consume(self) -> Optional[Tuple[T, int]]:
        with self._lock:
            if self._seq == self._consumed_seq or self._value is None:
                return None
            self._consumed_seq = self._seq
            return self._value, self._seq
