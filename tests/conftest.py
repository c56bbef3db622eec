from __future__ import annotations

from typing import Iterable, List

import pytest


class SequenceRandom:
    """random() が決まった値を順番に（循環して）返すスタブ"""

    def __init__(self, values: Iterable[float]) -> None:
        self.values: List[float] = list(values)
        self.i = 0

    def random(self) -> float:
        v = self.values[self.i % len(self.values)]
        self.i += 1
        return v


class FakePx:
    """描画呼び出しを記録するだけの Pyxel もどき"""

    KEY_SPACE = 1
    KEY_RETURN = 2
    KEY_ESCAPE = 3

    def __init__(self, pressed=()) -> None:
        self.pressed = set(pressed)
        self.calls: list = []

    def btnp(self, key) -> bool:
        return key in self.pressed

    def cls(self, col) -> None:
        self.calls.append(("cls", col))

    def rect(self, x, y, w, h, col) -> None:
        self.calls.append(("rect", x, y, w, h, col))

    def pset(self, x, y, col) -> None:
        self.calls.append(("pset", x, y, col))

    def text(self, x, y, s, col) -> None:
        self.calls.append(("text", s))

    def texts(self) -> list:
        return [c[1] for c in self.calls if c[0] == "text"]

    def psets(self) -> list:
        return [c[1:] for c in self.calls if c[0] == "pset"]


@pytest.fixture
def seq_random():
    return SequenceRandom


@pytest.fixture
def fake_px():
    return FakePx
