from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """描画と当たり判定で使う軸平行の矩形（左上基準）"""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


def overlaps(a: Box, b: Box) -> bool:
    # 辺が接しているだけの場合は衝突としない
    return (
        a.right > b.left
        and a.left < b.right
        and a.bottom > b.top
        and a.top < b.bottom
    )
