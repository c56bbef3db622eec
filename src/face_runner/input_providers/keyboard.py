from __future__ import annotations

from queue import Queue

from ..events import Action, InputEvent


class KeyboardProvider:
    """
    Pyxel のキーボード状態をポーリングする入力プロバイダ。
    - Space / Enter -> START
    - Esc           -> QUIT
    """

    def __init__(self, note: str = "keyboard") -> None:
        self._note = note

    def poll(self, px, out_queue: Queue) -> None:  # type: ignore[override]
        # Pyxel が利用可能になった後にキーコードへアクセスする（遅延参照）
        if px is None:
            return

        if px.btnp(px.KEY_SPACE) or px.btnp(px.KEY_RETURN):
            out_queue.put(InputEvent(action=Action.START, note=self._note))
        if px.btnp(px.KEY_ESCAPE):
            out_queue.put(InputEvent(action=Action.QUIT, note=self._note))
