from __future__ import annotations

import logging
import queue
from queue import Queue
from typing import Any, List, Union

from .events import Action, InputEvent
from .input_providers import PollingProvider, ThreadedProvider

logger = logging.getLogger(__name__)


class App:
    def __init__(
        self,
        game: Any,
        providers: List[Union[PollingProvider, ThreadedProvider]],
        scale: int = 1,
    ) -> None:
        self.game = game
        self.providers = providers
        self.scale = scale
        self.events: "Queue[InputEvent]" = Queue()
        self._px = None  # Pyxel モジュール（遅延読み込み）
        self._should_quit = False
        self._draw_error_logged = False

    # --- ライフサイクル ---

    def run(self) -> None:
        import pyxel  # ユニットテスト時の import 失敗を避けるため遅延インポート

        self._px = pyxel
        # スレッド型プロバイダを起動
        for p in self.providers:
            if hasattr(p, "start"):
                try:
                    p.start(self.events)
                except Exception:
                    logger.exception("failed to start provider %s", type(p).__name__)

        try:
            pyxel.init(
                self.game.width,
                self.game.height,
                title="Expression Runner",
                display_scale=self.scale,
                quit_key=pyxel.KEY_NONE,
            )
            pyxel.run(self._update, self._draw)
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        for p in self.providers:
            if hasattr(p, "stop"):
                try:
                    p.stop()
                except Exception:
                    logger.exception("failed to stop provider %s", type(p).__name__)

    def _update(self) -> None:
        self.step(self._px)
        if self._should_quit and self._px is not None:
            self._px.quit()

    def step(self, px: Any) -> None:
        """1フレーム分: プロバイダのポーリング -> イベント配送 -> ゲーム更新"""
        for p in self.providers:
            if hasattr(p, "poll"):
                try:
                    p.poll(px, self.events)
                except Exception:
                    # ログが毎フレーム大量に出ないよう、各プロバイダにつき一度だけ詳細を出力
                    if not getattr(p, "_error_logged", False):
                        logger.exception("provider %s failed to poll", type(p).__name__)
                        setattr(p, "_error_logged", True)

        # 入力イベントキューを空にしつつゲームへ転送
        while True:
            try:
                e = self.events.get_nowait()
            except queue.Empty:
                break
            self.game.on_event(e)
            if e.action == Action.QUIT:
                self._should_quit = True

        self.game.update()

    def _draw(self) -> None:
        assert self._px is not None
        try:
            self.game.draw(self._px)
        except Exception:
            # 描画で例外が起きても画面をクリアして安全に継続
            if not self._draw_error_logged:
                logger.exception("draw failed")
                self._draw_error_logged = True
            self._px.cls(0)
