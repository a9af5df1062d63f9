"""
Frame loop driver
-----------------
The driver owns the Running / GameOver state machine. Each frame it steps the
simulation, publishes HUD changes, renders, and asks the host for the next
refresh. Entering GameOver simply stops asking; `restart` re-arms it.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable, Optional

from .controls import InputTracker
from .hud import Hud, NullHud
from .render import DrawList, Surface, render_frame
from .simulation import FrameEvents, GameState, reset_game, step
from .utils import make_rng

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class LoopState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class FrameScheduler:
    """
    Holds at most one callback for the next display refresh.

    The host calls `pump` once per refresh; a callback runs once and must
    request itself again to keep the loop alive.
    """

    def __init__(self):
        self._pending: Optional[FrameCallback] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def request(self, callback: FrameCallback) -> None:
        self._pending = callback

    def cancel(self) -> None:
        self._pending = None

    def pump(self, timestamp: float) -> bool:
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        callback(timestamp)
        return True


class LoopDriver:
    """Runs update then render on every scheduled frame"""

    def __init__(
        self,
        state: GameState,
        controls: InputTracker,
        rng: Optional[random.Random] = None,
        surface: Optional[Surface] = None,
        hud: Optional[Hud] = None,
        scheduler: Optional[FrameScheduler] = None,
    ):
        self.state = state
        self.controls = controls
        self.rng = make_rng(rng)
        self.surface = surface if surface is not None else DrawList()
        self.hud = hud if hud is not None else NullHud()
        self.scheduler = scheduler if scheduler is not None else FrameScheduler()
        self.frames = 0

    @property
    def loop_state(self) -> LoopState:
        return LoopState.RUNNING if self.state.running else LoopState.GAME_OVER

    def start(self) -> None:
        self._sync_hud()
        if self.loop_state is LoopState.RUNNING:
            self.scheduler.request(self.frame)

    def frame(self, timestamp: float) -> Optional[FrameEvents]:
        if self.loop_state is LoopState.GAME_OVER:
            return None

        events = step(self.state, self.controls, timestamp, self.rng)
        self.frames += 1
        self._publish(events)
        render_frame(self.state, self.surface)

        if self.loop_state is LoopState.RUNNING:
            self.scheduler.request(self.frame)
        else:
            logger.debug("Loop state RUNNING -> GAME_OVER after %d frames", self.frames)
        return events

    def restart(self) -> None:
        reset_game(self.state)
        self.frames = 0
        logger.info("Restarting game")
        self._sync_hud()
        self.scheduler.request(self.frame)
        logger.debug("Loop state -> RUNNING")

    def stop(self) -> None:
        self.scheduler.cancel()

    def _publish(self, events: FrameEvents) -> None:
        if events.points:
            self.hud.show_score(self.state.score)
        if events.lives_lost:
            self.hud.show_lives(self.state.lives)
        if events.game_over:
            self.hud.show_game_over(self.state.final_score)

    def _sync_hud(self) -> None:
        self.hud.show_score(self.state.score)
        self.hud.show_lives(self.state.lives)
        if self.state.running:
            self.hud.hide_game_over()
        else:
            self.hud.show_game_over(self.state.final_score)
