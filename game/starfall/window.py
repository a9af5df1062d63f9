"""
Arcade host for Starfall
------------------------
- ArcadeSurface: Surface primitives on arcade draw calls (y-up)
- ArcadeHud: score, lives and the game-over overlay
- FrameWindow: replays a recorded DrawList plus HUD (also used by ShooterEnv)
- StarfallWindow: keyboard/mouse input and the frame loop

Install:
    pip install arcade

Run:
    python -m game.starfall
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import arcade

from .config import COLORS, GameConfig
from .controls import Control, InputTracker
from .hud import lives_text, score_text
from .loop import LoopDriver, LoopState
from .render import DrawList
from .simulation import new_game
from .utils import make_rng

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    arcade.key.LEFT: Control.MOVE_LEFT,
    arcade.key.RIGHT: Control.MOVE_RIGHT,
    arcade.key.SPACE: Control.FIRE,
}
RESTART_KEYS = (arcade.key.R, arcade.key.ENTER)

BUTTON_W, BUTTON_H = 180, 48


class ArcadeSurface:
    """Draws y-down game coordinates onto arcade's y-up window"""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def _y(self, y: float) -> float:
        return self.height - y

    def clear(self, color):
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, color)

    def fill_rect(self, x, y, width, height, color):
        arcade.draw_lrbt_rectangle_filled(x, x + width, self._y(y + height), self._y(y), color)

    def fill_circle(self, x, y, radius, color):
        arcade.draw_circle_filled(x, self._y(y), radius, color)

    def fill_polygon(self, points: Sequence[Tuple[float, float]], color):
        arcade.draw_polygon_filled([(px, self._y(py)) for px, py in points], color)

    def draw_text(self, text, x, y, color, size):
        arcade.draw_text(
            text, x, self._y(y), color, size,
            anchor_x="center", anchor_y="center",
        )


class ArcadeHud:
    """HUD sink drawn on top of the replayed frame"""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.score = 0
        self.lives = 0
        self.game_over = False
        self.final_score = 0

    def show_score(self, score):
        self.score = score

    def show_lives(self, lives):
        self.lives = lives

    def show_game_over(self, final_score):
        self.game_over = True
        self.final_score = final_score

    def hide_game_over(self):
        self.game_over = False

    def button_rect(self) -> Tuple[float, float, float, float]:
        """(left, right, bottom, top) of the Play Again button"""
        cx, cy = self.width / 2, self.height / 2 - 60
        return cx - BUTTON_W / 2, cx + BUTTON_W / 2, cy - BUTTON_H / 2, cy + BUTTON_H / 2

    def button_contains(self, x: float, y: float) -> bool:
        if not self.game_over:
            return False
        left, right, bottom, top = self.button_rect()
        return left <= x <= right and bottom <= y <= top

    def draw(self):
        arcade.draw_text(score_text(self.score), 12, self.height - 30, COLORS["hud"], 18)
        arcade.draw_text(lives_text(self.lives), self.width - 12, self.height - 30, COLORS["hud"], 18,
                         anchor_x="right")

        if not self.game_over:
            return

        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, (*COLORS["overlay"], 200))
        cx, cy = self.width / 2, self.height / 2
        arcade.draw_text("GAME OVER", cx, cy + 60, COLORS["hud"], 40, anchor_x="center", anchor_y="center")
        arcade.draw_text(f"Final Score: {self.final_score}", cx, cy + 10, COLORS["hud"], 20,
                         anchor_x="center", anchor_y="center")

        left, right, bottom, top = self.button_rect()
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, COLORS["button"])
        arcade.draw_text("Play Again", cx, (bottom + top) / 2, COLORS["background"], 18,
                         anchor_x="center", anchor_y="center")


class FrameWindow(arcade.Window):
    """Arcade window that shows the last recorded frame and the HUD"""

    def __init__(self, config: GameConfig, title: str = "Starfall"):
        super().__init__(config.width, config.height, title, update_rate=1 / config.fps)
        self.config = config
        self.frame = DrawList()
        self.surface = ArcadeSurface(config.width, config.height)
        self.hud = ArcadeHud(config.width, config.height)

    def on_draw(self):
        self.clear()
        self.frame.replay(self.surface)
        self.hud.draw()


class StarfallWindow(FrameWindow):
    """Playable game: keyboard input, frame loop and restart button"""

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        config = config or GameConfig.from_dict()
        super().__init__(config)

        rng = make_rng(seed)
        self.controls = InputTracker(KEY_BINDINGS)
        self.driver = LoopDriver(
            new_game(config, rng),
            self.controls,
            rng=rng,
            surface=self.frame,
            hud=self.hud,
        )
        self._clock_ms = 0.0
        self.driver.start()

    def on_update(self, delta_time: float):
        self._clock_ms += delta_time * 1000.0
        self.driver.scheduler.pump(self._clock_ms)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        if symbol in RESTART_KEYS and self.driver.loop_state is LoopState.GAME_OVER:
            self.driver.restart()
            return
        self.controls.press(symbol)

    def on_key_release(self, symbol: int, modifiers: int):
        self.controls.release(symbol)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if self.hud.button_contains(x, y):
            self.driver.restart()

    def on_close(self):
        self.driver.stop()
        super().on_close()


def run_game(config: Optional[GameConfig] = None, seed: Optional[int] = None):
    """Open the game window and block until it is closed"""
    window = StarfallWindow(config, seed=seed)
    logger.info("Starting Starfall (%dx%d @ %d fps)", window.config.width, window.config.height, window.config.fps)
    arcade.run()
