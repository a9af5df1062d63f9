"""
HUD sink interface and text formatting
"""

from __future__ import annotations

from typing import Protocol

HEART = "💖"


def score_text(score: int) -> str:
    return f"Score: {score}"


def lives_text(lives: int) -> str:
    return f"Lives: {HEART * max(lives, 0)}"


class Hud(Protocol):
    """Presentation layer notified by the loop driver after state changes"""

    def show_score(self, score: int) -> None: ...

    def show_lives(self, lives: int) -> None: ...

    def show_game_over(self, final_score: int) -> None: ...

    def hide_game_over(self) -> None: ...


class NullHud:
    """Discards every update (headless runs)"""

    def show_score(self, score):
        pass

    def show_lives(self, lives):
        pass

    def show_game_over(self, final_score):
        pass

    def hide_game_over(self):
        pass
