"""
Frame rendering against an abstract drawing surface.

Coordinates are y-down with the origin at the top-left corner; hosts with a
different convention translate inside their Surface implementation.
"""

from __future__ import annotations

from typing import Any, List, NamedTuple, Protocol, Sequence, Tuple

from .config import COLORS
from .simulation import GameState

Color = Tuple[int, int, int]
Point = Tuple[float, float]

ENEMY_FONT_SIZE = 30


class Surface(Protocol):
    """Primitive drawing operations a host must provide"""

    def clear(self, color: Color) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None: ...

    def fill_polygon(self, points: Sequence[Point], color: Color) -> None: ...

    def draw_text(self, text: str, x: float, y: float, color: Color, size: int) -> None: ...


class DrawCommand(NamedTuple):
    op: str
    args: Tuple[Any, ...]


class DrawList:
    """Surface that records commands so a frame can be replayed later"""

    def __init__(self):
        self.commands: List[DrawCommand] = []

    def clear(self, color):
        # A clear discards whatever was drawn before it
        self.commands = [DrawCommand("clear", (color,))]

    def fill_rect(self, x, y, width, height, color):
        self.commands.append(DrawCommand("fill_rect", (x, y, width, height, color)))

    def fill_circle(self, x, y, radius, color):
        self.commands.append(DrawCommand("fill_circle", (x, y, radius, color)))

    def fill_polygon(self, points, color):
        self.commands.append(DrawCommand("fill_polygon", (tuple(points), color)))

    def draw_text(self, text, x, y, color, size):
        self.commands.append(DrawCommand("draw_text", (text, x, y, color, size)))

    def replay(self, surface: Surface) -> None:
        for cmd in self.commands:
            getattr(surface, cmd.op)(*cmd.args)

    def ops(self) -> List[str]:
        return [cmd.op for cmd in self.commands]

    def __len__(self):
        return len(self.commands)


def ship_points(x: float, y: float, size: float) -> List[Point]:
    """Triangle with its nose pointing up"""
    half = size / 2
    return [(x, y - half), (x - half, y + half), (x + half, y + half)]


def render_frame(state: GameState, surface: Surface) -> None:
    """Draw the whole frame from state; never mutates it"""
    surface.clear(COLORS["background"])

    for star in state.stars:
        surface.fill_circle(star.x, star.y, star.size, COLORS["star"])

    p = state.player
    surface.fill_polygon(ship_points(p.x, p.y, p.size), COLORS["player"])

    for b in state.bullets:
        surface.fill_rect(b.x - b.width / 2, b.y, b.width, b.height, COLORS["bullet"])

    for e in state.enemies:
        surface.draw_text(e.kind.glyph, e.x, e.y, COLORS[e.kind.color_key], ENEMY_FONT_SIZE)
