import copy
import random

from game.starfall.config import COLORS, GameConfig
from game.starfall.entities import Bullet, Enemy, EnemyKind, Star
from game.starfall.render import DrawList, render_frame, ship_points
from game.starfall.simulation import new_game


class SpySurface:
    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("fill_rect", x, y, width, height, color))

    def fill_circle(self, x, y, radius, color):
        self.calls.append(("fill_circle", x, y, radius, color))

    def fill_polygon(self, points, color):
        self.calls.append(("fill_polygon", tuple(points), color))

    def draw_text(self, text, x, y, color, size):
        self.calls.append(("draw_text", text, x, y, color, size))


def test_empty_frame_draws_background_and_ship(state):
    frame = DrawList()
    render_frame(state, frame)
    assert frame.ops() == ["clear", "fill_polygon"]


def test_frame_draws_every_entity_in_layer_order(state):
    state.stars = [Star(x=1, y=2, size=1.5, speed=1)]
    state.bullets = [Bullet(x=100, y=300)]
    state.enemies = [Enemy(x=50, y=60, kind=EnemyKind.ROBOT, speed=2)]

    spy = SpySurface()
    render_frame(state, spy)

    assert spy.calls[0] == ("clear", COLORS["background"])
    assert spy.calls[1] == ("fill_circle", 1, 2, 1.5, COLORS["star"])
    assert spy.calls[2][0] == "fill_polygon"
    assert spy.calls[3] == ("fill_rect", 98, 300, 4, 15, COLORS["bullet"])
    assert spy.calls[4] == ("draw_text", EnemyKind.ROBOT.glyph, 50, 60, COLORS["robot"], 30)


def test_render_does_not_mutate_state():
    cfg = GameConfig.from_dict({"star_count": 20})
    state = new_game(cfg, random.Random(3))
    state.bullets = [Bullet(x=100, y=300)]
    state.enemies = [Enemy(x=50, y=60, kind=EnemyKind.SKULL, speed=2)]
    before = copy.deepcopy(state)

    render_frame(state, DrawList())

    assert state == before


def test_draw_list_clear_starts_a_new_frame():
    frame = DrawList()
    frame.clear((0, 0, 0))
    frame.fill_circle(1, 1, 1, (255, 255, 255))
    frame.clear((0, 0, 0))
    assert frame.ops() == ["clear"]
    assert len(frame) == 1


def test_draw_list_replays_in_order(state):
    state.stars = [Star(x=5, y=5, size=1, speed=1)]
    state.enemies = [Enemy(x=50, y=60, kind=EnemyKind.ALIEN, speed=2)]

    direct = SpySurface()
    render_frame(state, direct)

    frame = DrawList()
    render_frame(state, frame)
    replayed = SpySurface()
    frame.replay(replayed)

    assert replayed.calls == direct.calls


def test_ship_points_nose_up():
    assert ship_points(100, 540, 40) == [(100, 520), (80, 560), (120, 560)]
