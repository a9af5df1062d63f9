import pytest

from game.starfall.config import GAME_CONFIG, GameConfig


def test_defaults_match_game_config():
    cfg = GameConfig.from_dict()
    assert cfg.to_dict() == {
        **GAME_CONFIG,
        "enemy_speed_range": (2.0, 5.0),
        "star_size_range": (1.0, 3.0),
        "star_speed_range": (1.0, 4.0),
    }
    assert (cfg.width, cfg.height) == (800, 600)
    assert cfg.start_lives == 3
    assert cfg.player_y == 540
    assert cfg.frame_ms == pytest.approx(1000 / 60)


def test_overrides_do_not_touch_module_defaults():
    cfg = GameConfig.from_dict({"spawn_chance": 0.5})
    assert cfg.spawn_chance == 0.5
    assert GAME_CONFIG["spawn_chance"] == 0.02


@pytest.mark.parametrize(
    "overrides, match",
    [
        ({"lives": 3}, "Unknown"),
        ({"width": 0}, "width"),
        ({"start_lives": -1}, "start_lives"),
        ({"spawn_chance": 1.5}, "spawn_chance"),
        ({"enemy_speed_range": (5, 2)}, "enemy_speed_range"),
        ({"star_count": -1}, "star_count"),
        ({"enemy_spawn_margin": 400}, "playable width"),
    ],
)
def test_invalid_overrides_raise(overrides, match):
    with pytest.raises(ValueError, match=match):
        GameConfig.from_dict(overrides)


def test_config_is_frozen():
    cfg = GameConfig.from_dict()
    with pytest.raises(Exception):
        cfg.width = 10
