"""Starfall - single-player arcade shooter"""

from .config import GameConfig
from .controls import Control, InputTracker
from .loop import FrameScheduler, LoopDriver, LoopState
from .shooter_env import ShooterEnv, run_random_episode
from .simulation import FrameEvents, GameState, new_game, reset_game, step

__all__ = [
    'GameConfig',
    'Control',
    'InputTracker',
    'FrameScheduler',
    'LoopDriver',
    'LoopState',
    'ShooterEnv',
    'run_random_episode',
    'FrameEvents',
    'GameState',
    'new_game',
    'reset_game',
    'step',
]
