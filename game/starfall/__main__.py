"""
Launch the playable game:
    python -m game.starfall [--seed N] [--fps N] [--log-level LEVEL]
"""

import argparse

from .config import GameConfig
from .utils import configure_logging


def main():
    parser = argparse.ArgumentParser(description="Play Starfall")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for stars and enemy spawns (default: random)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Display refresh rate (default: 60)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args()
    configure_logging(args.log_level)

    overrides = {}
    if args.fps is not None:
        overrides["fps"] = args.fps
    config = GameConfig.from_dict(overrides)

    # Imported late so --help works without a display
    from .window import run_game
    run_game(config, seed=args.seed)


if __name__ == "__main__":
    main()
