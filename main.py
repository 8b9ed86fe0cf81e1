import argparse
import logging
import sys

from pydantic import ValidationError

from constants import defaults
from game_instances.local_loop import LocalLoop
from game_logic.engine import SnakeEngine
from game_logic.errors import SnakeEngineError
from schemas.settings import GameSettings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play snake in a walled pit.")
    parser.add_argument("--height", type=int, default=defaults.PIT_HEIGHT, help="Pit height in cells")
    parser.add_argument("--width", type=int, default=defaults.PIT_WIDTH, help="Pit width in cells")
    parser.add_argument("--snake-length", type=int, default=defaults.SNAKE_LENGTH, help="Initial snake length")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--tick-seconds", type=float, default=defaults.TICK_SECONDS, help="Seconds per tick")
    parser.add_argument("--cell-size", type=int, default=defaults.CELL_SIZE, help="Cell size in pixels")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = GameSettings(
            pit_height=args.height,
            pit_width=args.width,
            snake_length=args.snake_length,
            seed=args.seed,
            tick_seconds=args.tick_seconds,
            cell_size=args.cell_size,
        )
        engine = SnakeEngine.from_settings(settings)
    except (ValidationError, SnakeEngineError) as e:
        print(f"Could not start the game: {e}", file=sys.stderr)
        return 1

    LocalLoop(settings, engine).run()
    return 0


if "__main__" == __name__:
    sys.exit(main())
