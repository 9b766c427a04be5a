from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from ujump.app.config import ConfigError, GameConfig
from ujump.app.game_app import GameApp
from ujump.app.logging_setup import configure_logging
from ujump.domain.levels import GAME_LEVELS, parse_levels
from ujump.infra.exceptions import LevelPackDecodeError
from ujump.infra.level_files import load_level_pack

logger = logging.getLogger("ujump")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ujump", description="Collect every coin, avoid the lava.")
    parser.add_argument("--levels", type=Path, help="level pack (.json or plain text); default: built-in levels")
    parser.add_argument("--lives", type=int, help="lives per level")
    parser.add_argument("--fps", type=int, help="target frames per second")
    parser.add_argument("--scale", type=int, help="pixels per grid cell")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = GameConfig.from_env()
        overrides = {
            "start_lives": args.lives,
            "fps": args.fps,
            "scale": args.scale,
            "log_level": args.log_level,
        }
        config = dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})
        config.validate()
    except ConfigError as e:
        print(f"ujump: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)

    try:
        levels = load_level_pack(args.levels) if args.levels else parse_levels(GAME_LEVELS)
    except LevelPackDecodeError as e:
        logger.error("%s", e)
        return 2

    won = GameApp(levels, config).run()
    return 0 if won else 1


if __name__ == "__main__":
    sys.exit(main())
