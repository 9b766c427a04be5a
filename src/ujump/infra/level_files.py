from __future__ import annotations

import json
import logging
import random
from pathlib import Path

from ujump.domain.exceptions import LevelParseError
from ujump.domain.level import Level
from ujump.domain.levels import LevelPlan, parse_levels
from ujump.domain.rng import RandomSource
from ujump.infra.exceptions import LevelPackDecodeError
from ujump.infra.level_codec import decode_level_pack, decode_text_pack

logger = logging.getLogger(__name__)


def load_level_plans_from_path(path: Path) -> tuple[LevelPlan, ...]:
    try:
        data = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            return decode_level_pack(json.loads(data))
        return decode_text_pack(data)
    except LevelPackDecodeError:
        raise
    except Exception as e:
        raise LevelPackDecodeError(f"Failed to load level pack from {path}: {e}") from e


def load_level_pack(path: Path, rng: RandomSource | None = None) -> tuple[Level, ...]:
    """Read and parse every level in a pack; any broken level fails the whole pack."""
    plans = load_level_plans_from_path(path)
    try:
        levels = parse_levels(plans, rng or random.Random())
    except LevelParseError as e:
        raise LevelPackDecodeError(f"Invalid level in {path}: {e}") from e

    logger.info("Loaded %d level(s) from %s", len(levels), path)
    return levels
