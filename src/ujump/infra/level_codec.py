from __future__ import annotations

from ujump.domain.levels import LevelPlan
from ujump.infra.exceptions import LevelPackDecodeError


_FORMAT = "ujump.levels"


def decode_level_pack(obj: dict) -> tuple[LevelPlan, ...]:
    try:
        if not isinstance(obj, dict) or obj.get("format") != _FORMAT:
            raise LevelPackDecodeError("Invalid level pack format marker.")

        ver = obj.get("version")
        if ver == 1:
            return _decode_v1(obj)

        raise LevelPackDecodeError("Unsupported level pack version.")
    except LevelPackDecodeError:
        raise
    except Exception as e:
        raise LevelPackDecodeError(f"Failed to decode level pack: {e}") from e


def _decode_v1(obj: dict) -> tuple[LevelPlan, ...]:
    raw_levels = obj.get("levels")
    if not isinstance(raw_levels, list) or not raw_levels:
        raise LevelPackDecodeError("levels must be a non-empty list.")

    plans: list[LevelPlan] = []
    for i, rl in enumerate(raw_levels):
        if not isinstance(rl, dict):
            raise LevelPackDecodeError(f"levels[{i}] must be an object.")

        name = rl.get("name", f"level-{i + 1}")
        if not isinstance(name, str) or not name:
            raise LevelPackDecodeError(f"levels[{i}].name must be a non-empty string.")

        rows = rl.get("rows")
        if not isinstance(rows, list) or not rows or not all(isinstance(r, str) for r in rows):
            raise LevelPackDecodeError(f"levels[{i}].rows must be a non-empty list of strings.")

        plans.append(LevelPlan(name=name, plan="\n".join(rows)))

    return tuple(plans)


def decode_text_pack(text: str) -> tuple[LevelPlan, ...]:
    # Plain text packs: one plan per block, blocks separated by blank lines.
    blocks: list[list[str]] = [[]]
    for line in text.splitlines():
        if line.strip():
            blocks[-1].append(line)
        elif blocks[-1]:
            blocks.append([])

    plans = tuple(
        LevelPlan(name=f"level-{i + 1}", plan="\n".join(block))
        for i, block in enumerate(b for b in blocks if b)
    )
    if not plans:
        raise LevelPackDecodeError("Level pack contains no levels.")
    return plans
