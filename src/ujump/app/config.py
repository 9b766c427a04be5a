from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields

from ujump.app.logging_setup import LEVEL_NAMES


class ConfigError(ValueError):
    """Raised when runtime configuration is missing or malformed."""


_ENV_PREFIX = "UJUMP_"

# env suffix -> field name
_ENV_FIELDS = {
    "FPS": "fps",
    "MAX_STEP": "max_step",
    "GRACE_PERIOD": "grace_period",
    "LIVES": "start_lives",
    "SCALE": "scale",
    "LOG_LEVEL": "log_level",
}


@dataclass(frozen=True)
class GameConfig:
    fps: int = 60
    max_step: float = 0.1       # seconds; longer frames are clamped to this
    grace_period: float = 1.0   # seconds a finished level keeps animating
    start_lives: int = 3
    scale: int = 20             # pixels per grid cell
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameConfig:
        env = os.environ if environ is None else environ
        types = {f.name: f.type for f in fields(cls)}

        values: dict[str, object] = {}
        for suffix, name in _ENV_FIELDS.items():
            raw = env.get(_ENV_PREFIX + suffix)
            if raw is None or not raw.strip():
                continue
            values[name] = _coerce(_ENV_PREFIX + suffix, raw.strip(), types[name])

        config = cls(**values)
        config.validate()
        return config

    def validate(self) -> None:
        if self.fps <= 0:
            raise ConfigError("fps must be positive.")
        if self.max_step <= 0:
            raise ConfigError("max_step must be positive.")
        if self.grace_period < 0:
            raise ConfigError("grace_period must not be negative.")
        if self.start_lives <= 0:
            raise ConfigError("start_lives must be positive.")
        if self.scale <= 0:
            raise ConfigError("scale must be positive.")
        if self.log_level.upper() not in LEVEL_NAMES:
            raise ConfigError(f"Unknown log level {self.log_level!r}.")


def _coerce(key: str, raw: str, type_name: str) -> object:
    # Field types are strings under `from __future__ import annotations`.
    try:
        if type_name == "int":
            return int(raw)
        if type_name == "float":
            return float(raw)
    except ValueError as e:
        raise ConfigError(f"{key} must be a number, got {raw!r}.") from e
    return raw
