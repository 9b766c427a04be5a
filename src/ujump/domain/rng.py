from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """The slice of random.Random the parser needs; seed one for repeatable coin phases."""

    def random(self) -> float:  # uniform in [0.0, 1.0)
        ...
