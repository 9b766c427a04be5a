from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    left: bool = False
    right: bool = False
    jump: bool = False


NO_INPUT = InputState()
