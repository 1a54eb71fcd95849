# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Protocol, Tuple, Union

class Cell(NamedTuple):
    x: int
    y: int

# off-grid position for a freshly appended tail segment
SENTINEL = Cell(-1, -1)

class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

@dataclass(frozen=True)
class InputState:
    """Latest directional input. `heading` is None until a direction key is pressed."""
    heading: Optional[Direction] = None

    def with_heading(self, heading: Direction) -> "InputState":
        return InputState(heading=heading)

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    fruit: Optional[Cell]
    heading: Optional[Direction]
    score: int
    tick: int
    terminated: bool
    reason: str | None
    grid_w: int
    grid_h: int
    growing: bool = False    # tail stays put next tick

# ---- draw commands ----
@dataclass(frozen=True)
class Clear:
    color: str

@dataclass(frozen=True)
class FillRect:
    x: int
    y: int
    w: int
    h: int
    color: str

DrawCommand = Union[Clear, FillRect]

class Tickable(Protocol):
    """What the game loop drives once per accepted tick."""
    def update(self, dt: float) -> None: ...
    def render(self) -> None: ...
