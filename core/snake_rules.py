# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional
import random
from .interfaces import Cell, Direction, InputState, SENTINEL

def wrap(cell: Cell, grid_w: int, grid_h: int) -> Cell:
    """Toroidal wrap: -1 re-enters at the last column/row, grid_w/grid_h at 0."""
    return Cell(cell.x % grid_w, cell.y % grid_h)

@dataclass(frozen=True)
class Fruit:
    cell: Cell
    color: str = "red"

def spawn_fruit(rng: random.Random, grid_w: int, grid_h: int, color: str = "red") -> Fruit:
    # uniform over the whole grid; cells under the snake are not excluded.
    # A first fruit under a still head is eaten on tick 1, and the grown
    # segment lands on the head on tick 2, ending the game without input.
    return Fruit(Cell(rng.randrange(grid_w), rng.randrange(grid_h)), color)

class Snake:
    """The actor: ordered cells, head at index 0.

    After every `update`, pieces[i] holds what pieces[i-1] held before it.
    `grow()` is realized on the next update by appending a segment at
    SENTINEL, which the trailing copy of that same update moves onto the grid.
    """

    def __init__(self, cells: Iterable[Cell], color: str = "green"):
        self.pieces: List[Cell] = [Cell(*c) for c in cells]
        if not self.pieces:
            raise ValueError("snake needs at least a head")
        self.color = color
        self.heading: Optional[Direction] = None
        self.ready_to_grow = False

    @property
    def head(self) -> Cell:
        return self.pieces[0]

    def __len__(self) -> int:
        return len(self.pieces)

    def grow(self) -> None:
        self.ready_to_grow = True

    def steer(self, inp: InputState) -> None:
        # keep the last heading when the input carries none
        if inp.heading is not None:
            self.heading = inp.heading

    def update(self, inp: InputState, grid_w: int, grid_h: int) -> None:
        if self.ready_to_grow:
            self.pieces.append(SENTINEL)
            self.ready_to_grow = False

        for i in range(len(self.pieces) - 1, 0, -1):
            self.pieces[i] = self.pieces[i - 1]

        self.steer(inp)
        if self.heading is not None:
            dx, dy = self.heading.offset
            hx, hy = self.pieces[0]
            self.pieces[0] = wrap(Cell(hx + dx, hy + dy), grid_w, grid_h)

    def collides(self) -> bool:
        head = self.pieces[0]
        return any(p == head for p in self.pieces[1:])
