# policy/policy.py
from __future__ import annotations
from typing import Protocol, Optional
from core.interfaces import Cell, Direction, Snapshot

def torus_distance(a: Cell, b: Cell, grid_w: int, grid_h: int) -> int:
    """Manhattan distance on a wrapping grid."""
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    return min(dx, grid_w - dx) + min(dy, grid_h - dy)

class Policy(Protocol):
    def act(self, snap: Snapshot) -> Optional[Direction]: ...

class GreedyPolicy:
    """
    Heads for the fruit along the shortest wrapped path, skipping moves that
    would bite the body. The tail cell counts as free since it moves away
    this tick, unless a growth is pending. If every move is fatal, keeps
    the current heading.
    """
    def act(self, snap: Snapshot) -> Optional[Direction]:
        head = snap.snake[0]
        # the tail only vacates its cell when the snake is not growing
        blocked = set(snap.snake if snap.growing else snap.snake[:-1])
        W, H = snap.grid_w, snap.grid_h

        moves = []
        for d in Direction:
            dx, dy = d.offset
            nxt = Cell((head.x + dx) % W, (head.y + dy) % H)
            if nxt in blocked:
                continue
            dist = torus_distance(nxt, snap.fruit, W, H) if snap.fruit is not None else 0
            moves.append((dist, d != snap.heading, d))
        if not moves:
            return snap.heading
        # ties prefer going straight
        moves.sort(key=lambda t: (t[0], t[1]))
        return moves[0][2]
