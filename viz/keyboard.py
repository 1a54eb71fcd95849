# viz/keyboard.py
from __future__ import annotations
from typing import Optional
import pygame as pg
from core.interfaces import Direction, InputState

DIRECTION_KEYS = {
    pg.K_LEFT: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT,
    pg.K_UP: Direction.UP,
    pg.K_DOWN: Direction.DOWN,
}

CONTROL_KEYS = {
    pg.K_SPACE: "start",
    pg.K_ESCAPE: "stop",
    pg.K_d: "debug",
    pg.K_r: "restart",
    pg.K_q: "quit",
}

class Keyboard:
    """Key-down events -> latest InputState plus control signals.

    Directions only ever replace the heading (there is no key-up handling),
    so the last pressed direction persists.
    """
    def __init__(self):
        self.state = InputState()

    def handle(self, e: pg.event.Event) -> Optional[str]:
        if e.type == pg.QUIT:
            return "quit"
        if e.type != pg.KEYDOWN:
            return None
        if e.key in DIRECTION_KEYS:
            self.state = self.state.with_heading(DIRECTION_KEYS[e.key])
            return None
        return CONTROL_KEYS.get(e.key)

    def poll(self) -> list[str]:
        signals = []
        for e in pg.event.get():
            sig = self.handle(e)
            if sig is not None:
                signals.append(sig)
        return signals

    def reset(self) -> None:
        self.state = InputState()
