# core/loop.py
from __future__ import annotations
from typing import Callable, Dict
from .interfaces import Tickable

FrameCallback = Callable[[float], None]

class FrameScheduler:
    """Source of redraw opportunities, in the shape of an animation-frame API.

    Callbacks requested while a dispatch is running fire on the next dispatch.
    Handles are positive ints; 0 is never issued.
    """
    def __init__(self):
        self._pending: Dict[int, FrameCallback] = {}
        self._next_handle = 1

    def request(self, cb: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = cb
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def dispatch(self, now: float) -> int:
        batch, self._pending = self._pending, {}
        for cb in batch.values():
            cb(now)
        return len(batch)

    def __len__(self) -> int:
        return len(self._pending)

class GameLoop:
    """Runs `target.update(dt)` then `target.render()` at most `fps` times per second.

    Timestamps are milliseconds. A frame that arrives before `1000 / fps` ms
    have passed since the last accepted tick does nothing; a late frame runs a
    single tick, never a catch-up burst.
    """
    def __init__(self, target: Tickable, fps: float, scheduler: FrameScheduler):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.target = target
        self.fps = fps
        self.delay = 1000.0 / fps
        self.scheduler = scheduler
        self.last_time = 0.0
        self._handle = 0

    @property
    def running(self) -> bool:
        return self._handle > 0

    def _frame(self, now: float) -> None:
        self._handle = self.scheduler.request(self._frame)

        delta = now - self.last_time
        if delta >= self.delay:
            self.target.update(delta)
            self.target.render()
            self.last_time = now

    def start(self) -> None:
        if self._handle < 1:
            self._handle = self.scheduler.request(self._frame)

    def stop(self) -> None:
        if self._handle > 0:
            self.scheduler.cancel(self._handle)
            self._handle = 0
