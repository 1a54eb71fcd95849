# viz/renderer_headless.py
from __future__ import annotations
import os
from typing import Optional
import numpy as np
import pygame as pg
from config import AppConfig
from core.interfaces import Clear, DrawCommand, FillRect, Snapshot

def _rgb(color: str) -> tuple[int, int, int]:
    c = pg.Color(color)
    return (c.r, c.g, c.b)

class ArrayRenderer:
    """Rasterizes draw commands into an (H, W, 3) uint8 array. No window."""

    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frame: Optional[np.ndarray] = None
        self.overlay: Optional[str] = None
        self._frame_idx = 0

    def open(self, cfg: AppConfig) -> None:
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        w, h = cfg.canvas_size
        self.frame = np.zeros((h, w, 3), dtype=np.uint8)
        self._frame_idx = 0
        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def set_overlay(self, text: Optional[str]) -> None:
        # kept for the console summary; pixels are left untouched
        self.overlay = text or None

    def draw(self, commands: list[DrawCommand], snap: Optional[Snapshot] = None) -> None:
        assert self.frame is not None, "Renderer not opened"
        H, W = self.frame.shape[:2]
        for cmd in commands:
            if isinstance(cmd, Clear):
                self.frame[:, :] = _rgb(cmd.color)
            elif isinstance(cmd, FillRect):
                # clip by hand: negative slice bounds would wrap around
                x0, x1 = max(cmd.x, 0), min(cmd.x + cmd.w, W)
                y0, y1 = max(cmd.y, 0), min(cmd.y + cmd.h, H)
                if x0 < x1 and y0 < y1:
                    self.frame[y0:y1, x0:x1] = _rgb(cmd.color)
            else:
                raise TypeError(f"unknown draw command {cmd!r}")

        if self.cfg is not None and self.cfg.render_record_dir:
            self.save_frame()

    def save_frame(self) -> str:
        assert self.frame is not None and self.cfg is not None
        assert self.cfg.render_record_dir, "render_record_dir not set"
        # surfarray wants (W, H, 3)
        surf = pg.surfarray.make_surface(self.frame.swapaxes(0, 1))
        fname = os.path.join(self.cfg.render_record_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(surf, fname)
        self._frame_idx += 1
        return fname

    def close(self) -> None:
        self.frame = None
