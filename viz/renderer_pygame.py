# viz/renderer_pygame.py
from __future__ import annotations
import os
from typing import Optional
import pygame as pg
from config import AppConfig
from core.interfaces import Clear, DrawCommand, FillRect, Snapshot
import viz.renderer_colors as theme

def execute(surf: pg.Surface, commands: list[DrawCommand]) -> None:
    for cmd in commands:
        if isinstance(cmd, Clear):
            surf.fill(pg.Color(cmd.color))
        elif isinstance(cmd, FillRect):
            pg.draw.rect(surf, pg.Color(cmd.color), pg.Rect(cmd.x, cmd.y, cmd.w, cmd.h))
        else:
            raise TypeError(f"unknown draw command {cmd!r}")

class PygameRenderer:
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self._auto_flip = True
        self._frame_idx = 0
        self._overlay_text: Optional[str] = None

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or ""

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(cfg.canvas_size)
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.surf = surface
        self._auto_flip = False  # the owner of the surface flips

    def draw(self, commands: list[DrawCommand], snap: Optional[Snapshot] = None) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf

        execute(surf, commands)

        if self.cfg.render_show_hud and snap is not None:
            font = pg.font.SysFont(None, 22)
            txt = font.render(f"Score: {snap.score}   Length: {len(snap.snake)}", True, theme.TEXT)
            surf.blit(txt, (6, 4))

        if self._overlay_text:
            self._draw_overlay(self._overlay_text)

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None

    # internals
    def _draw_overlay(self, text: str) -> None:
        assert self.surf is not None
        font = pg.font.SysFont(None, 36)
        txt = font.render(text, True, theme.TEXT)
        box = txt.get_rect(center=self.surf.get_rect().center).inflate(24, 16)
        shade = pg.Surface(box.size, pg.SRCALPHA)
        shade.fill(theme.OVERLAY_BG)
        self.surf.blit(shade, box.topleft)
        self.surf.blit(txt, txt.get_rect(center=box.center))

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        fname = os.path.join(self.cfg.render_record_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
