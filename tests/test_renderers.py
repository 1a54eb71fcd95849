# tests/test_renderers.py
import os
import numpy as np
import pygame as pg
import pytest
from config import AppConfig
from core.interfaces import Clear, FillRect
from viz.renderer_headless import ArrayRenderer
from viz.renderer_pygame import PygameRenderer, execute

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

CMDS = [Clear("black"), FillRect(4, 8, 4, 4, "green"), FillRect(0, 0, 4, 4, "red")]

def test_execute_on_plain_surface():
    surf = pg.Surface((40, 32))
    execute(surf, CMDS)
    assert _rgb(surf.get_at((5, 9))) == _rgb("green")
    assert _rgb(surf.get_at((1, 1))) == _rgb("red")
    assert _rgb(surf.get_at((30, 30))) == _rgb("black")

def test_execute_clears_previous_frame():
    surf = pg.Surface((40, 32))
    execute(surf, CMDS)
    execute(surf, [Clear("black"), FillRect(20, 20, 4, 4, "green")])
    assert _rgb(surf.get_at((5, 9))) == _rgb("black")
    assert _rgb(surf.get_at((21, 21))) == _rgb("green")

def test_execute_rejects_unknown_command():
    with pytest.raises(TypeError):
        execute(pg.Surface((4, 4)), ["nope"])

def test_pygame_renderer_rejects_config_class():
    with pytest.raises(TypeError):
        PygameRenderer().open(AppConfig)

def test_pygame_renderer_requires_open():
    with pytest.raises(AssertionError):
        PygameRenderer().draw(CMDS)

def test_pygame_renderer_on_attached_surface(cfg, scene_factory):
    surf = pg.Surface(cfg.canvas_size)
    r = PygameRenderer()
    r.attach_surface(surf, cfg.with_(render_show_hud=False))
    scene = scene_factory(cells=[(1, 2)], fruit=(4, 5))
    r.draw(scene.render(), scene.snapshot())
    c = cfg.cell
    assert _rgb(surf.get_at((1 * c, 2 * c))) == _rgb("green")
    assert _rgb(surf.get_at((4 * c, 5 * c))) == _rgb("red")

def test_array_renderer_pixels(cfg):
    r = ArrayRenderer()
    r.open(cfg)
    r.draw(CMDS)
    w, h = cfg.canvas_size
    assert r.frame.shape == (h, w, 3)
    assert tuple(r.frame[9, 5]) == _rgb("green")
    assert tuple(r.frame[1, 1]) == _rgb("red")
    assert tuple(r.frame[h - 1, w - 1]) == _rgb("black")

def test_array_renderer_clips_offgrid_rects(cfg):
    r = ArrayRenderer()
    r.open(cfg)
    r.draw([Clear("black"), FillRect(-cfg.cell, -cfg.cell, cfg.cell, cfg.cell, "green")])
    assert not r.frame.any()

def test_array_renderer_is_idempotent(cfg, scene_factory):
    scene = scene_factory(cells=[(1, 2), (0, 2)], fruit=(4, 5))
    r = ArrayRenderer()
    r.open(cfg)
    r.draw(scene.render())
    first = r.frame.copy()
    r.draw(scene.render())
    assert np.array_equal(first, r.frame)

def test_array_renderer_records_png(cfg, tmp_path):
    r = ArrayRenderer()
    r.open(cfg.with_(render_record_dir=str(tmp_path)))
    r.draw(CMDS)
    r.draw(CMDS)
    files = sorted(os.listdir(tmp_path))
    assert files == ["frame_000000.png", "frame_000001.png"]
    img = pg.image.load(str(tmp_path / files[0]))
    assert img.get_size() == cfg.canvas_size
    assert _rgb(img.get_at((5, 9))) == _rgb("green")
