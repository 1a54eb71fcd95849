# runners/app.py
from __future__ import annotations
import random
from typing import Callable, Optional, Protocol
from config import AppConfig
from core.interfaces import InputState, Snapshot
from core.loop import FrameScheduler, GameLoop
from core.scene import SceneController
from viz.render_iface import Renderer
import viz.renderer_colors as theme

class InputSource(Protocol):
    state: InputState
    def reset(self) -> None: ...

def config_from_args(args) -> AppConfig:
    cfg = AppConfig()
    overrides = {
        "grid_w": getattr(args, "grid_w", None),
        "grid_h": getattr(args, "grid_h", None),
        "cell": getattr(args, "cell_px", None),
        "fps": getattr(args, "fps", None),
        "refresh_rate": getattr(args, "refresh", None),
        "seed": getattr(args, "seed", None),
        "max_ticks": getattr(args, "ticks", None),
        "games": getattr(args, "games", None),
        "render_record_dir": getattr(args, "record_dir", None),
        "log_csv": getattr(args, "log_csv", None),
    }
    cfg = cfg.with_(**{k: v for k, v in overrides.items() if v is not None})
    window_w = getattr(args, "window_width", None)
    if window_w:
        cfg = cfg.fit_window(window_w)
    return cfg

class SnakeApp:
    """Host side of a session: wires scene, loop, input and renderer together.

    Implements the loop's Tickable. Each game gets a fresh SceneController;
    the loop and scheduler live for the whole session.
    """
    def __init__(
        self,
        cfg: AppConfig,
        renderer: Renderer,
        inputs: InputSource,
        scheduler: FrameScheduler,
        on_game_end: Optional[Callable[[int, Snapshot], None]] = None,
    ):
        self.cfg = cfg
        self.renderer = renderer
        self.inputs = inputs
        self.scheduler = scheduler
        self.on_game_end = on_game_end
        self.rng = random.Random(cfg.seed)
        self.loop = GameLoop(self, cfg.fps, scheduler)
        self.games = 0
        self.quit_requested = False
        self.scene: Optional[SceneController] = None
        self.new_game()

    # ---- Tickable ----
    def update(self, dt: float) -> None:
        self.scene.update(self.inputs.state, dt)

    def render(self) -> None:
        self.renderer.draw(self.scene.render(), self.scene.snapshot())

    # ---- session control ----
    def new_game(self, cfg: Optional[AppConfig] = None) -> None:
        """Tear down the current scene and build a new one, optionally on a new grid."""
        self.loop.stop()
        if cfg is not None:
            resized = cfg.canvas_size != self.cfg.canvas_size
            self.cfg = cfg
            if resized:
                self.renderer.open(cfg)
        self.inputs.reset()
        self.renderer.set_overlay(None)
        self.games += 1
        self.scene = SceneController(self.cfg, on_game_over=self._game_over,
                                     rng=self.rng, bg_color=theme.BG)

    def _game_over(self, snap: Snapshot) -> None:
        self.loop.stop()
        self.renderer.set_overlay(self.cfg.game_over_text)
        if self.on_game_end is not None:
            self.on_game_end(self.games, snap)

    def signal(self, sig: str) -> None:
        if sig == "start":
            if not self.scene.terminated:
                self.loop.start()
        elif sig == "stop":
            self.loop.stop()
        elif sig == "restart":
            if self.scene.terminated:
                self.new_game()
                self.loop.start()
        elif sig == "debug":
            print(f"[snake] pieces={list(self.scene.snake.pieces)}")
        elif sig == "quit":
            self.loop.stop()
            self.quit_requested = True
