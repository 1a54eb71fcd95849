# runners/run_snake.py
import pygame as pg
from core.interfaces import Snapshot
from core.loop import FrameScheduler
from core.session_log import CSVLogger, GAME_KEYS, make_game_logger
from viz.renderer_pygame import PygameRenderer
from viz.keyboard import Keyboard
from runners.app import SnakeApp, config_from_args

def main(args):
    cfg = config_from_args(args)

    rend = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard()
    scheduler = FrameScheduler()

    logger = CSVLogger(cfg.log_csv, fieldnames=GAME_KEYS) if cfg.log_csv else None
    log_game = make_game_logger(logger) if logger else None

    def on_game_end(game: int, snap: Snapshot) -> None:
        print(f"[snake] game {game} over  score={snap.score}  length={len(snap.snake)}  ticks={snap.tick}")
        if log_game:
            log_game(game, snap)

    app = SnakeApp(cfg, rend, kbd, scheduler, on_game_end=on_game_end)
    print(f"[snake] grid: {cfg.grid_w}x{cfg.grid_h}  cell: {cfg.cell}px  fps: {cfg.fps}")
    print("[snake] arrows steer  SPACE start  ESC pause  R restart  D dump  Q quit")
    app.signal("start")

    clock = pg.time.Clock()
    try:
        while not app.quit_requested:
            for sig in kbd.poll():
                app.signal(sig)
            scheduler.dispatch(pg.time.get_ticks())
            clock.tick(cfg.refresh_rate)
    finally:
        rend.close()
        if logger:
            logger.close()
