# runners/run_headless.py
from __future__ import annotations
from dataclasses import replace
from core.interfaces import InputState, Snapshot
from core.loop import FrameScheduler
from core.session_log import CSVLogger, GAME_KEYS, make_game_logger
from policy.policy import GreedyPolicy, Policy
from viz.renderer_headless import ArrayRenderer
from runners.app import SnakeApp, config_from_args

class PilotInput:
    """Input source driven by a policy instead of a keyboard."""
    def __init__(self, policy: Policy):
        self.policy = policy
        self.state = InputState()

    def steer(self, snap: Snapshot) -> None:
        heading = self.policy.act(snap)
        if heading is not None:
            self.state = self.state.with_heading(heading)

    def reset(self) -> None:
        self.state = InputState()

def play(app: SnakeApp, pilot: PilotInput, now: float = 0.0) -> tuple[Snapshot, float]:
    """Pump synthetic frames until the game ends or hits cfg.max_ticks.

    Returns the final snapshot and the clock value reached.
    """
    cfg = app.cfg
    frame_ms = 1000.0 / cfg.refresh_rate
    app.loop.start()
    while app.loop.running and app.scene.tick < cfg.max_ticks:
        now += frame_ms
        pilot.steer(app.scene.snapshot())
        app.scheduler.dispatch(now)
    app.loop.stop()
    snap = app.scene.snapshot()
    if not snap.terminated:
        snap = replace(snap, reason="max_ticks")
    return snap, now

def main(args):
    cfg = config_from_args(args)

    rend = ArrayRenderer()
    rend.open(cfg)
    pilot = PilotInput(GreedyPolicy())
    logger = CSVLogger(cfg.log_csv, fieldnames=GAME_KEYS) if cfg.log_csv else None
    on_game_end = make_game_logger(logger) if logger else None

    app = SnakeApp(cfg, rend, pilot, FrameScheduler())

    print("=== Snake headless ===")
    print(f"[headless] grid: {cfg.grid_w}x{cfg.grid_h}  games: {cfg.games}  max ticks: {cfg.max_ticks}  seed: {cfg.seed}")

    now = 0.0
    best = 0
    try:
        for game in range(1, cfg.games + 1):
            if game > 1:
                app.new_game()
            snap, now = play(app, pilot, now)
            best = max(best, snap.score)
            print(f"[headless] game {game:03d}  score={snap.score}  length={len(snap.snake)}  "
                  f"ticks={snap.tick}  reason={snap.reason}")
            if on_game_end:
                on_game_end(game, snap)
    finally:
        rend.close()
        if logger:
            logger.close()
    print(f"[headless] best score: {best}")
