# core/scene.py
from __future__ import annotations
from typing import Callable, List, Optional
import random
from config import AppConfig
from .interfaces import Cell, Clear, DrawCommand, FillRect, InputState, Snapshot
from .snake_rules import Fruit, Snake, spawn_fruit

GameOverHandler = Callable[[Snapshot], None]

class SceneController:
    """One game: a snake, at most one fruit, and the per-tick rules that join them.

    Terminal after self-collision; start a new game with a new controller.
    """

    def __init__(
        self,
        cfg: AppConfig,
        on_game_over: Optional[GameOverHandler] = None,
        rng: Optional[random.Random] = None,
        snake: Optional[Snake] = None,
        fruit: Optional[Fruit] = None,
        bg_color: str = "black",
    ):
        self.cfg = cfg
        self.grid_w, self.grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.cell
        self.bg_color = bg_color
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.on_game_over = on_game_over

        if snake is None:
            start = Cell(self.rng.randrange(self.grid_w), self.rng.randrange(self.grid_h))
            snake = Snake([start], color=cfg.snake_color)
        self.snake = snake
        self.fruits: List[Fruit] = [fruit if fruit is not None else self._spawn()]

        self.score = 0
        self.tick = 0
        self.terminated = False
        self.reason: Optional[str] = None

    def _spawn(self) -> Fruit:
        return spawn_fruit(self.rng, self.grid_w, self.grid_h, self.cfg.fruit_color)

    @property
    def fruit(self) -> Optional[Fruit]:
        return self.fruits[0] if self.fruits else None

    def update(self, inp: InputState, dt: float = 0.0) -> Snapshot:
        if self.terminated:
            return self.snapshot()
        self.tick += 1

        self.snake.update(inp, self.grid_w, self.grid_h)

        if self.snake.collides():
            self.terminated, self.reason = True, "self"
            snap = self.snapshot()
            if self.on_game_over is not None:
                self.on_game_over(snap)
            return snap

        if len(self.fruits) == 1 and self.snake.head == self.fruits[0].cell:
            self.fruits.pop()
            self.snake.grow()
            self.score += 1
            self.fruits.append(self._spawn())

        return self.snapshot()

    def render(self) -> List[DrawCommand]:
        c = self.cell
        cmds: List[DrawCommand] = [Clear(self.bg_color)]
        for x, y in self.snake.pieces:
            cmds.append(FillRect(x * c, y * c, c, c, self.snake.color))
        for f in self.fruits:
            cmds.append(FillRect(f.cell.x * c, f.cell.y * c, c, c, f.color))
        return cmds

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake.pieces),
            fruit=self.fruit.cell if self.fruit else None,
            heading=self.snake.heading,
            score=self.score,
            tick=self.tick,
            terminated=self.terminated,
            reason=self.reason,
            grid_w=self.grid_w,
            grid_h=self.grid_h,
            growing=self.snake.ready_to_grow,
        )
