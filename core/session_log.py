from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable
from .interfaces import Snapshot

GAME_KEYS = ["game", "score", "length", "ticks", "reason", "grid_w", "grid_h"]

class Logger(Protocol):
    def log(self, game: int, row: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, game: int, row: Dict[str, Any]) -> None:
        row = {"game": game, **row}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(row.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(row)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()


def make_game_logger(logger: Logger) -> Callable[[int, Snapshot], None]:
    """
    Returns a function(game: int, snap: Snapshot) -> None that writes one row
    per finished game and flushes, so a crashed session keeps earlier rows.
    """
    def _on_game_end(game: int, snap: Snapshot) -> None:
        logger.log(game, {
            "score": snap.score,
            "length": len(snap.snake),
            "ticks": snap.tick,
            "reason": snap.reason or "",
            "grid_w": snap.grid_w,
            "grid_h": snap.grid_h,
        })
        logger.flush()
    return _on_game_end
