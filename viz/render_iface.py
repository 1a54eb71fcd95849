# viz/render_iface.py
from __future__ import annotations
from typing import Protocol, Optional
from config import AppConfig
from core.interfaces import DrawCommand, Snapshot

class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, commands: list[DrawCommand], snap: Optional[Snapshot] = None) -> None: ...
    def set_overlay(self, text: Optional[str]) -> None: ...
    def close(self) -> None: ...
