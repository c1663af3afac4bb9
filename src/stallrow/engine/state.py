# src/stallrow/engine/state.py
# GameSession orchestrator: owns the current LevelState and swaps it whole.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import DEFAULT_CONFIG, LayoutConfig
from ..geometry import Point, ViewportMetrics
from ..level import LevelState
from ..layout.generator import generate_level
from ..objects import PlacedObject
from ..rng import RandomSource
from .input import Action, handle_tap

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneUpdate:
    removed: Tuple[PlacedObject, ...]
    added: Tuple[PlacedObject, ...]


class GameSession:
    def __init__(
        self,
        viewport: ViewportMetrics,
        rng: RandomSource,
        config: Optional[LayoutConfig] = None,
    ) -> None:
        self.viewport = viewport
        self.rng = rng
        self.config = (config or DEFAULT_CONFIG).validate()
        self.state: Optional[LevelState] = None
        self.generation = 0

    # ---- Lifecycle ----
    def start(self) -> SceneUpdate:
        return self.regenerate()

    def resize(self, viewport: ViewportMetrics) -> None:
        # Takes effect on the next generation; the current row stays as built.
        self.viewport = viewport

    def regenerate(self) -> SceneUpdate:
        new_state = generate_level(self.viewport, self.rng, self.config)
        old = self.state.objects if self.state is not None else ()
        # Single assignment: readers see the old row or the new one, never a mix.
        self.state = new_state
        self.generation += 1
        log.info(
            "generation %d: %d objects, scale %.4f",
            self.generation, len(new_state.objects), new_state.scale_factor,
        )
        return SceneUpdate(removed=old, added=new_state.objects)

    # ---- Input ----
    def tap(self, point: Point) -> Optional[SceneUpdate]:
        if self.state is None:
            return None
        if handle_tap(point, self.state) is Action.REGENERATE_LEVEL:
            return self.regenerate()
        return None
