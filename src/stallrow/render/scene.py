# src/stallrow/render/scene.py
from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

from ..engine.state import SceneUpdate
from ..level import LevelState
from ..objects import PlacedObject

RGB = Tuple[int, int, int]

BACKGROUND: RGB = (242, 242, 242)   # white 0.95
OUTLINE: RGB = (0, 0, 0)
BOUNDARY_FILL: RGB = (0, 0, 255)
DOT_FILL: RGB = (0, 0, 0)
DOT_RATIO = 0.2


def unit_fill(obj: PlacedObject) -> RGB:
    if obj.attributes is not None and obj.attributes.category:
        return (255, 0, 0)
    return (255, 255, 0)


def outline_width(scale: float) -> int:
    return max(1, round(2 * scale))


class SceneRenderer:
    """
    Keeps the drawn object set in sync with SceneUpdates and paints it:
      - boundaries: blue squares with a black outline
      - units: red/yellow circles, black outline, optional centre dot
    """
    def __init__(self, screen: pygame.Surface, font=None):
        self.screen = screen
        self.font = font
        self.drawn: Dict[str, PlacedObject] = {}
        self.scale = 1.0

    def apply(self, update: Optional[SceneUpdate], state: Optional[LevelState] = None) -> None:
        if update is None:
            return
        for obj in update.removed:
            self.drawn.pop(obj.id, None)
        for obj in update.added:
            self.drawn[obj.id] = obj
        if state is not None:
            self.scale = state.scale_factor

    def draw(self, caption: Optional[str] = None) -> None:
        self.screen.fill(BACKGROUND)
        lw = outline_width(self.scale)
        for obj in self.drawn.values():
            cx, cy = obj.center.x, obj.center.y
            if obj.kind.is_boundary:
                side = obj.radius * 2
                rect = pygame.Rect(0, 0, round(side), round(side))
                rect.center = (round(cx), round(cy))
                pygame.draw.rect(self.screen, BOUNDARY_FILL, rect)
                pygame.draw.rect(self.screen, OUTLINE, rect, lw)
                continue
            r = max(1, round(obj.radius))
            pygame.draw.circle(self.screen, unit_fill(obj), (round(cx), round(cy)), r)
            pygame.draw.circle(self.screen, OUTLINE, (round(cx), round(cy)), r, lw)
            if obj.attributes is not None and obj.attributes.decorated:
                pygame.draw.circle(self.screen, DOT_FILL, (round(cx), round(cy)), max(1, round(obj.radius * DOT_RATIO)))
        if caption and self.font is not None:
            img = self.font.render(caption, True, (60, 60, 60))
            self.screen.blit(img, (4, self.screen.get_height() - img.get_height() - 4))
