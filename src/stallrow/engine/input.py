# src/stallrow/engine/input.py
# Tap dispatch: only units are targets, and any unit hit regenerates the row.

from enum import Enum
from typing import Optional

from ..geometry import Point
from ..level import LevelState
from ..objects import PlacedObject


class Action(Enum):
    NOOP = "noop"
    REGENERATE_LEVEL = "regenerate"


def hit_test(point: Point, state: LevelState) -> Optional[PlacedObject]:
    """First unit in draw order whose circle contains point (edge inclusive)."""
    for obj in state.objects:
        if not obj.is_unit:
            continue
        if point.distance_to(obj.center) <= obj.radius:
            return obj
    return None


def handle_tap(point: Point, state: LevelState) -> Action:
    if hit_test(point, state) is not None:
        return Action.REGENERATE_LEVEL
    return Action.NOOP
