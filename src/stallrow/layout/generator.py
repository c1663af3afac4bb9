# src/stallrow/layout/generator.py
# Level generator: random count/attributes -> scale factor -> placed row.

import logging
from typing import List, Optional

from ..config import DEFAULT_CONFIG, LayoutConfig
from ..geometry import ViewportMetrics
from ..level import LevelState
from ..objects import BoundaryPresence, UnitAttributes, UnitKind
from ..rng import RandomContractError, RandomSource
from .estimate import compute_scale_factor, estimate_width, is_floored, layout_width
from .placement import place_row

log = logging.getLogger(__name__)


def _draw_int(rng: RandomSource, low: int, high: int) -> int:
    v = rng.next_int(low, high)
    if not isinstance(v, int) or isinstance(v, bool) or not (low <= v <= high):
        raise RandomContractError(f"next_int({low}, {high}) returned {v!r}")
    return v


def _draw_bool(rng: RandomSource) -> bool:
    v = rng.next_bool()
    if not isinstance(v, bool):
        raise RandomContractError(f"next_bool() returned {v!r}")
    return v


def draw_unit_attributes(rng: RandomSource) -> UnitAttributes:
    # Same order as the original: colour, dot, size (True -> small).
    category = _draw_bool(rng)
    decorated = _draw_bool(rng)
    kind = UnitKind.SMALL if _draw_bool(rng) else UnitKind.LARGE
    return UnitAttributes(category=category, decorated=decorated, kind=kind)


def generate_level(
    viewport: ViewportMetrics,
    rng: RandomSource,
    config: Optional[LayoutConfig] = None,
) -> LevelState:
    config = (config or DEFAULT_CONFIG).validate()

    unit_count = _draw_int(rng, config.min_units, config.max_units)
    boundaries = BoundaryPresence(has_left=_draw_bool(rng), has_right=_draw_bool(rng))
    units: List[UnitAttributes] = [draw_unit_attributes(rng) for _ in range(unit_count)]

    total = layout_width(units, boundaries, config)
    available = viewport.available_width
    if is_floored(available, total, config):
        log.warning(
            "viewport width %s with padding %s cannot fit the row; scale floored to %s",
            viewport.width, viewport.edge_padding, config.min_scale,
        )
    scale = compute_scale_factor(available, total, config)

    objects, spacing = place_row(viewport, units, boundaries, scale, total, config)
    log.debug(
        "level: units=%d left=%s right=%s estimate=%.2f width=%.2f scale=%.4f spacing=%.2f",
        unit_count, boundaries.has_left, boundaries.has_right,
        estimate_width(unit_count, boundaries, config), total, scale, spacing,
    )
    return LevelState(objects=objects, spacing=spacing, scale_factor=scale, viewport=viewport)
