# src/stallrow/layout/placement.py
from typing import List, Sequence, Tuple

from ..config import DEFAULT_CONFIG, LayoutConfig
from ..geometry import Point, ViewportMetrics
from ..objects import (
    BOUNDARY_LEFT_ID, BOUNDARY_RIGHT_ID,
    BoundaryPresence, ObjectKind, PlacedObject, UnitAttributes, unit_id,
)


def place_row(
    viewport: ViewportMetrics,
    units: Sequence[UnitAttributes],
    boundaries: BoundaryPresence,
    scale: float,
    total_width: float,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Tuple[Tuple[PlacedObject, ...], float]:
    """
    Walk left to right and return (objects, spacing):
      1) left boundary, if present
      2) units in draw order, ids unit_0..unit_{n-1}
      3) right boundary at the final cursor, if present
    The block of width total_width*scale is centred in the viewport.
    """
    spacing = config.base_spacing * scale
    y = viewport.center_y
    cursor = (viewport.width - total_width * scale) / 2
    out: List[PlacedObject] = []

    side = config.boundary_size * scale
    if boundaries.has_left:
        out.append(PlacedObject(
            id=BOUNDARY_LEFT_ID,
            kind=ObjectKind.BOUNDARY_LEFT,
            center=Point(cursor + side / 2, y),
            radius=side / 2,
        ))
        cursor += side + spacing

    for i, attrs in enumerate(units):
        r = attrs.kind.base_radius(config) * scale
        out.append(PlacedObject(
            id=unit_id(i),
            kind=ObjectKind.UNIT,
            center=Point(cursor + r, y),
            radius=r,
            attributes=attrs,
        ))
        cursor += 2 * r + spacing

    if boundaries.has_right:
        out.append(PlacedObject(
            id=BOUNDARY_RIGHT_ID,
            kind=ObjectKind.BOUNDARY_RIGHT,
            center=Point(cursor + side / 2, y),
            radius=side / 2,
        ))

    return tuple(out), spacing
