# src/stallrow/layout/estimate.py
# Row width estimation and the single global down-scale.

from typing import Sequence

from ..config import DEFAULT_CONFIG, LayoutConfig
from ..objects import BoundaryPresence, UnitAttributes


def gap_count(unit_count: int, boundaries: BoundaryPresence) -> int:
    return max(0, unit_count + boundaries.count - 1)


def estimate_width(
    unit_count: int,
    boundaries: BoundaryPresence,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> float:
    """
    Base-size width of the row assuming every unit has the midpoint radius.
    Kinds are drawn independently of the count, so the estimate cannot
    depend on them.
    """
    unit_space = unit_count * 2 * config.midpoint_radius
    boundary_space = boundaries.count * config.boundary_size
    spacing = gap_count(unit_count, boundaries) * config.base_spacing
    return unit_space + boundary_space + spacing


def realized_width(
    units: Sequence[UnitAttributes],
    boundaries: BoundaryPresence,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> float:
    """Base-size width of the row using each unit's drawn radius."""
    unit_space = sum(2 * u.kind.base_radius(config) for u in units)
    boundary_space = boundaries.count * config.boundary_size
    spacing = gap_count(len(units), boundaries) * config.base_spacing
    return unit_space + boundary_space + spacing


def layout_width(
    units: Sequence[UnitAttributes],
    boundaries: BoundaryPresence,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> float:
    """Width the scale factor and centring are computed against."""
    est = estimate_width(len(units), boundaries, config)
    if not config.fit_realized_width:
        return est
    return max(est, realized_width(units, boundaries, config))


def compute_scale_factor(
    available_width: float,
    total_width: float,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> float:
    # Never up-scale, never go below min_scale.
    if available_width <= 0:
        return config.min_scale
    if total_width <= 0:
        return 1.0
    return max(config.min_scale, min(1.0, available_width / total_width))


def is_floored(
    available_width: float,
    total_width: float,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> bool:
    """True when the row cannot fit even at min_scale."""
    if available_width <= 0:
        return True
    return total_width > 0 and available_width / total_width < config.min_scale
