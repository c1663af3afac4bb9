import pytest

from stallrow.config import DEFAULT_CONFIG, LayoutConfig
from stallrow.layout.estimate import (
    compute_scale_factor, estimate_width, gap_count, is_floored, layout_width, realized_width,
)
from stallrow.objects import BoundaryPresence, UnitAttributes, UnitKind

NONE = BoundaryPresence(False, False)
BOTH = BoundaryPresence(True, True)

def units(*kinds):
    return [UnitAttributes(False, False, k) for k in kinds]

def test_gap_count():
    assert gap_count(1, NONE) == 0
    assert gap_count(3, NONE) == 2
    assert gap_count(3, BOTH) == 4

def test_estimate_uses_midpoint_radius():
    # 3 units * 65 + 2 gaps * 100
    assert estimate_width(3, NONE) == 395
    # + two 50-wide boundaries and two more gaps
    assert estimate_width(3, BOTH) == 395 + 100 + 200

def test_realized_uses_drawn_radii():
    us = units(UnitKind.SMALL, UnitKind.LARGE, UnitKind.SMALL)
    assert realized_width(us, NONE) == 50 + 80 + 50 + 200

def test_layout_width_policies():
    big = units(*[UnitKind.LARGE] * 4)
    assert estimate_width(4, NONE) == 560
    assert realized_width(big, NONE) == 620
    assert layout_width(big, NONE) == 620
    assert layout_width(big, NONE, LayoutConfig(fit_realized_width=False)) == 560
    small = units(*[UnitKind.SMALL] * 4)
    assert layout_width(small, NONE) == 560

def test_scale_factor_never_upscales():
    assert compute_scale_factor(1000, 395) == 1.0
    assert compute_scale_factor(320, 395) == pytest.approx(320 / 395)

def test_scale_factor_degenerate_policies():
    assert compute_scale_factor(0, 395) == DEFAULT_CONFIG.min_scale
    assert compute_scale_factor(-50, 395) == DEFAULT_CONFIG.min_scale
    assert compute_scale_factor(320, 0) == 1.0

def test_scale_factor_floor_applies_to_tiny_positive_widths():
    assert compute_scale_factor(0.5, 395) == DEFAULT_CONFIG.min_scale
    assert compute_scale_factor(3.95, 395) == pytest.approx(DEFAULT_CONFIG.min_scale)
    assert compute_scale_factor(10, 395) == pytest.approx(10 / 395)

def test_is_floored():
    assert is_floored(0, 395)
    assert is_floored(0.5, 395)
    assert not is_floored(10, 395)
    assert not is_floored(320, 395)
