from stallrow.config import LayoutConfig
from stallrow.geometry import Point
from stallrow.objects import (
    BoundaryPresence, ObjectKind, PlacedObject, UnitAttributes, UnitKind, unit_id,
)

def test_unit_kind_base_radius():
    assert UnitKind.SMALL.base_radius() == 25
    assert UnitKind.LARGE.base_radius() == 40
    cfg = LayoutConfig(small_radius=10, large_radius=20)
    assert UnitKind.LARGE.base_radius(cfg) == 20
    assert cfg.midpoint_radius == 15

def test_boundary_presence_count():
    assert BoundaryPresence(False, False).count == 0
    assert BoundaryPresence(True, False).count == 1
    assert BoundaryPresence(True, True).count == 2

def test_ids():
    assert unit_id(0) == "unit_0"
    assert unit_id(9) == "unit_9"

def test_placed_object_edges_and_dict():
    attrs = UnitAttributes(category=True, decorated=False, kind=UnitKind.SMALL)
    o = PlacedObject("unit_0", ObjectKind.UNIT, Point(100, 50), 25, attrs)
    assert (o.left, o.right) == (75, 125)
    d = o.to_dict()
    assert d["kind"] == "unit"
    assert d["attributes"] == {"category": True, "decorated": False, "kind": "small"}
    b = PlacedObject("boundaryRight", ObjectKind.BOUNDARY_RIGHT, Point(10, 10), 5)
    assert b.kind.is_boundary and not b.is_unit
    assert "attributes" not in b.to_dict()