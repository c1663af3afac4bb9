# Object vocabulary shared by the layout, the dispatcher and the renderers.

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import DEFAULT_CONFIG, LayoutConfig
from .geometry import Point

BOUNDARY_LEFT_ID = "boundaryLeft"
BOUNDARY_RIGHT_ID = "boundaryRight"
UNIT_ID_PREFIX = "unit_"


class UnitKind(Enum):
    SMALL = "small"
    LARGE = "large"

    def base_radius(self, config: LayoutConfig = DEFAULT_CONFIG) -> float:
        return config.small_radius if self is UnitKind.SMALL else config.large_radius


class ObjectKind(Enum):
    UNIT = "unit"
    BOUNDARY_LEFT = "boundaryLeft"
    BOUNDARY_RIGHT = "boundaryRight"

    @property
    def is_boundary(self) -> bool:
        return self is not ObjectKind.UNIT


@dataclass(frozen=True)
class UnitAttributes:
    category: bool    # red vs yellow in the original art
    decorated: bool   # draws the centre dot
    kind: UnitKind


@dataclass(frozen=True)
class BoundaryPresence:
    has_left: bool
    has_right: bool

    @property
    def count(self) -> int:
        return int(self.has_left) + int(self.has_right)


@dataclass(frozen=True)
class PlacedObject:
    id: str
    kind: ObjectKind
    center: Point
    radius: float  # half-extent for boundaries
    attributes: Optional[UnitAttributes] = None

    @property
    def left(self) -> float:
        return self.center.x - self.radius

    @property
    def right(self) -> float:
        return self.center.x + self.radius

    @property
    def is_unit(self) -> bool:
        return self.kind is ObjectKind.UNIT

    def to_dict(self) -> dict:
        out = {
            "id": self.id,
            "kind": self.kind.value,
            "center": {"x": self.center.x, "y": self.center.y},
            "radius": self.radius,
        }
        if self.attributes is not None:
            out["attributes"] = {
                "category": self.attributes.category,
                "decorated": self.attributes.decorated,
                "kind": self.attributes.kind.value,
            }
        return out


def unit_id(index: int) -> str:
    return f"{UNIT_ID_PREFIX}{index}"

