from dataclasses import dataclass
import math

from .config import DEFAULT_CONFIG


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class ViewportMetrics:
    width: float
    height: float
    edge_padding: float = DEFAULT_CONFIG.edge_padding

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("viewport width/height must be >= 0")
        if self.edge_padding < 0:
            raise ValueError("edge_padding must be >= 0")

    @property
    def available_width(self) -> float:
        # May be <= 0 for a degenerate viewport; the generator applies the floor.
        return self.width - 2 * self.edge_padding

    @property
    def center_y(self) -> float:
        return self.height / 2
