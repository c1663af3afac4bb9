from dataclasses import dataclass
from typing import Tuple

from .geometry import ViewportMetrics
from .objects import PlacedObject


@dataclass(frozen=True)
class LevelState:
    objects: Tuple[PlacedObject, ...]
    spacing: float
    scale_factor: float
    viewport: ViewportMetrics

    @property
    def units(self) -> Tuple[PlacedObject, ...]:
        return tuple(o for o in self.objects if o.is_unit)

    @property
    def unit_count(self) -> int:
        return len(self.units)

    def extent(self) -> Tuple[float, float]:
        """(leftmost left edge, rightmost right edge) of the row."""
        return (min(o.left for o in self.objects), max(o.right for o in self.objects))

    def to_dict(self) -> dict:
        return {
            "viewport": {
                "width": self.viewport.width,
                "height": self.viewport.height,
                "edgePadding": self.viewport.edge_padding,
            },
            "scaleFactor": self.scale_factor,
            "spacing": self.spacing,
            "objects": [o.to_dict() for o in self.objects],
        }
