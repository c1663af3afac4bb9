from dataclasses import dataclass, replace

SQUARE_BOUNDARY_SIZE = 50.0
SPRITE_BOUNDARY_SIZE = 100.0  # image-based variant uses a larger stall


@dataclass(frozen=True)
class LayoutConfig:
    # Inclusive range for the number of units in a row.
    min_units: int = 1
    max_units: int = 10

    # Base (unscaled) sizes.
    small_radius: float = 25.0
    large_radius: float = 40.0
    boundary_size: float = SQUARE_BOUNDARY_SIZE
    base_spacing: float = 100.0
    edge_padding: float = 40.0

    # Used when the viewport leaves no room at all.
    min_scale: float = 0.01

    # True: scale/centre on max(estimate, realized width) so the row never
    # overflows. False: estimate only, like the original game.
    fit_realized_width: bool = True

    @property
    def midpoint_radius(self) -> float:
        return (self.small_radius + self.large_radius) / 2

    def validate(self) -> "LayoutConfig":
        if self.min_units < 1:
            raise ValueError("min_units must be >= 1")
        if self.max_units < self.min_units:
            raise ValueError("max_units must be >= min_units")
        for name in ("small_radius", "large_radius", "boundary_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.base_spacing < 0 or self.edge_padding < 0:
            raise ValueError("base_spacing and edge_padding must be >= 0")
        if not (0 < self.min_scale <= 1):
            raise ValueError("min_scale must be in (0, 1]")
        return self

    def with_boundary_size(self, size: float) -> "LayoutConfig":
        return replace(self, boundary_size=size).validate()


# Global defaults (can be swapped by launcher)
DEFAULT_CONFIG = LayoutConfig()
