import math
from typing import Any
from .model import Coordinate

# Engagement radius in meters around the radar origin (inclusive)
ENGAGEMENT_RADIUS = 100.0

def _component(value: Any) -> float:
    """Read a coordinate component for distance math: null counts as 0, non-numbers as NaN."""
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return math.nan
    return value

def distance(c: Coordinate) -> float:
    """Calculate Euclidean distance from the origin (0, 0)."""
    x, y = _component(c.x), _component(c.y)
    return math.sqrt(x * x + y * y)

def within_radius(c: Coordinate, radius: float = ENGAGEMENT_RADIUS) -> bool:
    """Check if a coordinate lies inside the engagement radius."""
    return distance(c) <= radius
