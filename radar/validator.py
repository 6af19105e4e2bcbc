"""Structural validation of incoming radar requests.

Only the shape of the request is checked: which keys are present and whether
the enemy type is one the radar knows. Values themselves (null coordinates,
negative counts) pass through untouched.
"""
from typing import Any, List
from .model import ENEMY_TYPES
from .protocols import is_known

def _has_keys(obj: Any, *keys: str) -> bool:
    return isinstance(obj, dict) and all(k in obj for k in keys)

def point_is_invalid(point: Any) -> bool:
    """Check one scan point for missing fields or an unknown enemy type."""
    if not isinstance(point, dict):
        return True
    coordinates = point.get("coordinates")
    enemies = point.get("enemies")
    if not coordinates or not enemies:
        return True
    if not _has_keys(coordinates, "x", "y") or not _has_keys(enemies, "type", "number"):
        return True
    return enemies["type"] not in ENEMY_TYPES

def invalid_points(scan: Any) -> List[int]:
    """Return indexes of structurally invalid points in the scan."""
    if not isinstance(scan, list):
        return []
    return [i for i, point in enumerate(scan) if point_is_invalid(point)]

def unknown_protocols(protocols: Any) -> List[Any]:
    """Return requested protocol names outside the catalog."""
    if not isinstance(protocols, list):
        return []
    return [p for p in protocols if not is_known(p)]

def is_invalid(protocols: Any, scan: Any) -> bool:
    """True if protocols or scan are missing/empty or any point is malformed."""
    if not isinstance(protocols, list) or not protocols:
        return True
    if not isinstance(scan, list) or not scan:
        return True
    return bool(invalid_points(scan))
