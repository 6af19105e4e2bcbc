"""Coordinate set helpers used to combine filtering protocol results.

Coordinates compare by exact (x, y) value, so two points detected at the same
spot collapse to one no matter which scan point they came from.
"""
from typing import List, Sequence
from .model import Coordinate

def _first_index(coords: Sequence[Coordinate], c: Coordinate) -> int:
    for i, other in enumerate(coords):
        if other.x == c.x and other.y == c.y:
            return i
    return -1

def unique_coordinates(coords: Sequence[Coordinate]) -> List[Coordinate]:
    """Keep the first occurrence of each coordinate: [A,B,C,A,D,C] -> [A,B,C,D]."""
    return [c for i, c in enumerate(coords) if _first_index(coords, c) == i]

def duplicate_coordinates(coords: Sequence[Coordinate]) -> List[Coordinate]:
    """Return the repeated occurrences of each coordinate: [A,B,C,A,D,C] -> [A,C]."""
    return [c for i, c in enumerate(coords) if _first_index(coords, c) != i]

def common_coordinates(lists: Sequence[Sequence[Coordinate]]) -> List[Coordinate]:
    """Coordinates present in every filtering result.

    A single list already satisfies its protocol, so it is returned as is.
    With two or more lists only the first two are intersected: each is
    deduplicated, the two are concatenated, and whatever repeats across the
    concatenation is in both.
    """
    if not lists:
        return []
    if len(lists) == 1:
        return list(lists[0])
    combined = unique_coordinates(lists[0]) + unique_coordinates(lists[1])
    return duplicate_coordinates(combined)
