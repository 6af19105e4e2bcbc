"""Shared scans for radar tests."""
import pytest

def point(x, y, enemy="soldier", number=10, allies=None) -> dict:
    """Build a JSON scan point."""
    p = {"coordinates": {"x": x, "y": y}, "enemies": {"type": enemy, "number": number}}
    if allies is not None:
        p["allies"] = allies
    return p

# (x, y, enemy type, enemy count, allies) for a full sweep of the field
FIELD = [
    (89, 13, "mech", 1, None), (11, 35, "soldier", 10, 3), (19, 49, "soldier", 10, None),
    (38, 21, "soldier", 30, 5), (10, 39, "soldier", 30, 8), (13, 38, "soldier", 15, None),
    (13, 15, "soldier", 60, None), (30, 19, "soldier", 40, None), (30, 11, "soldier", 20, None),
    (15, 19, "soldier", 80, 11), (22, 15, "soldier", 10, 13), (10, 19, "soldier", 10, None),
    (94, 11, "soldier", 10, 15), (10, 19, "soldier", 30, None), (90, 18, "soldier", 30, 16),
    (80, 51, "soldier", 15, 5), (70, 91, "soldier", 60, 5), (30, 11, "soldier", 40, None),
    (30, 95, "mech", 20, None), (1, 89, "soldier", 80, 8), (3, 11, "soldier", 10, None),
    (54, 19, "soldier", 10, None), (22, 38, "soldier", 10, None), (3, 10, "soldier", 30, 10),
    (43, 13, "soldier", 30, None), (51, 13, "soldier", 15, 10), (91, 30, "soldier", 60, 10),
    (11, 30, "soldier", 40, None), (91, 15, "soldier", 20, None), (51, 22, "soldier", 80, 10),
    (91, 10, "mech", 10, None), (11, 84, "soldier", 10, None), (91, 65, "soldier", 10, 10),
    (81, 53, "mech", 30, 3), (15, 70, "soldier", 30, 4), (19, 83, "soldier", 15, 4),
    (11, 46, "soldier", 60, None), (59, 26, "soldier", 40, 6), (98, 57, "soldier", 20, 6),
    (11, 58, "mech", 80, None), (91, 39, "mech", 10, None), (83, 37, "mech", 10, None),
    (0, 11, "mech", 1, 6),
]

@pytest.fixture
def two_point_scan() -> list:
    """A soldier squad at (0, 40) and a mech with allies at (0, 80)."""
    return [point(0, 40, "soldier", 10), point(0, 80, "mech", 1, allies=5)]

@pytest.fixture
def field_scan() -> list:
    return [point(*row) for row in FIELD]
