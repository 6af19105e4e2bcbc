from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Union

EnemyType = Literal["soldier", "mech"]
ENEMY_TYPES = ("soldier", "mech")

@dataclass(frozen=True)
class Coordinate:
    x: Optional[float]  # echoed back as sent, null included
    y: Optional[float]

@dataclass(frozen=True)
class EnemyInfo:
    type: EnemyType
    number: int

@dataclass(frozen=True)
class ScanPoint:
    coordinates: Coordinate
    enemies: EnemyInfo
    allies: Optional[Any] = None  # count of allied units, truthy means allies nearby

    @property
    def has_allies(self) -> bool:
        return bool(self.allies)

    @property
    def is_mech(self) -> bool:
        return self.enemies.type == "mech"

Scan = List[ScanPoint]

# Resolution outcomes
MSG_FOUND = "Data correctly proccessed"
MSG_REQUEST_ERROR = "Missing or incorrect fields in the body"
MSG_NOT_FOUND = "No point found that fits the requirements requested"

@dataclass(frozen=True)
class Found:
    coordinate: Coordinate
    message: str = MSG_FOUND

@dataclass(frozen=True)
class NotFound:
    message: str = MSG_NOT_FOUND

@dataclass(frozen=True)
class RequestError:
    message: str = MSG_REQUEST_ERROR

Result = Union[Found, NotFound, RequestError]

def scan_point_from_dict(raw: Dict[str, Any]) -> ScanPoint:
    """Build a ScanPoint from a structurally valid JSON point."""
    coords = raw["coordinates"]
    enemies = raw["enemies"]
    return ScanPoint(
        coordinates=Coordinate(coords["x"], coords["y"]),
        enemies=EnemyInfo(type=enemies["type"], number=enemies["number"]),
        allies=raw.get("allies"),
    )
