from enum import Enum
from typing import Callable, Dict, List, Sequence
from loguru import logger
from .geometry import distance
from .model import ScanPoint

class ProtocolCategory(Enum):
    """How a protocol shapes the scan"""
    ORDERING = "ordering"    # Reorders every point, drops none
    FILTERING = "filtering"  # Drops points, keeps the survivors' order

class Protocol(str, Enum):
    """Targeting protocols understood by the radar"""
    CLOSEST_ENEMIES = "closest-enemies"
    FURTHEST_ENEMIES = "furthest-enemies"
    ASSIST_ALLIES = "assist-allies"
    AVOID_CROSSFIRE = "avoid-crossfire"
    PRIORITIZE_MECH = "prioritize-mech"
    AVOID_MECH = "avoid-mech"

    @property
    def category(self) -> ProtocolCategory:
        if self in (Protocol.CLOSEST_ENEMIES, Protocol.FURTHEST_ENEMIES):
            return ProtocolCategory.ORDERING
        return ProtocolCategory.FILTERING

Transform = Callable[[Sequence[ScanPoint]], List[ScanPoint]]

def closest_enemies(points: Sequence[ScanPoint]) -> List[ScanPoint]:
    """Order points from nearest to furthest."""
    return sorted(points, key=lambda p: distance(p.coordinates))

def furthest_enemies(points: Sequence[ScanPoint]) -> List[ScanPoint]:
    """Order points from furthest to nearest."""
    return sorted(points, key=lambda p: distance(p.coordinates), reverse=True)

def assist_allies(points: Sequence[ScanPoint]) -> List[ScanPoint]:
    """Keep points with allied forces nearby."""
    return [p for p in points if p.has_allies]

def avoid_crossfire(points: Sequence[ScanPoint]) -> List[ScanPoint]:
    """Keep points without allied forces nearby."""
    return [p for p in points if not p.has_allies]

def prioritize_mech(points: Sequence[ScanPoint]) -> List[ScanPoint]:
    """Keep points holding mech enemies."""
    return [p for p in points if p.is_mech]

def avoid_mech(points: Sequence[ScanPoint]) -> List[ScanPoint]:
    """Keep points without mech enemies."""
    return [p for p in points if not p.is_mech]

PROTOCOLS: Dict[Protocol, Transform] = {
    Protocol.CLOSEST_ENEMIES: closest_enemies,
    Protocol.FURTHEST_ENEMIES: furthest_enemies,
    Protocol.ASSIST_ALLIES: assist_allies,
    Protocol.AVOID_CROSSFIRE: avoid_crossfire,
    Protocol.PRIORITIZE_MECH: prioritize_mech,
    Protocol.AVOID_MECH: avoid_mech,
}

# Unknown names fall through to this protocol
FALLBACK_PROTOCOL = Protocol.AVOID_MECH
PROTOCOL_NAMES = frozenset(p.value for p in Protocol)

def is_known(name: str) -> bool:
    """Check if a protocol name is in the catalog."""
    return isinstance(name, str) and name in PROTOCOL_NAMES

def parse_protocol(name: str) -> Protocol:
    """Map a protocol name onto the catalog, falling back to avoid-mech."""
    if is_known(name):
        return Protocol(name)
    logger.warning(f"Unknown protocol {name!r}, falling back to {FALLBACK_PROTOCOL.value}")
    return FALLBACK_PROTOCOL

def resolve_protocol(name: str) -> Transform:
    """Look up the transform for a protocol name."""
    return PROTOCOLS[parse_protocol(name)]

def is_ordering(name: str) -> bool:
    return is_known(name) and Protocol(name).category is ProtocolCategory.ORDERING

def is_filtering(name: str) -> bool:
    return is_known(name) and Protocol(name).category is ProtocolCategory.FILTERING
