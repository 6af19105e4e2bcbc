from typing import Any, List, Optional, Sequence, Tuple
from loguru import logger
from .geometry import ENGAGEMENT_RADIUS, within_radius
from .model import Coordinate, Found, NotFound, RequestError, Result, ScanPoint, scan_point_from_dict
from .protocols import is_filtering, is_ordering, resolve_protocol
from .sets import common_coordinates
from .validator import invalid_points, is_invalid, unknown_protocols

ProtocolResult = Tuple[str, List[Coordinate]]

class TargetingEngine:
    """Pure, stateless protocol resolution engine."""

    def __init__(self, strict: bool = False):
        # Reject unknown protocol names instead of falling back to avoid-mech
        self.strict = strict

    def _validate(self, protocols: Any, scan: Any) -> Optional[RequestError]:
        """Return a RequestError if the request is malformed."""
        if is_invalid(protocols, scan):
            bad = invalid_points(scan)
            logger.warning(f"Rejecting request: protocols={protocols!r}, invalid points={bad}")
            return RequestError()
        if self.strict:
            unknown = unknown_protocols(protocols)
            if unknown:
                logger.warning(f"Rejecting request: unknown protocols {unknown}")
                return RequestError()
        return None

    def _prune(self, scan: List[dict]) -> List[ScanPoint]:
        """Drop points outside the engagement radius."""
        points = [scan_point_from_dict(raw) for raw in scan]
        in_range = [p for p in points if within_radius(p.coordinates, ENGAGEMENT_RADIUS)]
        logger.debug(f"{len(in_range)}/{len(points)} points within {ENGAGEMENT_RADIUS}m")
        return in_range

    def _run_protocols(self, protocols: Sequence[str], points: List[ScanPoint]) -> List[ProtocolResult]:
        """Apply each requested protocol to the pruned points."""
        results: List[ProtocolResult] = []
        for name in protocols:
            transformed = resolve_protocol(name)(points)
            results.append((name, [p.coordinates for p in transformed]))
        return results

    def _split(self, results: List[ProtocolResult]) -> Tuple[Optional[List[Coordinate]], List[List[Coordinate]]]:
        """Separate ordering results from filtering results.

        Only the first ordering result is kept; a second ordering protocol in
        the same request is computed but never consulted. Results of unknown
        names belong to neither category and are dropped.
        """
        ordering = [coords for name, coords in results if is_ordering(name)]
        filtering = [coords for name, coords in results if is_filtering(name)]
        return (ordering[0] if ordering else None), filtering

    def _select(self, ordered: Optional[List[Coordinate]], filtering: List[List[Coordinate]]) -> Result:
        """Pick the single coordinate to engage."""
        if not filtering:
            if not ordered:
                return NotFound()
            return Found(ordered[0])

        common = common_coordinates(filtering)
        if ordered is None:
            return Found(common[0]) if common else NotFound()

        for c in ordered:
            if c in common:
                return Found(c)
        return NotFound()

    def resolve(self, protocols: Any, scan: Any) -> Result:
        """Resolve the next target for a raw (deserialized JSON) request."""
        err = self._validate(protocols, scan)
        if err is not None:
            return err

        points = self._prune(scan)
        if not points:
            logger.info("No points within engagement radius")
            return NotFound()

        ordered, filtering = self._split(self._run_protocols(protocols, points))
        result = self._select(ordered, filtering)
        if isinstance(result, Found):
            logger.info(f"Target acquired at ({result.coordinate.x}, {result.coordinate.y}) using {protocols}")
        else:
            logger.info(f"No point satisfies {protocols}")
        return result

def resolve_target(protocols: Any, scan: Any, *, strict: bool = False) -> Result:
    """Resolve the next target: Found(coordinate), NotFound or RequestError."""
    return TargetingEngine(strict=strict).resolve(protocols, scan)
