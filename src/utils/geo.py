import math
from typing import List, Sequence

from models.models import GeoQuestion, ScoredCandidate

EARTH_RADIUS_M = 6_371_000


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in meters on a spherical Earth (not geodesically exact)."""
    φ1, φ2 = map(math.radians, (lat1, lat2))
    Δφ = math.radians(lat2 - lat1)
    Δλ = math.radians(lng2 - lng1)

    a = math.sin(Δφ / 2) ** 2 + math.cos(φ1) * math.cos(φ2) * math.sin(Δλ / 2) ** 2
    # rounding can push a just outside [0, 1] near antipodes
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def filter_nearby(
    observer_lat: float,
    observer_lng: float,
    candidates: Sequence[GeoQuestion],
    radius_m: float,
    cap: int,
) -> List[ScoredCandidate]:
    """
    Rank candidates by distance from the observer, keeping those within radius.

    The observer location must already be known; callers skip this entirely
    when it is not. Equal distances keep their input order.

    Args:
        observer_lat (float): Observer latitude in decimal degrees.
        observer_lng (float): Observer longitude in decimal degrees.
        candidates (Sequence[GeoQuestion]): Geo-tagged questions to rank.
        radius_m (float): Inclusive search radius in meters.
        cap (int): Maximum number of results.

    Returns:
        List[ScoredCandidate]: A new list, ascending by distance, at most ``cap`` long.
    """
    scored = [
        ScoredCandidate.model_validate(
            {
                **candidate.model_dump(),
                "distance_m": haversine_distance(
                    observer_lat, observer_lng, candidate.lat, candidate.lng
                ),
            }
        )
        for candidate in candidates
    ]
    within = [c for c in scored if c.distance_m <= radius_m]
    return sorted(within, key=lambda c: c.distance_m)[:cap]


def radius_to_zoom(radius_m: float) -> int:
    if radius_m <= 1000:
        return 15
    if radius_m <= 5000:
        return 13
    if radius_m <= 25000:
        return 11
    return 9
