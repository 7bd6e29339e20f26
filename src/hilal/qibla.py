"""Qibla bearing and great-circle distance to the Kaaba."""

import math

from hilal.models import CardinalDirection, QiblaDirection
from hilal.numeric import darctan2, deg_to_rad, fix_angle

KAABA_LAT = 21.4225
KAABA_LNG = 39.8262
EARTH_RADIUS_KM = 6371.0

# (upper bound in degrees, direction); the first bound not exceeded wins
_CARDINALS: tuple[tuple[float, CardinalDirection], ...] = (
    (22.5, CardinalDirection("North", "شمال", "N")),
    (67.5, CardinalDirection("Northeast", "شمال شرق", "NE")),
    (112.5, CardinalDirection("East", "شرق", "E")),
    (157.5, CardinalDirection("Southeast", "جنوب شرق", "SE")),
    (202.5, CardinalDirection("South", "جنوب", "S")),
    (247.5, CardinalDirection("Southwest", "جنوب غرب", "SW")),
    (292.5, CardinalDirection("West", "غرب", "W")),
    (337.5, CardinalDirection("Northwest", "شمال غرب", "NW")),
    (360.0, CardinalDirection("North", "شمال", "N")),
)


def initial_bearing(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Bearing from point 1 toward point 2, degrees clockwise from north in [0, 360)."""
    p1, p2 = deg_to_rad(lat1), deg_to_rad(lat2)
    d_lng = deg_to_rad(lng2 - lng1)
    x = math.cos(p2) * math.sin(d_lng)
    y = math.cos(p1) * math.sin(p2) - math.sin(p1) * math.cos(p2) * math.cos(d_lng)
    return fix_angle(darctan2(x, y))


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    p1, p2 = deg_to_rad(lat1), deg_to_rad(lat2)
    d_lat = p2 - p1
    d_lng = deg_to_rad(lng2 - lng1)
    a = math.sin(d_lat / 2) ** 2 + math.cos(p1) * math.cos(p2) * math.sin(d_lng / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def cardinal_direction(bearing: float) -> CardinalDirection:
    for upper, direction in _CARDINALS:
        if bearing < upper:
            return direction
    return _CARDINALS[0][1]


def qibla_direction(latitude: float, longitude: float) -> QiblaDirection:
    """Direction to face for prayer from a coordinate.

    Args:
        latitude: Observer latitude (degrees).
        longitude: Observer longitude (degrees).

    Returns:
        QiblaDirection with the bearing and its bilingual cardinal direction.
    """
    bearing = initial_bearing(latitude, longitude, KAABA_LAT, KAABA_LNG)
    return QiblaDirection(
        latitude=latitude,
        longitude=longitude,
        bearing=bearing,
        distance_km=haversine_km(latitude, longitude, KAABA_LAT, KAABA_LNG),
        cardinal=cardinal_direction(bearing),
    )
