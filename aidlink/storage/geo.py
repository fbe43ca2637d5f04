# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import math
from typing import Optional

from aidlink.schemas import schemas

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle distance in kilometres between two points given in degrees.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def has_coordinates(location: Optional[schemas.Location]) -> bool:
    return (
        location is not None
        and isinstance(location.lat, (int, float))
        and isinstance(location.lng, (int, float))
    )


def within_radius(location: Optional[schemas.Location], origin: schemas.LocationFilter) -> bool:
    """
    True when location has both coordinates and lies at most origin.radius km away.
    Locations without coordinates never match.
    """
    if not has_coordinates(location):
        return False
    return haversine_km(origin.lat, origin.lng, location.lat, location.lng) <= origin.radius
