"""
utils/geo.py
-----------------
Great-circle distance helpers for the classroom geofence.
"""

import math

from utils.errors import ValidationError

EARTH_RADIUS_KM = 6371


def calculate_distance(lat1, lon1, lat2, lon2):
    """Haversine distance in kilometres between two points given in degrees."""
    rad_lat1 = math.radians(lat1)
    rad_lon1 = math.radians(lon1)
    rad_lat2 = math.radians(lat2)
    rad_lon2 = math.radians(lon2)

    delta_lat = rad_lat2 - rad_lat1
    delta_lon = rad_lon2 - rad_lon1

    a = (math.sin(delta_lat / 2) ** 2
         + math.cos(rad_lat1) * math.cos(rad_lat2) * math.sin(delta_lon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def is_within_range(distance, threshold):
    return distance <= threshold


def parse_coordinate(value, name, limit):
    """
    Accept a latitude/longitude sent as a number or numeric string.
    Raises ValidationError for anything that is not a finite value in
    [-limit, limit].
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{name} is required and must be a number.")

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{name} must be a number.")

    if not math.isfinite(number) or abs(number) > limit:
        raise ValidationError(f"{name} must be between -{limit} and {limit}.")

    return number
