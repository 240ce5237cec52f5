"""
Great-circle distance helpers used by check-in verification and nearby search.
"""
import math

EARTH_RADIUS_METERS = 6371e3


def haversine_distance(lat1, lng1, lat2, lng2):
    """
    Distance in meters between two (latitude, longitude) points given in degrees.

    Uses the haversine formula on a sphere of radius 6,371,000 m. Inputs are
    assumed to be valid; callers validate coordinate ranges.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lng2 - lng1)

    a = (math.sin(delta_phi / 2) ** 2
         + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c


def round_distance(meters):
    """Round to the nearest whole meter, halves rounding up"""
    return int(math.floor(meters + 0.5))


def bounding_box(lat, lng, radius_meters):
    """
    Latitude/longitude window that contains every point within radius_meters.

    Used to narrow a nearby-places query before exact haversine filtering.
    """
    delta_lat = math.degrees(radius_meters / EARTH_RADIUS_METERS)
    cos_lat = math.cos(math.radians(lat))
    if cos_lat < 1e-12:
        delta_lng = 180.0
    else:
        delta_lng = min(math.degrees(radius_meters / (EARTH_RADIUS_METERS * cos_lat)), 180.0)
    return (
        max(lat - delta_lat, -90.0),
        min(lat + delta_lat, 90.0),
        lng - delta_lng,
        lng + delta_lng,
    )
