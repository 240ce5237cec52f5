"""
Geographic coordinate validators.
"""
import math

from rest_framework import serializers


def _as_finite_float(value, label):
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise serializers.ValidationError(f"{label} must be a number.")
    if not math.isfinite(number):
        raise serializers.ValidationError(f"{label} must be a finite number.")
    return number


def validate_latitude(value):
    """
    Validate latitude is within [-90, 90].

    Returns:
        float: Validated latitude
    """
    number = _as_finite_float(value, "Latitude")
    if number < -90 or number > 90:
        raise serializers.ValidationError("Latitude must be between -90 and 90.")
    return number


def validate_longitude(value):
    """
    Validate longitude is within [-180, 180].

    Returns:
        float: Validated longitude
    """
    number = _as_finite_float(value, "Longitude")
    if number < -180 or number > 180:
        raise serializers.ValidationError("Longitude must be between -180 and 180.")
    return number


def validate_coordinates_pair(value):
    """
    Validate a [longitude, latitude] pair.

    Raises:
        serializers.ValidationError: If the value is not a two-item list of
            in-range numbers

    Returns:
        list: [longitude, latitude] as floats
    """
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise serializers.ValidationError("Coordinates must be an array [longitude, latitude].")
    lng, lat = value
    return [validate_longitude(lng), validate_latitude(lat)]
