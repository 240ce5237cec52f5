"""
Common validators module.

All validators are exported from this module to maintain backward compatibility.
"""
from .coordinate_validators import (
    validate_latitude, validate_longitude, validate_coordinates_pair
)
from .points_validators import validate_points_cost

__all__ = [
    'validate_latitude',
    'validate_longitude',
    'validate_coordinates_pair',
    'validate_points_cost',
]
