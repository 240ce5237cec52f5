"""
Place serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .place_serializers import (
    PlaceSerializer, PlaceWriteSerializer, NearbyPlacesQuerySerializer
)

__all__ = [
    'PlaceSerializer',
    'PlaceWriteSerializer',
    'NearbyPlacesQuerySerializer',
]
