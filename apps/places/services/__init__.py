"""
Place services module.

All services are exported from this module to maintain backward compatibility.
"""
from .place_service import PlaceService
from .place_redemption_service import PlaceRedemptionService, PlaceRedemptionResult

__all__ = [
    'PlaceService',
    'PlaceRedemptionService',
    'PlaceRedemptionResult',
]
