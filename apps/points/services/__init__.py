"""
Points services module.

All services are exported from this module to maintain backward compatibility.
"""
from .points_service import PointsService

__all__ = [
    'PointsService',
]
