"""
Check-in services module.

All services are exported from this module to maintain backward compatibility.
"""
from .checkin_service import CheckinService, CheckinResult

__all__ = [
    'CheckinService',
    'CheckinResult',
]
