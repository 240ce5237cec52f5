"""
Check-in serializers module.
"""
from .checkin_serializers import CheckinCreateSerializer, CheckinSerializer

__all__ = [
    'CheckinCreateSerializer',
    'CheckinSerializer',
]
