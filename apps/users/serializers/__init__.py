"""
User serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .user_serializers import (
    UserRegistrationSerializer, LoginSerializer, UserProfileSerializer,
    UserUpdateSerializer, LeaderboardEntrySerializer
)

__all__ = [
    'UserRegistrationSerializer',
    'LoginSerializer',
    'UserProfileSerializer',
    'UserUpdateSerializer',
    'LeaderboardEntrySerializer',
]
