"""
User views module.

All views are exported from this module to maintain backward compatibility.
"""
from .auth_views import RegisterView, PasswordLoginView, LogoutView
from .profile_views import UserProfileView, LeaderboardView, UserRewardHistoryView

__all__ = [
    'RegisterView',
    'PasswordLoginView',
    'LogoutView',
    'UserProfileView',
    'LeaderboardView',
    'UserRewardHistoryView',
]
