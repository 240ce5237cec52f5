"""
User lookups and profile queries shared by the rewards flows.
"""
from apps.common.exceptions import ResourceNotFound
from ..models import User


class UserService:
    """Service for user lookups"""

    @staticmethod
    def get_user(user_id):
        """Load a user or raise ResourceNotFound"""
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            raise ResourceNotFound('User not found')

    @staticmethod
    def get_leaderboard(size):
        """Top users by points balance, highest first"""
        return (
            User.objects.filter(is_active=True)
            .select_related('points_account')
            .order_by('-points_account__total_points', 'id')[:size]
        )
