"""
User profile, leaderboard and reward history views.
"""
from django.conf import settings
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.exceptions import PermissionDenied

from apps.common.utils import success_response, error_response, parse_pagination, build_pagination
from apps.points.services import PointsService
from apps.points.serializers import PointsTransactionSerializer, PointsStatisticsSerializer
from ..services import UserService
from ..serializers import UserProfileSerializer, UserUpdateSerializer, LeaderboardEntrySerializer


class UserProfileView(APIView):
    """Caller's own profile"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return success_response(
            UserProfileSerializer(request.user, context={'request': request}).data,
            'Profile retrieved successfully'
        )

    def put(self, request):
        serializer = UserUpdateSerializer(request.user, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Profile update failed', serializer.errors)
        user = serializer.save()
        return success_response(
            UserProfileSerializer(user, context={'request': request}).data,
            'Profile updated successfully'
        )

    def patch(self, request):
        return self.put(request)


class LeaderboardView(APIView):
    """Top users by points balance"""
    permission_classes = [AllowAny]

    def get(self, request):
        users = UserService.get_leaderboard(settings.REWARDS_CONFIG['LEADERBOARD_SIZE'])
        return success_response(LeaderboardEntrySerializer(users, many=True).data, 'Leaderboard retrieved successfully')


class UserRewardHistoryView(APIView):
    """A user's balance, ledger statistics and ledger page (self or admin only)"""
    permission_classes = [IsAuthenticated]

    def get(self, request, user_id):
        if request.user.pk != user_id and not request.user.is_admin:
            raise PermissionDenied('You can only view your own reward history')

        user = UserService.get_user(user_id)
        stats = PointsService.get_statistics(user)
        stats['total_points'] = PointsService.get_balance(user)

        page, limit = parse_pagination(request)
        history = PointsService.get_history(user)
        total = history.count()
        start = (page - 1) * limit

        return success_response({
            'user': {'id': user.pk, 'username': user.username, 'totalPoints': stats['total_points']},
            'statistics': PointsStatisticsSerializer(stats).data,
            'history': PointsTransactionSerializer(history[start:start + limit], many=True).data,
            'pagination': build_pagination(page, limit, total),
        }, 'Reward history retrieved successfully')
