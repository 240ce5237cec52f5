"""
Reward redemption views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response
from ..services import RewardRedemptionService
from ..serializers import RewardSummarySerializer, RewardRedemptionSerializer


class RewardRedeemView(APIView):
    """Spend the caller's points on a reward"""
    permission_classes = [IsAuthenticated]

    def post(self, request, reward_id):
        result = RewardRedemptionService.redeem(request.user.id, reward_id)
        return success_response({
            'reward': RewardSummarySerializer(result.reward).data,
            'user': {'remainingPoints': result.remaining_points},
        }, 'Reward redeemed successfully!')


class RedemptionUseView(APIView):
    """Mark one of the caller's redeemed rewards as used"""
    permission_classes = [IsAuthenticated]

    def post(self, request, redemption_id):
        redemption = RewardRedemptionService.mark_used(request.user, redemption_id)
        return success_response(RewardRedemptionSerializer(redemption).data, 'Reward marked as used')
