"""
Redeemed reward snapshot serializers.
"""
from rest_framework import serializers
from ..models import RewardRedemption


class RewardRedemptionSerializer(serializers.ModelSerializer):
    """
    Serializer for a user's redeemed rewards.
    Used for: GET /api/users/profile/, POST /api/rewards/redemptions/{id}/use/
    """
    rewardId = serializers.IntegerField(source='reward_id', read_only=True)
    shortDescription = serializers.CharField(source='short_description', read_only=True)
    pointsCost = serializers.IntegerField(source='points_cost', read_only=True)
    redeemedAt = serializers.DateTimeField(source='redeemed_at', read_only=True)
    usedAt = serializers.DateTimeField(source='used_at', read_only=True)

    class Meta:
        model = RewardRedemption
        fields = ['id', 'rewardId', 'name', 'shortDescription', 'pointsCost', 'redeemedAt', 'used', 'usedAt']
        read_only_fields = fields
