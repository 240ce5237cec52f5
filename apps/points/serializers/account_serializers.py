"""
Points account serializers.
"""
from rest_framework import serializers
from ..models import PointsAccount


class PointsAccountSerializer(serializers.ModelSerializer):
    """
    Serializer for the caller's points balance.
    Used for: GET /api/points/balance/
    """
    totalPoints = serializers.IntegerField(source='total_points', read_only=True)
    lifetimeEarned = serializers.IntegerField(source='lifetime_earned', read_only=True)
    lifetimeRedeemed = serializers.IntegerField(source='lifetime_redeemed', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = PointsAccount
        fields = ['totalPoints', 'lifetimeEarned', 'lifetimeRedeemed', 'updatedAt']
        read_only_fields = fields
