"""
Ledger entry and ledger statistics serializers.
"""
from rest_framework import serializers
from ..models import PointsTransaction


class PointsTransactionSerializer(serializers.ModelSerializer):
    """
    Serializer for ledger entries.
    Used for: GET /api/points/transactions/, GET /api/users/{id}/rewards/
    """
    type = serializers.CharField(source='transaction_type', read_only=True)
    typeDisplay = serializers.CharField(source='get_transaction_type_display', read_only=True)
    balanceAfter = serializers.IntegerField(source='balance_after', read_only=True)
    referenceId = serializers.CharField(source='reference_id', read_only=True)
    timestamp = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = PointsTransaction
        fields = ['id', 'amount', 'reason', 'type', 'typeDisplay', 'balanceAfter', 'referenceId', 'timestamp']
        read_only_fields = fields


class PointsStatisticsSerializer(serializers.Serializer):
    """Serializer for ledger statistics of one user"""
    totalPoints = serializers.IntegerField(source='total_points')
    totalEarned = serializers.IntegerField(source='total_earned')
    totalTransactions = serializers.IntegerField(source='total_transactions')
    firstReward = serializers.DateTimeField(source='first_reward', allow_null=True)
    lastReward = serializers.DateTimeField(source='last_reward', allow_null=True)
