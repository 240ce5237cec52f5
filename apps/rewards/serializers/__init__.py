"""
Reward serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .reward_serializers import RewardSerializer, RewardSummarySerializer
from .redemption_serializers import RewardRedemptionSerializer

__all__ = [
    'RewardSerializer',
    'RewardSummarySerializer',
    'RewardRedemptionSerializer',
]
