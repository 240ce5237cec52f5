"""
Reward services module.

All services are exported from this module to maintain backward compatibility.
"""
from .redemption_service import RewardRedemptionService, RewardRedemptionResult

__all__ = [
    'RewardRedemptionService',
    'RewardRedemptionResult',
]
