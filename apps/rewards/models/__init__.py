"""
Reward models module.

All models are exported from this module to maintain backward compatibility.
"""
from .reward import Reward
from .redemption import RewardRedemption

__all__ = [
    'Reward',
    'RewardRedemption',
]
