"""
Reward views module.

All views are exported from this module to maintain backward compatibility.
"""
from .reward_views import RewardListView, RewardDetailView, AdminRewardListView
from .redemption_views import RewardRedeemView, RedemptionUseView

__all__ = [
    'RewardListView',
    'RewardDetailView',
    'AdminRewardListView',
    'RewardRedeemView',
    'RedemptionUseView',
]
