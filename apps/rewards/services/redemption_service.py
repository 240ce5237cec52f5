"""
Reward redemption: exchange points for a catalog reward.
"""
import logging
from dataclasses import dataclass

from django.db import transaction
from django.utils import timezone

from apps.common.exceptions import BusinessRuleViolation, ResourceNotFound
from apps.points.services import PointsService
from apps.users.services import UserService
from ..models import Reward, RewardRedemption

logger = logging.getLogger(__name__)


@dataclass
class RewardRedemptionResult:
    reward: Reward
    redemption: RewardRedemption
    remaining_points: int


class RewardRedemptionService:
    """Service for redeeming catalog rewards"""

    TRANSACTION_TYPE = 'reward_redemption'

    @staticmethod
    def get_reward(reward_id):
        try:
            return Reward.objects.get(pk=reward_id)
        except Reward.DoesNotExist:
            raise ResourceNotFound('Reward not found')

    @staticmethod
    @transaction.atomic
    def redeem(user_id, reward_id, now=None):
        """
        Redeem a reward for a user.

        Preconditions are checked in order and the first failure wins: reward
        exists, reward is active, reward has not expired, user exists, user
        balance covers the cost. The debit, its ledger entry and the
        redemption snapshot commit together. Repeating the call redeems again.
        """
        now = now or timezone.now()

        reward = RewardRedemptionService.get_reward(reward_id)
        if not reward.is_active:
            raise BusinessRuleViolation('Reward is not available')
        if reward.is_expired(now):
            raise BusinessRuleViolation('Reward has expired')

        user = UserService.get_user(user_id)

        entry = PointsService.debit(
            user,
            reward.points_cost,
            reason=f'Redeemed reward: {reward.name}',
            transaction_type=RewardRedemptionService.TRANSACTION_TYPE,
            reference_id=f'reward_{reward.pk}',
        )
        redemption = RewardRedemption.snapshot(user, reward, redeemed_at=now)

        logger.info(f"User {user.pk} redeemed reward {reward.pk} for {reward.points_cost} points")
        return RewardRedemptionResult(
            reward=reward,
            redemption=redemption,
            remaining_points=entry.balance_after,
        )

    @staticmethod
    @transaction.atomic
    def mark_used(user, redemption_id, now=None):
        """Mark one of the user's redeemed rewards as used"""
        try:
            redemption = RewardRedemption.objects.select_for_update().get(pk=redemption_id, user=user)
        except RewardRedemption.DoesNotExist:
            raise ResourceNotFound('Redeemed reward not found')

        if redemption.used:
            raise BusinessRuleViolation('Reward has already been used')

        redemption.used = True
        redemption.used_at = now or timezone.now()
        redemption.save(update_fields=['used', 'used_at'])
        return redemption
