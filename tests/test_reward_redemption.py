"""
Tests for reward redemption: precondition order, debit and snapshot.
"""
from datetime import timedelta

import pytest
from hypothesis import given, strategies as st, settings
from hypothesis.extra.django import TestCase
from django.utils import timezone

from apps.common.exceptions import BusinessRuleViolation, ResourceNotFound
from apps.points.exceptions import InsufficientPointsError
from apps.points.models import PointsTransaction
from apps.points.services import PointsService
from apps.rewards.models import RewardRedemption
from apps.rewards.services import RewardRedemptionService
from tests.factories import UserFactory, RewardFactory, grant_points


@pytest.mark.django_db
class TestRewardRedemption(TestCase):

    def setUp(self):
        self.user = UserFactory()
        self.reward = RewardFactory(name='Free Coffee', points_cost=30)

    def test_redeem_debits_and_snapshots(self):
        grant_points(self.user, 50)

        result = RewardRedemptionService.redeem(self.user.id, self.reward.id)

        self.assertEqual(result.remaining_points, 20)
        self.assertEqual(PointsService.get_balance(self.user), 20)

        entry = PointsTransaction.objects.filter(account__user=self.user).first()
        self.assertEqual(entry.amount, -30)
        self.assertEqual(entry.reason, 'Redeemed reward: Free Coffee')
        self.assertEqual(entry.transaction_type, 'reward_redemption')

        snapshot = RewardRedemption.objects.get(user=self.user)
        self.assertEqual(snapshot.name, 'Free Coffee')
        self.assertEqual(snapshot.points_cost, 30)
        self.assertFalse(snapshot.used)

    def test_second_redemption_insufficient(self):
        grant_points(self.user, 50)
        RewardRedemptionService.redeem(self.user.id, self.reward.id)

        with self.assertRaises(InsufficientPointsError) as ctx:
            RewardRedemptionService.redeem(self.user.id, self.reward.id)

        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, 'Insufficient points. You need 30 points but have 20.')
        self.assertEqual(PointsService.get_balance(self.user), 20)
        self.assertEqual(RewardRedemption.objects.filter(user=self.user).count(), 1)

    def test_not_idempotent(self):
        grant_points(self.user, 100)
        RewardRedemptionService.redeem(self.user.id, self.reward.id)
        RewardRedemptionService.redeem(self.user.id, self.reward.id)
        self.assertEqual(PointsService.get_balance(self.user), 40)
        self.assertEqual(RewardRedemption.objects.filter(user=self.user).count(), 2)

    def test_missing_reward(self):
        with self.assertRaises(ResourceNotFound) as ctx:
            RewardRedemptionService.redeem(self.user.id, 999999)
        self.assertEqual(ctx.exception.message, 'Reward not found')

    def test_inactive_checked_before_expiry_and_user(self):
        reward = RewardFactory(is_active=False, valid_until=timezone.now() - timedelta(days=1))
        with self.assertRaises(BusinessRuleViolation) as ctx:
            RewardRedemptionService.redeem(999999, reward.id)
        self.assertEqual(ctx.exception.message, 'Reward is not available')

    def test_expired_checked_before_user(self):
        reward = RewardFactory(valid_until=timezone.now() - timedelta(minutes=1))
        with self.assertRaises(BusinessRuleViolation) as ctx:
            RewardRedemptionService.redeem(999999, reward.id)
        self.assertEqual(ctx.exception.message, 'Reward has expired')

    def test_expiry_boundary(self):
        now = timezone.now()
        reward = RewardFactory(points_cost=10, valid_until=now)
        grant_points(self.user, 50)
        with self.assertRaises(BusinessRuleViolation):
            RewardRedemptionService.redeem(self.user.id, reward.id, now=now)
        result = RewardRedemptionService.redeem(self.user.id, reward.id, now=now - timedelta(seconds=1))
        self.assertEqual(result.remaining_points, 40)

    def test_missing_user_checked_before_balance(self):
        with self.assertRaises(ResourceNotFound) as ctx:
            RewardRedemptionService.redeem(999999, self.reward.id)
        self.assertEqual(ctx.exception.message, 'User not found')

    def test_zero_balance(self):
        with self.assertRaises(InsufficientPointsError) as ctx:
            RewardRedemptionService.redeem(self.user.id, self.reward.id)
        self.assertEqual(ctx.exception.message, 'Insufficient points. You need 30 points but have 0.')
        self.assertFalse(PointsTransaction.objects.filter(account__user=self.user).exists())

    def test_mark_used(self):
        grant_points(self.user, 30)
        redemption = RewardRedemptionService.redeem(self.user.id, self.reward.id).redemption

        used = RewardRedemptionService.mark_used(self.user, redemption.id)
        self.assertTrue(used.used)
        self.assertIsNotNone(used.used_at)

        with self.assertRaises(BusinessRuleViolation) as ctx:
            RewardRedemptionService.mark_used(self.user, redemption.id)
        self.assertEqual(ctx.exception.message, 'Reward has already been used')

    def test_mark_used_other_users_redemption(self):
        grant_points(self.user, 30)
        redemption = RewardRedemptionService.redeem(self.user.id, self.reward.id).redemption
        with self.assertRaises(ResourceNotFound):
            RewardRedemptionService.mark_used(UserFactory(), redemption.id)

    @given(balance=st.integers(min_value=0, max_value=500), cost=st.integers(min_value=1, max_value=500))
    @settings(max_examples=50, deadline=None)
    def test_redeem_iff_balance_covers_cost(self, balance, cost):
        user = UserFactory()
        reward = RewardFactory(points_cost=cost)
        if balance:
            grant_points(user, balance)

        if balance >= cost:
            result = RewardRedemptionService.redeem(user.id, reward.id)
            self.assertEqual(result.remaining_points, balance - cost)
        else:
            with self.assertRaises(InsufficientPointsError):
                RewardRedemptionService.redeem(user.id, reward.id)
            self.assertEqual(PointsService.get_balance(user), balance)
