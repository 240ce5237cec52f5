"""
Property-based tests for check-in verification.
"""
from datetime import datetime, timedelta, timezone as dt_timezone
from unittest.mock import patch

import pytest
from hypothesis import given, strategies as st, settings
from hypothesis.extra.django import TestCase
from django.test import override_settings
from django.utils import timezone

from apps.checkins.models import Checkin
from apps.checkins.services import CheckinService
from apps.common.exceptions import BusinessRuleViolation, ConflictError, ResourceNotFound
from apps.points.models import PointsTransaction
from apps.points.services import PointsService
from tests.factories import UserFactory, PlaceFactory, point_north_of

DISTANCE_TARGET = 'apps.checkins.services.checkin_service.haversine_distance'
NOON = datetime(2024, 3, 15, 12, 0, tzinfo=dt_timezone.utc)


class TestDistanceBand:
    """10 < d <= 20, evaluated on the unrounded distance"""

    @pytest.mark.parametrize('distance, inside', [
        (0, False),
        (9.99, False),
        (10, False),
        (10.0001, True),
        (15, True),
        (20, True),
        (20.0001, False),
        (500, False),
    ])
    def test_boundaries(self, distance, inside):
        assert CheckinService.is_within_band(distance) is inside

    @given(distance=st.floats(min_value=0, max_value=100, allow_nan=False))
    @settings(max_examples=200, deadline=None)
    def test_band_matches_check(self, distance):
        if CheckinService.is_within_band(distance):
            CheckinService.check_band(distance)
        else:
            with pytest.raises(BusinessRuleViolation):
                CheckinService.check_band(distance)


@pytest.mark.django_db
class TestCheckinService(TestCase):

    def setUp(self):
        self.user = UserFactory()
        self.place = PlaceFactory(name='Central Fountain')

    def _check_in(self, distance=15, now=NOON, place=None):
        place = place or self.place
        lng, lat = point_north_of(place, distance)
        return CheckinService.check_in(self.user.id, place.id, lng, lat, now=now)

    def test_successful_checkin_awards_points(self):
        result = self._check_in(15)

        self.assertEqual(result.points_awarded, 10)
        self.assertEqual(result.total_points, 10)
        self.assertAlmostEqual(result.distance, 15, places=3)
        self.assertEqual(result.checkin.checkin_date, NOON.date())

        entry = PointsTransaction.objects.get(account__user=self.user)
        self.assertEqual(entry.amount, 10)
        self.assertEqual(entry.transaction_type, 'checkin')
        self.assertEqual(entry.reason, 'Check-in at Central Fountain')
        self.assertEqual(entry.reference_id, f'checkin_{result.checkin.pk}')

    def test_boundary_distances(self):
        cases = [(10, False), (10.0001, True), (20, True), (20.0001, False)]
        for distance, accepted in cases:
            place = PlaceFactory()
            with patch(DISTANCE_TARGET, return_value=distance):
                if accepted:
                    result = self._check_in(place=place)
                    self.assertEqual(result.points_awarded, 10)
                else:
                    with self.assertRaises(BusinessRuleViolation):
                        self._check_in(place=place)
        self.assertEqual(PointsService.get_balance(self.user), 20)
        self.assertEqual(Checkin.objects.filter(user=self.user).count(), 2)

    def test_too_close_message(self):
        with patch(DISTANCE_TARGET, return_value=4.6):
            with self.assertRaises(BusinessRuleViolation) as ctx:
                self._check_in()
        self.assertEqual(
            ctx.exception.message,
            'Too close to place. You are 5m away. Must be more than 10 meters away.'
        )

    def test_too_far_message(self):
        with patch(DISTANCE_TARGET, return_value=20.0001):
            with self.assertRaises(BusinessRuleViolation) as ctx:
                self._check_in()
        self.assertEqual(
            ctx.exception.message,
            'Too far from place. You are 20m away. Must be within 20 meters.'
        )

    def test_rejected_checkin_changes_nothing(self):
        with self.assertRaises(BusinessRuleViolation):
            self._check_in(distance=150)
        self.assertFalse(Checkin.objects.exists())
        self.assertEqual(PointsService.get_balance(self.user), 0)
        self.assertFalse(PointsTransaction.objects.exists())

    def test_second_checkin_same_day_conflicts(self):
        self._check_in(now=NOON.replace(hour=0, minute=5))
        with self.assertRaises(ConflictError) as ctx:
            self._check_in(now=NOON.replace(hour=23, minute=55))
        self.assertEqual(ctx.exception.status_code, 409)
        self.assertEqual(ctx.exception.message, 'Already checked in at this place today')
        self.assertEqual(PointsService.get_balance(self.user), 10)

    def test_duplicate_reported_before_distance(self):
        self._check_in()
        with self.assertRaises(ConflictError):
            self._check_in(distance=500)

    def test_next_day_allowed(self):
        self._check_in(now=NOON)
        self._check_in(now=NOON + timedelta(days=1))
        self.assertEqual(PointsService.get_balance(self.user), 20)

    def test_same_day_other_place_allowed(self):
        self._check_in()
        self._check_in(place=PlaceFactory())
        self.assertEqual(PointsService.get_balance(self.user), 20)

    @override_settings(TIME_ZONE='America/New_York')
    def test_calendar_day_is_server_local(self):
        # 03:00 UTC on the 16th is still the 15th in New York
        late = datetime(2024, 3, 16, 3, 0, tzinfo=dt_timezone.utc)
        result = self._check_in(now=late)
        self.assertEqual(result.checkin.checkin_date, timezone.localdate(late))
        self.assertEqual(result.checkin.checkin_date.day, 15)
        with self.assertRaises(ConflictError):
            self._check_in(now=NOON)

    def test_unknown_place(self):
        with self.assertRaises(ResourceNotFound) as ctx:
            CheckinService.check_in(self.user.id, 999999, 0, 0, now=NOON)
        self.assertEqual(ctx.exception.message, 'Place not found')

    def test_unknown_user(self):
        lng, lat = point_north_of(self.place, 15)
        with self.assertRaises(ResourceNotFound) as ctx:
            CheckinService.check_in(999999, self.place.id, lng, lat, now=NOON)
        self.assertEqual(ctx.exception.message, 'User not found')

    @given(days=st.integers(min_value=1, max_value=8))
    @settings(max_examples=10, deadline=None)
    def test_n_checkins_on_distinct_days(self, days):
        user = UserFactory()
        place = PlaceFactory()
        lng, lat = point_north_of(place, 12)
        for offset in range(days):
            CheckinService.check_in(user.id, place.id, lng, lat, now=NOON + timedelta(days=offset))
        self.assertEqual(PointsService.get_balance(user), 10 * days)
        self.assertEqual(Checkin.objects.filter(user=user).count(), days)

    def test_history_newest_first(self):
        first = self._check_in(now=NOON).checkin
        second = self._check_in(now=NOON + timedelta(days=1)).checkin
        history = list(CheckinService.list_for_user(self.user))
        self.assertEqual([c.pk for c in history], [second.pk, first.pk])
