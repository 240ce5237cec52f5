"""
Check-in verification: distance band, one visit per place per day, and the
points award that goes with it.
"""
import logging
from dataclasses import dataclass

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.common.exceptions import BusinessRuleViolation, ConflictError
from apps.common.geo import haversine_distance, round_distance
from apps.places.services import PlaceService
from apps.points.services import PointsService
from apps.users.services import UserService
from ..models import Checkin

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = 'Already checked in at this place today'


@dataclass
class CheckinResult:
    checkin: Checkin
    place: object
    distance: float
    points_awarded: int
    total_points: int


class CheckinService:
    """Verifies and records check-ins"""

    TRANSACTION_TYPE = 'checkin'

    @staticmethod
    def distance_band():
        config = settings.REWARDS_CONFIG
        return config['CHECKIN_MIN_DISTANCE_METERS'], config['CHECKIN_MAX_DISTANCE_METERS']

    @staticmethod
    def is_within_band(distance):
        """True when min < distance <= max (both bounds in meters)"""
        minimum, maximum = CheckinService.distance_band()
        return minimum < distance <= maximum

    @staticmethod
    def check_band(distance):
        """Raise BusinessRuleViolation describing which side of the band was missed"""
        minimum, maximum = CheckinService.distance_band()
        shown = round_distance(distance)
        if distance <= minimum:
            raise BusinessRuleViolation(
                f'Too close to place. You are {shown}m away. '
                f'Must be more than {minimum:g} meters away.'
            )
        if distance > maximum:
            raise BusinessRuleViolation(
                f'Too far from place. You are {shown}m away. '
                f'Must be within {maximum:g} meters.'
            )

    @staticmethod
    def check_in(user_id, place_id, longitude, latitude, now=None):
        """
        Verify a check-in and award its points.

        Order of checks: place exists, user exists, no check-in at this place
        today, distance inside the band. The check-in row, the balance change
        and the ledger entry commit together or not at all.

        Args:
            user_id: Checking-in user
            place_id: Target place
            longitude, latitude: Reported position of the user
            now: Override for the current time (tests)

        Returns:
            CheckinResult
        """
        now = now or timezone.now()
        today = timezone.localdate(now)

        place = PlaceService.get_place(place_id)
        user = UserService.get_user(user_id)

        with transaction.atomic():
            # Serializes concurrent check-ins of the same user
            account = PointsService.lock_account(user)

            if Checkin.objects.filter(user=user, place=place, checkin_date=today).exists():
                raise ConflictError(DUPLICATE_MESSAGE)

            distance = haversine_distance(latitude, longitude, place.latitude, place.longitude)
            CheckinService.check_band(distance)

            try:
                with transaction.atomic():
                    checkin = Checkin.objects.create(
                        user=user,
                        place=place,
                        longitude=longitude,
                        latitude=latitude,
                        distance=distance,
                        checkin_date=today,
                        timestamp=now,
                    )
            except IntegrityError:
                raise ConflictError(DUPLICATE_MESSAGE)

            entry = account.apply_delta(
                settings.REWARDS_CONFIG['CHECKIN_POINTS'],
                reason=f'Check-in at {place.name}',
                transaction_type=CheckinService.TRANSACTION_TYPE,
                reference_id=f'checkin_{checkin.pk}',
            )

        logger.info(f"User {user.pk} checked in at place {place.pk} ({distance:.2f}m)")
        return CheckinResult(
            checkin=checkin,
            place=place,
            distance=distance,
            points_awarded=entry.amount,
            total_points=entry.balance_after,
        )

    @staticmethod
    def list_for_user(user, limit=None):
        """Newest check-ins first, capped at CHECKIN_HISTORY_LIMIT"""
        limit = limit or settings.REWARDS_CONFIG['CHECKIN_HISTORY_LIMIT']
        return Checkin.objects.filter(user=user).select_related('place')[:limit]
