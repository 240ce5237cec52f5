"""
Place redemption: grant points for visiting a redemption-eligible place.
"""
from dataclasses import dataclass

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.common.exceptions import BusinessRuleViolation, ConflictError
from apps.common.utils import local_day_bounds
from apps.points.models import PointsTransaction
from apps.points.services import PointsService
from apps.users.services import UserService
from .place_service import PlaceService


@dataclass
class PlaceRedemptionResult:
    place: object
    points_awarded: int
    total_points: int
    entry: PointsTransaction


class PlaceRedemptionService:
    """Credits a place's redemption points to a user through the ledger"""

    TRANSACTION_TYPE = 'place_redemption'

    @staticmethod
    def reference_for(place):
        return f'place_{place.pk}'

    @staticmethod
    @transaction.atomic
    def redeem(user_id, place_id, now=None):
        """
        Redeem points at an eligible place.

        Checks, first failure wins: place exists, place is eligible, user
        exists, and (when PLACE_REDEMPTION_DAILY_LIMIT is set) the user has not
        reached the per-day cap for this place.
        """
        place = PlaceService.get_place(place_id)
        if not place.is_redeemable:
            raise BusinessRuleViolation('Place not eligible for redemption')

        user = UserService.get_user(user_id)
        account = PointsService.lock_account(user)

        reference_id = PlaceRedemptionService.reference_for(place)
        daily_limit = settings.REWARDS_CONFIG.get('PLACE_REDEMPTION_DAILY_LIMIT')
        if daily_limit is not None:
            start, end = local_day_bounds(now or timezone.now())
            redeemed_today = account.transactions.filter(
                transaction_type=PlaceRedemptionService.TRANSACTION_TYPE,
                reference_id=reference_id,
                created_at__gte=start,
                created_at__lt=end,
            ).count()
            if redeemed_today >= daily_limit:
                raise ConflictError('Daily redemption limit reached for this place')

        entry = account.apply_delta(
            place.redemption_points_cost,
            reason=f'Redeemed at {place.name}',
            transaction_type=PlaceRedemptionService.TRANSACTION_TYPE,
            reference_id=reference_id,
        )
        return PlaceRedemptionResult(
            place=place,
            points_awarded=entry.amount,
            total_points=entry.balance_after,
            entry=entry,
        )
