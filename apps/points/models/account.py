import logging

from django.db import models, transaction
from django.db.models import F, Q
from django.conf import settings
from django.utils import timezone

from ..exceptions import InsufficientPointsError

ledger_logger = logging.getLogger('points.ledger')


class PointsAccount(models.Model):
    """Points account holding a user's running balance"""
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='points_account')
    total_points = models.IntegerField(default=0)
    lifetime_earned = models.IntegerField(default=0)  # Total points ever credited
    lifetime_redeemed = models.IntegerField(default=0)  # Total points ever debited
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'points_accounts'
        verbose_name = 'Points Account'
        verbose_name_plural = 'Points Accounts'
        constraints = [
            models.CheckConstraint(
                condition=Q(total_points__gte=0),
                name='points_account_total_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.user.username} - {self.total_points} points"

    @transaction.atomic
    def apply_delta(self, amount, reason, transaction_type, reference_id=None):
        """
        Apply a signed points change and append its ledger entry.

        This is the only place a balance changes. The row is locked for the
        rest of the surrounding transaction and the update itself is
        conditional (``total_points >= -amount``), so a debit computed from a
        stale read can never push the balance below zero.

        Args:
            amount: Non-zero signed integer; positive credits, negative debits
            reason: Human-readable reason stored on the ledger entry
            transaction_type: One of PointsTransaction.TRANSACTION_TYPES
            reference_id: Optional id of the checkin, reward or place involved

        Raises:
            ValueError: If amount is zero or not an integer
            InsufficientPointsError: If a debit exceeds the current balance

        Returns:
            PointsTransaction: The ledger entry that was written
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount == 0:
            raise ValueError("Points delta must be a non-zero integer")

        # Held until the surrounding transaction ends
        PointsAccount.objects.select_for_update().get(pk=self.pk)

        updates = {
            'total_points': F('total_points') + amount,
            'updated_at': timezone.now(),
        }
        if amount > 0:
            updates['lifetime_earned'] = F('lifetime_earned') + amount
        else:
            updates['lifetime_redeemed'] = F('lifetime_redeemed') - amount

        matched = PointsAccount.objects.filter(
            pk=self.pk,
            total_points__gte=max(-amount, 0)
        ).update(**updates)

        if not matched:
            # Backends without row locks may have moved the balance since the locked read
            available = PointsAccount.objects.values_list('total_points', flat=True).get(pk=self.pk)
            ledger_logger.info(f"Rejected debit of {-amount} for user {self.user_id}: balance {available}")
            raise InsufficientPointsError(required=-amount, available=available)

        self.refresh_from_db(fields=['total_points', 'lifetime_earned', 'lifetime_redeemed', 'updated_at'])

        from .transaction import PointsTransaction
        entry = PointsTransaction.objects.create(
            account=self,
            transaction_type=transaction_type,
            amount=amount,
            balance_after=self.total_points,
            reason=reason[:200],
            reference_id=reference_id
        )

        ledger_logger.info(
            f"user={self.user_id} delta={amount:+d} balance={self.total_points} "
            f"type={transaction_type} ref={reference_id} reason={reason!r}"
        )
        return entry
