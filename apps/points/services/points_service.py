"""
Points service: the ledger-backed credit/debit API used by every rewards flow.
"""
import logging

from django.db import transaction
from django.db.models import Sum, Count, Min, Max

from ..models import PointsAccount, PointsTransaction

logger = logging.getLogger(__name__)


class PointsService:
    """Service for handling points operations"""

    @staticmethod
    def get_or_create_account(user):
        """Get or create points account for user"""
        account, created = PointsAccount.objects.get_or_create(user=user)
        if created:
            logger.info(f"Created points account for user {user.pk}")
        return account

    @staticmethod
    def lock_account(user):
        """
        Fetch the user's account with a row lock held until the current
        transaction ends. Must be called inside ``transaction.atomic``.
        """
        account = PointsService.get_or_create_account(user)
        return PointsAccount.objects.select_for_update().select_related('user').get(pk=account.pk)

    @staticmethod
    @transaction.atomic
    def credit(user, amount, reason, transaction_type, reference_id=None):
        """Add points to the user's balance and record the ledger entry"""
        if amount <= 0:
            raise ValueError("Points amount must be positive")
        account = PointsService.lock_account(user)
        return account.apply_delta(amount, reason, transaction_type, reference_id=reference_id)

    @staticmethod
    @transaction.atomic
    def debit(user, amount, reason, transaction_type, reference_id=None):
        """Remove points from the user's balance; fails if the balance is short"""
        if amount <= 0:
            raise ValueError("Points amount must be positive")
        account = PointsService.lock_account(user)
        return account.apply_delta(-amount, reason, transaction_type, reference_id=reference_id)

    @staticmethod
    def get_balance(user):
        return PointsService.get_or_create_account(user).total_points

    @staticmethod
    def get_history(user, transaction_type=None):
        """Ledger entries for a user, newest first"""
        entries = PointsTransaction.objects.filter(account__user=user)
        if transaction_type:
            entries = entries.filter(transaction_type=transaction_type)
        return entries

    @staticmethod
    def get_statistics(user):
        """Sum, count and first/last timestamps over the user's ledger"""
        stats = PointsTransaction.objects.filter(account__user=user).aggregate(
            total_earned=Sum('amount'),
            total_transactions=Count('id'),
            first_reward=Min('created_at'),
            last_reward=Max('created_at'),
        )
        stats['total_earned'] = stats['total_earned'] or 0
        return stats

    @staticmethod
    def reconcile(account):
        """
        Compare an account's balance with the sum of its ledger entries.

        Returns:
            dict: balance, ledger_total and drift (balance - ledger_total)
        """
        ledger_total = account.transactions.aggregate(total=Sum('amount'))['total'] or 0
        return {
            'user_id': account.user_id,
            'balance': account.total_points,
            'ledger_total': ledger_total,
            'drift': account.total_points - ledger_total,
        }

    @staticmethod
    def find_unreconciled(accounts=None):
        """Yield reconciliation results for accounts whose ledger and balance disagree"""
        if accounts is None:
            accounts = PointsAccount.objects.all()
        for account in accounts.iterator():
            result = PointsService.reconcile(account)
            if result['drift']:
                logger.warning(
                    f"Points drift for user {result['user_id']}: balance {result['balance']}, "
                    f"ledger {result['ledger_total']}"
                )
                yield result
