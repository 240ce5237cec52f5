from django.db import models


class PointsTransaction(models.Model):
    """Append-only ledger entry for one signed points change"""
    TRANSACTION_TYPES = [
        ('checkin', 'Check-in'),
        ('place_redemption', 'Place Redemption'),
        ('reward_redemption', 'Reward Redemption'),
        ('adjustment', 'Manual Adjustment'),
    ]

    account = models.ForeignKey('PointsAccount', on_delete=models.CASCADE, related_name='transactions')
    transaction_type = models.CharField(max_length=20, choices=TRANSACTION_TYPES)
    amount = models.IntegerField()  # Positive for credits, negative for debits
    balance_after = models.IntegerField()  # Account balance after this transaction
    reason = models.CharField(max_length=200)
    reference_id = models.CharField(max_length=100, blank=True, null=True)  # checkin_12, reward_3, place_7
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'points_transactions'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['account', '-created_at'], name='points_tx_account_created'),
        ]
        verbose_name = 'Points Transaction'
        verbose_name_plural = 'Points Transactions'

    def __str__(self):
        return f"{self.account.user.username} - {self.amount:+d} points ({self.reason})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Ledger entries are immutable")
        super().save(*args, **kwargs)

