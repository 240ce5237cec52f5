from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone


class Reward(models.Model):
    """Catalog entry users can buy with points"""
    REWARD_TYPES = [
        ('voucher', 'Voucher'),
        ('discount', 'Discount'),
        ('coupon', 'Coupon'),
        ('gift', 'Gift'),
        ('experience', 'Experience'),
        ('other', 'Other'),
    ]

    name = models.CharField(max_length=100, db_index=True)
    short_description = models.CharField(max_length=200)
    description = models.TextField(max_length=1000)
    terms_and_conditions = models.JSONField(default=list, blank=True)  # List of short clauses
    terms = models.TextField(max_length=2000, blank=True, null=True)
    points_cost = models.PositiveIntegerField(validators=[MinValueValidator(1)], db_index=True)
    type = models.CharField(max_length=20, choices=REWARD_TYPES, default='other', db_index=True)
    images = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
    valid_until = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rewards'
        ordering = ['points_cost', 'id']
        constraints = [
            models.CheckConstraint(condition=Q(points_cost__gte=1), name='rewards_points_cost_positive'),
        ]
        verbose_name = 'Reward'
        verbose_name_plural = 'Rewards'

    def __str__(self):
        return f"{self.name} ({self.points_cost} points)"

    def is_expired(self, now=None):
        """A reward stays valid only while valid_until lies in the future"""
        if self.valid_until is None:
            return False
        return self.valid_until <= (now or timezone.now())

    @classmethod
    def available(cls):
        """Active rewards, cheapest first"""
        return cls.objects.filter(is_active=True)
