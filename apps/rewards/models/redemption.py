from django.conf import settings
from django.db import models
from django.utils import timezone


class RewardRedemption(models.Model):
    """Snapshot of a reward at the moment a user redeemed it"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='redeemed_rewards')
    reward = models.ForeignKey('Reward', on_delete=models.SET_NULL, null=True, blank=True, related_name='redemptions')
    name = models.CharField(max_length=100)
    short_description = models.CharField(max_length=200, blank=True)
    points_cost = models.PositiveIntegerField()
    redeemed_at = models.DateTimeField(default=timezone.now)
    used = models.BooleanField(default=False)
    used_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'reward_redemptions'
        ordering = ['redeemed_at', 'id']
        verbose_name = 'Reward Redemption'
        verbose_name_plural = 'Reward Redemptions'

    def __str__(self):
        return f"{self.user} - {self.name}"

    @classmethod
    def snapshot(cls, user, reward, redeemed_at=None):
        """Copy the reward fields the user keeps even if the catalog entry changes"""
        return cls.objects.create(
            user=user,
            reward=reward,
            name=reward.name,
            short_description=reward.short_description,
            points_cost=reward.points_cost,
            redeemed_at=redeemed_at or timezone.now(),
        )
