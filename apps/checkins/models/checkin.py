from django.conf import settings
from django.db import models
from django.utils import timezone


class Checkin(models.Model):
    """A verified visit by a user to a place, at most one per local day"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='checkins')
    place = models.ForeignKey('places.Place', on_delete=models.CASCADE, related_name='checkins')
    longitude = models.FloatField()
    latitude = models.FloatField()
    distance = models.FloatField()  # Meters from the place, unrounded
    checkin_date = models.DateField()  # Server-local calendar day of timestamp
    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'checkins'
        ordering = ['-timestamp', '-id']
        indexes = [
            models.Index(fields=['user', '-timestamp'], name='checkins_user_timestamp'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'place', 'checkin_date'],
                name='checkins_one_per_place_per_day',
            ),
        ]
        verbose_name = 'Check-in'
        verbose_name_plural = 'Check-ins'

    def __str__(self):
        return f"{self.user_id} @ {self.place_id} on {self.checkin_date}"

    @property
    def coordinates(self):
        return [self.longitude, self.latitude]
