from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models import Q

from apps.common.geo import haversine_distance


class Place(models.Model):
    """Point of interest users can check in at and, when eligible, redeem at"""
    name = models.CharField(max_length=100)
    description = models.TextField(max_length=1000)
    longitude = models.FloatField(validators=[MinValueValidator(-180), MaxValueValidator(180)])
    latitude = models.FloatField(validators=[MinValueValidator(-90), MaxValueValidator(90)])
    redemption_eligible = models.BooleanField(default=False)
    redemption_points_cost = models.PositiveIntegerField(default=0)  # Points granted per place redemption
    images = models.JSONField(default=list, blank=True)  # [{"url": ..., "caption": ...}]
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'places'
        ordering = ['name']
        indexes = [
            models.Index(fields=['latitude', 'longitude'], name='places_lat_lng'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(latitude__gte=-90) & Q(latitude__lte=90)
                & Q(longitude__gte=-180) & Q(longitude__lte=180),
                name='places_coordinates_in_range',
            ),
        ]
        verbose_name = 'Place'
        verbose_name_plural = 'Places'

    def __str__(self):
        return self.name

    def clean(self):
        if self.redemption_eligible and self.redemption_points_cost < 1:
            raise ValidationError({'redemption_points_cost': 'Eligible places must grant at least 1 point.'})

    @property
    def coordinates(self):
        """[longitude, latitude], the order used on the wire"""
        return [self.longitude, self.latitude]

    @property
    def is_redeemable(self):
        return self.redemption_eligible and self.redemption_points_cost > 0

    def distance_to(self, latitude, longitude):
        """Meters from this place to the given point"""
        return haversine_distance(latitude, longitude, self.latitude, self.longitude)
