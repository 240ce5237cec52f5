"""
Place lookups, nearby search and bookmarks.
"""
import logging

from django.conf import settings

from apps.common.exceptions import ResourceNotFound
from apps.common.geo import bounding_box, round_distance
from ..models import Place

logger = logging.getLogger(__name__)


class PlaceService:
    """Service for place queries and bookmarks"""

    @staticmethod
    def get_place(place_id):
        """Load a place or raise ResourceNotFound"""
        try:
            return Place.objects.get(pk=place_id)
        except Place.DoesNotExist:
            raise ResourceNotFound('Place not found')

    @staticmethod
    def find_nearby(latitude, longitude, radius=None, limit=None):
        """
        Places within radius meters of a point, nearest first.

        Candidates are narrowed with a bounding box in the database and then
        filtered by exact haversine distance. Each returned place carries a
        ``distance`` attribute in whole meters.
        """
        config = settings.REWARDS_CONFIG
        if radius is None:
            radius = config['NEARBY_DEFAULT_RADIUS_METERS']
        if limit is None:
            limit = config['NEARBY_MAX_RESULTS']

        min_lat, max_lat, min_lng, max_lng = bounding_box(latitude, longitude, radius)
        candidates = Place.objects.filter(latitude__gte=min_lat, latitude__lte=max_lat)
        # Windows that wrap the antimeridian are filtered by exact distance only
        if min_lng >= -180 and max_lng <= 180:
            candidates = candidates.filter(longitude__gte=min_lng, longitude__lte=max_lng)

        nearby = []
        for place in candidates:
            meters = place.distance_to(latitude, longitude)
            if meters <= radius:
                place.distance = round_distance(meters)
                nearby.append((meters, place))

        nearby.sort(key=lambda item: item[0])
        return [place for _, place in nearby[:limit]]

    @staticmethod
    def add_bookmark(user, place_id):
        place = PlaceService.get_place(place_id)
        user.bookmarks.add(place)
        return user.bookmarks.all()

    @staticmethod
    def remove_bookmark(user, place_id):
        user.bookmarks.remove(place_id)
        return user.bookmarks.all()

    @staticmethod
    def default_radius():
        return settings.REWARDS_CONFIG['NEARBY_DEFAULT_RADIUS_METERS']
