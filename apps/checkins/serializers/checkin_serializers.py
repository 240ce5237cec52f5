"""
Check-in request and history serializers.
"""
from rest_framework import serializers

from apps.common.validators import validate_coordinates_pair
from ..models import Checkin


class CheckinCreateSerializer(serializers.Serializer):
    """
    Check-in request body.
    Used for: POST /api/checkins/
    """
    placeId = serializers.IntegerField(min_value=1)
    coordinates = serializers.ListField(
        child=serializers.FloatField(),
        validators=[validate_coordinates_pair]
    )


class CheckinSerializer(serializers.ModelSerializer):
    """
    Check-in history entry.
    Used for: GET /api/checkins/
    """
    place = serializers.SerializerMethodField()
    location = serializers.SerializerMethodField()
    distance = serializers.SerializerMethodField()
    checkinDate = serializers.DateField(source='checkin_date', read_only=True)

    class Meta:
        model = Checkin
        fields = ['id', 'place', 'location', 'distance', 'checkinDate', 'timestamp']
        read_only_fields = fields

    def get_place(self, obj):
        return {'id': obj.place_id, 'name': obj.place.name}

    def get_location(self, obj):
        return {'type': 'Point', 'coordinates': obj.coordinates}

    def get_distance(self, obj):
        return round(obj.distance, 2)
