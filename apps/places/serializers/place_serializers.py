"""
Place serializers for detail, nearby search and admin create/update.
"""
from rest_framework import serializers

from apps.common.validators import (
    validate_latitude, validate_longitude, validate_coordinates_pair
)
from ..models import Place


class PlaceImageSerializer(serializers.Serializer):
    url = serializers.CharField(max_length=500)
    caption = serializers.CharField(max_length=200, required=False, allow_blank=True)


class PlaceSerializer(serializers.ModelSerializer):
    """
    Serializer for place list/detail responses.
    Used for: GET /api/places/, GET /api/places/{id}/
    """
    location = serializers.SerializerMethodField()
    redemption = serializers.SerializerMethodField()
    distance = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Place
        fields = [
            'id', 'name', 'description', 'location', 'redemption', 'images',
            'distance', 'createdAt', 'updatedAt'
        ]
        read_only_fields = fields

    def get_location(self, obj):
        return {'type': 'Point', 'coordinates': obj.coordinates}

    def get_redemption(self, obj):
        return {'eligible': obj.redemption_eligible, 'pointsCost': obj.redemption_points_cost}

    def get_distance(self, obj):
        return getattr(obj, 'distance', None)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if data.get('distance') is None:
            data.pop('distance', None)
        return data


class LocationSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=['Point'], default='Point')
    coordinates = serializers.ListField(
        child=serializers.FloatField(),
        min_length=2,
        max_length=2,
        validators=[validate_coordinates_pair],
        help_text="[longitude, latitude]"
    )


class RedemptionSettingsSerializer(serializers.Serializer):
    eligible = serializers.BooleanField(default=False)
    pointsCost = serializers.IntegerField(min_value=0, default=0)


class PlaceWriteSerializer(serializers.ModelSerializer):
    """
    Serializer for admin place create/update.
    Used for: POST /api/places/, PUT /api/places/{id}/
    Accepts the wire shape {name, description, location: {coordinates}, redemption, images}.
    """
    location = LocationSerializer()
    redemption = RedemptionSettingsSerializer(required=False)
    images = PlaceImageSerializer(many=True, required=False)

    class Meta:
        model = Place
        fields = ['name', 'description', 'location', 'redemption', 'images']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name must not be blank.")
        return value

    def validate(self, attrs):
        redemption = attrs.get('redemption')
        if redemption and redemption['eligible'] and redemption['pointsCost'] < 1:
            raise serializers.ValidationError({
                'redemption': 'Eligible places must grant at least 1 point.'
            })
        return attrs

    def _to_model_fields(self, validated_data):
        location = validated_data.pop('location', None)
        if location is not None:
            lng, lat = location['coordinates']
            validated_data['longitude'] = lng
            validated_data['latitude'] = lat
        redemption = validated_data.pop('redemption', None)
        if redemption is not None:
            validated_data['redemption_eligible'] = redemption['eligible']
            validated_data['redemption_points_cost'] = redemption['pointsCost']
        return validated_data

    def create(self, validated_data):
        return Place.objects.create(**self._to_model_fields(validated_data))

    def update(self, instance, validated_data):
        for field, value in self._to_model_fields(validated_data).items():
            setattr(instance, field, value)
        instance.save()
        return instance

    def to_representation(self, instance):
        return PlaceSerializer(instance, context=self.context).data


class NearbyPlacesQuerySerializer(serializers.Serializer):
    """Query parameters for GET /api/places/"""
    lat = serializers.FloatField(required=False, validators=[validate_latitude])
    lng = serializers.FloatField(required=False, validators=[validate_longitude])
    radius = serializers.IntegerField(required=False, min_value=1, max_value=50000)

    def validate(self, attrs):
        if ('lat' in attrs) != ('lng' in attrs):
            raise serializers.ValidationError("lat and lng must be provided together.")
        return attrs
