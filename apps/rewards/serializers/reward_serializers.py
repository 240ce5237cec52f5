"""
Reward catalog serializers.
"""
from rest_framework import serializers

from apps.common.validators import validate_points_cost
from ..models import Reward


class RewardSerializer(serializers.ModelSerializer):
    """
    Serializer for reward catalog entries (read and admin write).
    Used for: GET/POST /api/rewards/, GET/PUT /api/rewards/{id}/
    """
    shortDescription = serializers.CharField(source='short_description', max_length=200)
    termsAndConditions = serializers.ListField(
        source='terms_and_conditions',
        child=serializers.CharField(max_length=500),
        required=False
    )
    pointsCost = serializers.IntegerField(source='points_cost', validators=[validate_points_cost])
    isActive = serializers.BooleanField(source='is_active', required=False)
    validUntil = serializers.DateTimeField(source='valid_until', required=False, allow_null=True)
    terms = serializers.CharField(max_length=2000, required=False, allow_blank=True, allow_null=True)
    images = serializers.ListField(child=serializers.DictField(), required=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Reward
        fields = [
            'id', 'name', 'shortDescription', 'description', 'termsAndConditions',
            'pointsCost', 'type', 'images', 'isActive', 'validUntil', 'terms',
            'createdAt', 'updatedAt'
        ]
        read_only_fields = ['id', 'createdAt', 'updatedAt']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name must not be blank.")
        return value


class RewardSummarySerializer(serializers.ModelSerializer):
    """Reward fields echoed back after a redemption"""
    shortDescription = serializers.CharField(source='short_description', read_only=True)
    pointsCost = serializers.IntegerField(source='points_cost', read_only=True)

    class Meta:
        model = Reward
        fields = ['id', 'name', 'shortDescription', 'type', 'pointsCost']
        read_only_fields = fields
