"""
User serializers for registration, login, profile and leaderboard.
"""
from rest_framework import serializers
from django.contrib.auth import password_validation

from apps.points.services import PointsService
from ..models import User


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    Serializer for user registration (create operation).
    Used for: POST /api/auth/register/
    """
    password = serializers.CharField(
        write_only=True,
        help_text="Password must be at least 6 characters long"
    )
    confirm_password = serializers.CharField(write_only=True)
    email = serializers.EmailField(help_text="Email address")

    class Meta:
        model = User
        fields = ['username', 'email', 'password', 'confirm_password', 'first_name', 'last_name']

    def validate_email(self, value):
        value = value.lower()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("Email already registered.")
        return value

    def validate_password(self, value):
        password_validation.validate_password(value)
        return value

    def validate(self, attrs):
        """Object-level validation: check password confirmation"""
        if attrs.get('password') != attrs.get('confirm_password'):
            raise serializers.ValidationError({
                'confirm_password': "Passwords don't match"
            })
        return attrs

    def create(self, validated_data):
        """Create user with hashed password"""
        validated_data.pop('confirm_password')
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)


class LoginSerializer(serializers.Serializer):
    """Username or email plus password"""
    username = serializers.CharField(required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        if not attrs.get('username') and not attrs.get('email'):
            raise serializers.ValidationError("Username or email is required.")
        return attrs


class UserProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for the caller's own profile.
    Used for: GET /api/users/profile/
    """
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    pictureUrl = serializers.CharField(source='picture_url', read_only=True)
    points = serializers.SerializerMethodField()
    isAdmin = serializers.BooleanField(source='is_admin', read_only=True)
    bookmarks = serializers.PrimaryKeyRelatedField(many=True, read_only=True)
    redeemedRewards = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email', 'firstName', 'lastName', 'pictureUrl',
            'points', 'isAdmin', 'bookmarks', 'redeemedRewards', 'createdAt'
        ]
        read_only_fields = fields

    def get_points(self, obj):
        return PointsService.get_balance(obj)

    def get_redeemedRewards(self, obj):
        # Import here to avoid circular imports
        from apps.rewards.serializers import RewardRedemptionSerializer
        return RewardRedemptionSerializer(obj.redeemed_rewards.all(), many=True).data


class UserUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for user update operation.
    Used for: PUT/PATCH /api/users/profile/
    """
    firstName = serializers.CharField(source='first_name', required=False, allow_blank=True, max_length=150)
    lastName = serializers.CharField(source='last_name', required=False, allow_blank=True, max_length=150)
    pictureUrl = serializers.URLField(source='picture_url', required=False, allow_blank=True, max_length=500)
    email = serializers.EmailField(required=False)

    class Meta:
        model = User
        fields = ['email', 'firstName', 'lastName', 'pictureUrl']

    def validate_email(self, value):
        """Validate email uniqueness, excluding current user"""
        value = value.lower()
        if User.objects.filter(email__iexact=value).exclude(pk=self.instance.pk).exists():
            raise serializers.ValidationError("Email already registered.")
        return value


class LeaderboardEntrySerializer(serializers.ModelSerializer):
    """
    Public leaderboard row.
    Used for: GET /api/users/leaderboard/
    """
    pictureUrl = serializers.CharField(source='picture_url', read_only=True)
    points = serializers.IntegerField(source='points_total', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'pictureUrl', 'points']
        read_only_fields = fields
