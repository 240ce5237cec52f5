"""
User authentication views.
"""
import logging

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth.models import update_last_login

from apps.common.utils import success_response, error_response
from ..models import User
from ..serializers import UserRegistrationSerializer, LoginSerializer, UserProfileSerializer

logger = logging.getLogger(__name__)


def _token_payload(user, request):
    refresh = RefreshToken.for_user(user)
    return {
        'token': str(refresh.access_token),
        'refresh': str(refresh),
        'user': UserProfileSerializer(user, context={'request': request}).data
    }


class RegisterView(APIView):
    """User registration endpoint"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Registration failed', serializer.errors)
        user = serializer.save()
        logger.info(f"Registered user {user.pk}")
        return success_response(_token_payload(user, request), 'Registration successful', status.HTTP_201_CREATED)


class PasswordLoginView(APIView):
    """Password login by username or email"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Username or email and password are required', serializer.errors)

        data = serializer.validated_data
        lookup = {'username': data['username']} if data.get('username') else {'email__iexact': data['email']}
        user = User.objects.filter(**lookup).first()

        if user is None or not user.is_active or not user.check_password(data['password']):
            return error_response('Invalid credentials', status_code=status.HTTP_401_UNAUTHORIZED)

        update_last_login(None, user)
        return success_response(_token_payload(user, request), 'Login successful')


class LogoutView(APIView):
    """Blacklist the caller's access token, and their refresh token when one is sent"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        if request.auth is None:
            return error_response('No token to logout')

        raw_refresh = request.data.get('refresh')
        if raw_refresh:
            try:
                refresh = RefreshToken(raw_refresh)
            except TokenError:
                return error_response('Invalid refresh token')
            if str(refresh.get(api_settings.USER_ID_CLAIM)) != str(request.user.pk):
                return error_response('Invalid refresh token')
            refresh.blacklist()

        request.auth.blacklist()
        logger.info(f"User {request.user.pk} logged out")
        return success_response(None, 'Logged out')
