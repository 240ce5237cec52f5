"""
Check-in views.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from apps.common.geo import round_distance
from apps.common.utils import success_response, error_response
from ..services import CheckinService
from ..serializers import CheckinCreateSerializer, CheckinSerializer


class CheckinView(APIView):
    """Check in at a place, or list the caller's recent check-ins"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = CheckinCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid check-in data', serializer.errors)

        longitude, latitude = serializer.validated_data['coordinates']
        result = CheckinService.check_in(
            request.user.id,
            serializer.validated_data['placeId'],
            longitude,
            latitude,
        )
        return success_response({
            'checkinId': result.checkin.id,
            'place': {
                'id': result.place.id,
                'name': result.place.name,
                'distance': round_distance(result.distance),
            },
            'points': {
                'awarded': result.points_awarded,
                'total': result.total_points,
            },
            'timestamp': result.checkin.timestamp,
        }, 'Check-in successful! Points awarded.', status.HTTP_201_CREATED)

    def get(self, request):
        checkins = CheckinService.list_for_user(request.user)
        return success_response(CheckinSerializer(checkins, many=True).data, 'Check-ins retrieved successfully')
