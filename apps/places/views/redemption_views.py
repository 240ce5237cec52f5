"""
Place redemption views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response
from ..services import PlaceRedemptionService


class PlaceRedeemView(APIView):
    """Credit the points of a redemption-eligible place to the caller"""
    permission_classes = [IsAuthenticated]

    def post(self, request, place_id):
        result = PlaceRedemptionService.redeem(request.user.id, place_id)
        return success_response({
            'pointsAwarded': result.points_awarded,
            'totalPoints': result.total_points,
        }, 'Redemption successful! Points awarded.')
