"""
Points account query views.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, paginated_response
from ..services import PointsService
from ..serializers import PointsAccountSerializer, PointsTransactionSerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_balance(request):
    """Get user's current points balance"""
    account = PointsService.get_or_create_account(request.user)
    serializer = PointsAccountSerializer(account)
    return success_response(serializer.data, 'Points balance retrieved successfully')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_transactions(request):
    """Get user's points ledger, newest first, optionally filtered by ?type="""
    transactions = PointsService.get_history(request.user, request.GET.get('type'))
    return paginated_response(
        transactions, PointsTransactionSerializer, request,
        'Points transactions retrieved successfully'
    )
