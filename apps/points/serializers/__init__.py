"""
Points serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .account_serializers import PointsAccountSerializer
from .transaction_serializers import PointsTransactionSerializer, PointsStatisticsSerializer

__all__ = [
    'PointsAccountSerializer',
    'PointsTransactionSerializer',
    'PointsStatisticsSerializer',
]
