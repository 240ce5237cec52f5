"""
Points views module.

All views are exported from this module to maintain backward compatibility.
"""
from .points_account_views import (
    get_points_balance, get_points_transactions
)

__all__ = [
    'get_points_balance',
    'get_points_transactions',
]
