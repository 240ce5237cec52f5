"""
Place views module.

All views are exported from this module to maintain backward compatibility.
"""
from .place_views import PlaceListView, PlaceDetailView, AdminPlaceListView
from .bookmark_views import PlaceBookmarkView, BookmarkListView
from .redemption_views import PlaceRedeemView

__all__ = [
    'PlaceListView',
    'PlaceDetailView',
    'AdminPlaceListView',
    'PlaceBookmarkView',
    'BookmarkListView',
    'PlaceRedeemView',
]
