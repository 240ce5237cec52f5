"""
Bookmark views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response
from ..services import PlaceService
from ..serializers import PlaceSerializer


class PlaceBookmarkView(APIView):
    """Add or remove a place from the caller's bookmarks"""
    permission_classes = [IsAuthenticated]

    def post(self, request, place_id):
        bookmarks = PlaceService.add_bookmark(request.user, place_id)
        return success_response({'bookmarks': [place.id for place in bookmarks]}, 'Bookmarked')

    def delete(self, request, place_id):
        bookmarks = PlaceService.remove_bookmark(request.user, place_id)
        return success_response({'bookmarks': [place.id for place in bookmarks]}, 'Bookmark removed')


class BookmarkListView(APIView):
    """List the caller's bookmarked places"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        places = request.user.bookmarks.all()
        return success_response(PlaceSerializer(places, many=True).data, 'Bookmarks retrieved successfully')
