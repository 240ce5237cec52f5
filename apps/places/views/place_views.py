"""
Place query and admin management views.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAdminUser

from apps.common.utils import success_response, error_response, paginated_response
from ..models import Place
from ..services import PlaceService
from ..serializers import PlaceSerializer, PlaceWriteSerializer, NearbyPlacesQuerySerializer


class PlaceListView(APIView):
    """Nearby search (or all places) for anyone; create for admins"""

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsAdminUser()]
        return [AllowAny()]

    def get(self, request):
        query = NearbyPlacesQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return error_response('Invalid query parameters', query.errors)

        params = query.validated_data
        if 'lat' in params:
            places = PlaceService.find_nearby(params['lat'], params['lng'], params.get('radius'))
            return success_response({
                'list': PlaceSerializer(places, many=True).data,
                'count': len(places),
                'searchCenter': {'lat': params['lat'], 'lng': params['lng']},
                'searchRadius': params.get('radius') or PlaceService.default_radius(),
            }, 'Nearby places retrieved successfully')

        places = Place.objects.all()[:100]
        data = PlaceSerializer(places, many=True).data
        return success_response({'list': data, 'count': len(data)}, 'All places retrieved successfully')

    def post(self, request):
        serializer = PlaceWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid place data', serializer.errors)
        serializer.save()
        return success_response(serializer.data, 'Place created successfully', status.HTTP_201_CREATED)


class PlaceDetailView(APIView):
    """Place detail for anyone; update/delete for admins"""

    def get_permissions(self):
        if self.request.method in ('PUT', 'PATCH', 'DELETE'):
            return [IsAdminUser()]
        return [AllowAny()]

    def get(self, request, place_id):
        place = PlaceService.get_place(place_id)
        return success_response(PlaceSerializer(place).data, 'Place retrieved successfully')

    def put(self, request, place_id):
        place = PlaceService.get_place(place_id)
        serializer = PlaceWriteSerializer(place, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Invalid place data', serializer.errors)
        serializer.save()
        return success_response(serializer.data, 'Place updated successfully')

    def patch(self, request, place_id):
        return self.put(request, place_id)

    def delete(self, request, place_id):
        place = PlaceService.get_place(place_id)
        place.delete()
        return success_response(None, 'Place deleted successfully')


class AdminPlaceListView(APIView):
    """Every place, newest first, paginated"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        places = Place.objects.order_by('-created_at', '-id')
        return paginated_response(places, PlaceSerializer, request, 'All places retrieved successfully')
