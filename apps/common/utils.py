"""
Common utility functions for API responses
"""
from datetime import datetime, time, timedelta

from django.utils import timezone
from rest_framework.response import Response
from rest_framework import status


def success_response(data=None, message="Success", status_code=status.HTTP_200_OK):
    """
    Standard success response envelope
    """
    response_data = {
        "code": status_code,
        "msg": message,
        "data": data
    }
    return Response(response_data, status=status_code)


def error_response(message="Error", errors=None, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Standard error response envelope
    """
    response_data = {
        "code": status_code,
        "msg": message
    }
    if errors:
        response_data["errors"] = errors
    return Response(response_data, status=status_code)


def parse_pagination(request, default_limit=20, max_limit=100):
    """Read page/limit query parameters, falling back to defaults on bad input"""
    try:
        page = max(int(request.query_params.get('page', 1)), 1)
    except (TypeError, ValueError):
        page = 1
    try:
        limit = min(max(int(request.query_params.get('limit', default_limit)), 1), max_limit)
    except (TypeError, ValueError):
        limit = default_limit
    return page, limit


def paginated_response(queryset, serializer_class, request, message="Success", default_limit=20):
    """
    Standard paginated response format
    """
    page, limit = parse_pagination(request, default_limit=default_limit)
    total = queryset.count()
    total_pages = (total + limit - 1) // limit
    start = (page - 1) * limit

    serializer = serializer_class(queryset[start:start + limit], many=True, context={'request': request})
    return success_response({
        "list": serializer.data,
        "pagination": build_pagination(page, limit, total, total_pages)
    }, message)


def build_pagination(page, limit, total, total_pages=None):
    if total_pages is None:
        total_pages = (total + limit - 1) // limit
    return {
        "currentPage": page,
        "totalPages": total_pages,
        "totalItems": total,
        "itemsPerPage": limit,
        "hasNext": page < total_pages,
        "hasPrev": page > 1
    }


def local_day_bounds(now=None):
    """
    Start and end (exclusive) of the server-local calendar day containing now.

    Returns:
        tuple: (start, end) as aware datetimes in the current time zone
    """
    local_now = timezone.localtime(now or timezone.now())
    day = local_now.date()
    start = timezone.make_aware(datetime.combine(day, time.min))
    end = timezone.make_aware(datetime.combine(day + timedelta(days=1), time.min))
    return start, end
