"""
Catch-all for exceptions that escape Django views under /api/
"""
import logging

from django.http import JsonResponse

logger = logging.getLogger(__name__)

API_PREFIX = '/api/'


class ErrorHandlingMiddleware:
    """
    Answers unhandled exceptions on API paths with the 500 envelope used by
    custom_exception_handler, so plain Django views never leak a traceback.
    DRF views are covered by the exception handler before reaching here.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        user_id = getattr(getattr(request, 'user', None), 'pk', None)
        logger.error(
            f"Unhandled {type(exception).__name__} on {request.method} {request.path} (user {user_id})",
            exc_info=exception
        )
        if not request.path.startswith(API_PREFIX):
            return None

        return JsonResponse({
            'code': 500,
            'msg': 'Internal server error',
            'data': None
        }, status=500)
