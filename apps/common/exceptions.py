"""
Service exceptions and the API exception handler that renders them
"""
from rest_framework.views import exception_handler
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


class ServiceError(APIException):
    """Base class for caller-correctable errors raised by the service layer"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Request could not be processed'
    default_code = 'service_error'

    @property
    def message(self):
        return str(self.detail)


class ResourceNotFound(ServiceError):
    """A user, place, reward or check-in target does not exist"""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found'
    default_code = 'not_found'


class ConflictError(ServiceError):
    """The request collides with existing state (e.g. a same-day check-in)"""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Conflict'
    default_code = 'conflict'


class BusinessRuleViolation(ServiceError):
    """The request is well-formed but breaks a rewards rule"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Request violates a business rule'
    default_code = 'business_rule'


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    if isinstance(exc, ServiceError):
        logger.info(f"{type(exc).__name__}: {exc.message}")
        return Response({
            'code': exc.status_code,
            'msg': exc.message,
            'data': None
        }, status=exc.status_code)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is None:
        # Anything unhandled is an internal error; never leak its detail
        view = context.get('view')
        logger.error(
            f"Unhandled exception in {type(view).__name__ if view else 'unknown view'}: {exc}",
            exc_info=exc
        )
        return Response({
            'code': status.HTTP_500_INTERNAL_SERVER_ERROR,
            'msg': 'Internal server error',
            'data': None
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.warning(f"API Exception: {exc}")

    custom_response_data = {
        'code': response.status_code,
        'msg': 'An error occurred',
        'errors': response.data
    }

    # Handle specific error types
    if response.status_code == status.HTTP_400_BAD_REQUEST:
        custom_response_data['msg'] = 'Validation error'
    elif response.status_code == status.HTTP_401_UNAUTHORIZED:
        custom_response_data['msg'] = 'Authentication required'
    elif response.status_code == status.HTTP_403_FORBIDDEN:
        custom_response_data['msg'] = 'Permission denied'
    elif response.status_code == status.HTTP_404_NOT_FOUND:
        custom_response_data['msg'] = 'Resource not found'
    elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        custom_response_data['msg'] = 'Method not allowed'
    elif response.status_code >= 500:
        custom_response_data['msg'] = 'Internal server error'
        custom_response_data['errors'] = {'detail': 'Internal server error'}

    response.data = custom_response_data
    return response
