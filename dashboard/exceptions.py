import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class InvalidArgument(APIException):
    """A request parameter is malformed or out of range."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'invalid argument'
    default_code = 'invalid_argument'


class DataSourceError(APIException):
    """The backing store failed or timed out."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'data source unavailable'
    default_code = 'data_source_error'


def _error(code, message, status_code):
    return Response({'ok': False, 'error': {'code': code, 'message': message}}, status=status_code)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.error('unhandled error in %s', context.get('view'), exc_info=exc)
        return _error('server_error', str(exc), 500)
    # normalize response
    if isinstance(exc, ValidationError):
        code = InvalidArgument.default_code
    else:
        code = getattr(exc, 'default_code', None) or 'api_error'
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    return _error(code, detail, resp.status_code)
