# shared/common/exceptions.py
"""
API Exceptions and Error Envelope

Every error response has the shape:

    {"success": false,
     "error": {"code": ..., "message": ..., "request_id": ..., "details": ...}}

details is present only when there is something to report.
"""

import logging
import traceback
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class BaseAPIException(APIException):
    """
    API exception carrying a machine readable error code.

    extra_data['errors'] is rendered as the envelope's details.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'An unexpected error occurred.'
    default_code = 'error'
    error_code = 'INTERNAL_ERROR'

    def __init__(
        self,
        detail: Optional[str] = None,
        code: Optional[str] = None,
        error_code: Optional[str] = None,
        extra_data: Optional[Dict] = None
    ):
        super().__init__(detail=detail, code=code)
        self.error_code = error_code or self.error_code
        self.extra_data = extra_data or {}


class BadRequestException(BaseAPIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Bad request.'
    default_code = 'bad_request'
    error_code = 'BAD_REQUEST'


class InvalidStateTransitionException(BadRequestException):
    """The document's status does not allow the requested action."""
    default_detail = 'The document cannot make this status transition.'
    default_code = 'invalid_state'
    error_code = 'INVALID_STATE_TRANSITION'


class NotFoundException(BaseAPIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'The requested resource was not found.'
    default_code = 'not_found'
    error_code = 'NOT_FOUND'


class ServiceUnavailableException(BaseAPIException):
    """The database or another backing store failed."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'The service is temporarily unavailable.'
    default_code = 'service_unavailable'
    error_code = 'SERVICE_UNAVAILABLE'


def error_envelope(
    code: str,
    message: str,
    request_id: Optional[str] = None,
    details: Any = None,
    **extra
) -> Dict[str, Any]:
    """Build the error body shared by all error responses."""
    error = {
        'code': code,
        'message': message,
        'request_id': request_id,
    }
    if details:
        error['details'] = details
    error.update(extra)
    return {'success': False, 'error': error}


def custom_exception_handler(exc, context) -> Optional[Response]:
    """
    DRF exception handler rendering the error envelope.

    Django validation errors become 400 and Http404 becomes 404; anything
    else DRF does not know is logged and returned as a 500.
    """
    request = context.get('request')
    request_id = getattr(request, 'request_id', None)

    response = exception_handler(exc, context)
    if response is not None:
        return format_error_response(exc, response, request_id)

    if isinstance(exc, DjangoValidationError):
        details = exc.message_dict if hasattr(exc, 'message_dict') else {'detail': exc.messages}
        return Response(
            error_envelope('VALIDATION_ERROR', 'Validation error', request_id, details),
            status=status.HTTP_400_BAD_REQUEST
        )

    if isinstance(exc, Http404):
        return Response(
            error_envelope('NOT_FOUND', str(exc) or 'Resource not found', request_id),
            status=status.HTTP_404_NOT_FOUND
        )

    logger.exception(
        f"Unhandled exception: {exc}",
        extra={'request_id': request_id, 'exception_type': type(exc).__name__}
    )

    if settings.DEBUG:
        body = error_envelope(
            'INTERNAL_ERROR', str(exc), request_id,
            type=type(exc).__name__,
            traceback=traceback.format_exc().split('\n'),
        )
    else:
        body = error_envelope(
            'INTERNAL_ERROR',
            'An unexpected error occurred. Please try again later.',
            request_id,
        )
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def format_error_response(exc, response: Response, request_id: str = None) -> Response:
    """Rewrite a response produced by DRF into the error envelope."""
    error_code = getattr(exc, 'error_code', None)
    if error_code is None:
        error_code = 'VALIDATION_ERROR' if response.status_code == 400 else 'ERROR'

    details = getattr(exc, 'extra_data', {}).get('errors')
    if not details and isinstance(response.data, dict) and 'detail' not in response.data:
        # Field errors from serializer validation
        details = response.data

    response.data = error_envelope(
        error_code, get_error_message(exc, response), request_id, details
    )
    return response


def get_error_message(exc, response: Response) -> str:
    """Pick a human readable message from the exception or response."""
    detail = getattr(exc, 'detail', None)

    if isinstance(detail, str):
        return detail
    if isinstance(detail, list) and detail:
        return str(detail[0])
    if isinstance(detail, dict):
        return str(detail['detail']) if 'detail' in detail else 'Validation error'

    if isinstance(response.data, dict):
        return response.data.get('detail', str(response.data))
    return str(response.data)
