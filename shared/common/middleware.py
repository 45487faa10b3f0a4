# shared/common/middleware.py
"""
Request tracing and request logging middleware.
"""

import uuid
import time
import logging
import threading
from typing import Callable, Optional
from django.http import HttpRequest, HttpResponse
from django.conf import settings

logger = logging.getLogger(__name__)

_request_context = threading.local()

HEALTH_CHECK_PREFIX = '/health/'


def get_current_request_id() -> Optional[str]:
    """Request ID of the request being handled on this thread, if any."""
    return getattr(_request_context, 'request_id', None)


class RequestIDLogFilter(logging.Filter):
    """Stamp every log record with the current request ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, 'request_id', None):
            record.request_id = get_current_request_id()
        return True


class RequestIDMiddleware:
    """
    Middleware that adds a unique request ID to each request.
    The ID is used for request tracing across services.
    """

    header_name = 'X-Request-ID'

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())

        request.request_id = request_id
        _request_context.request_id = request_id

        try:
            response = self.get_response(request)
        finally:
            _request_context.request_id = None

        response[self.header_name] = request_id
        return response


class LoggingMiddleware:
    """
    Log one line per request with its status and duration.

    Failed and slow requests are logged at WARNING. Health probes are
    not logged.
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response
        self.slow_request_ms = getattr(settings, 'SLOW_REQUEST_THRESHOLD_MS', 1000)

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if request.path.startswith(HEALTH_CHECK_PREFIX):
            return self.get_response(request)

        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = round((time.monotonic() - started) * 1000, 2)

        is_problem = response.status_code >= 400 or duration_ms > self.slow_request_ms
        logger.log(
            logging.WARNING if is_problem else logging.INFO,
            f"{request.method} {request.path} {response.status_code} {duration_ms}ms",
            extra={
                'method': request.method,
                'path': request.path,
                'status_code': response.status_code,
                'duration_ms': duration_ms,
                'client_ip': client_ip(request),
            }
        )

        response['X-Response-Time'] = f"{duration_ms:.2f}ms"
        return response


def client_ip(request: HttpRequest) -> str:
    """First address in X-Forwarded-For, else the socket peer."""
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR', '')
