# shared/common/health.py
"""
Liveness and readiness probes.

    /health/        process is up
    /health/ready/  process can reach its database
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

from django.conf import settings
from django.db import DatabaseError, connections
from django.urls import path
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)

HEALTHY = 'healthy'
UNHEALTHY = 'unhealthy'


def check_database(alias: str = 'default') -> Dict[str, Any]:
    """Run a trivial query and report its latency."""
    started = time.monotonic()
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute('SELECT 1')
            cursor.fetchone()
    except DatabaseError as e:
        logger.error(f"Database probe failed: {e}", extra={'database': alias})
        return {'name': f'database:{alias}', 'status': UNHEALTHY, 'error': str(e)}

    return {
        'name': f'database:{alias}',
        'status': HEALTHY,
        'latency_ms': round((time.monotonic() - started) * 1000, 2),
    }


READINESS_CHECKS: List[Callable[[], Dict[str, Any]]] = [check_database]


def _probe_body(probe_status: str, **extra) -> Dict[str, Any]:
    return {
        'status': probe_status,
        'service': getattr(settings, 'SERVICE_NAME', 'unknown'),
        'timestamp': datetime.now(timezone.utc).isoformat(),
        **extra,
    }


@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Liveness probe; answers as long as the process serves requests."""
    return Response(_probe_body(HEALTHY))


@api_view(['GET'])
@permission_classes([AllowAny])
def readiness_check(request):
    """Readiness probe; 503 while any readiness check fails."""
    checks = [check() for check in READINESS_CHECKS]
    ready = all(check['status'] == HEALTHY for check in checks)

    return Response(
        _probe_body(HEALTHY if ready else UNHEALTHY, checks=checks),
        status=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE
    )


def get_health_urlpatterns():
    """URL patterns for the probes, to append to a service's root urlconf."""
    return [
        path('health/', health_check, name='health'),
        path('health/ready/', readiness_check, name='readiness'),
    ]
