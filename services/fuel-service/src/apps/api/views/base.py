# services/fuel-service/src/apps/api/views/base.py
"""
Base Views and Mixins

Common functionality for Fuel Service API views.
"""

import logging

from rest_framework import viewsets

from apps.core.services.exceptions import (
    FuelServiceError,
    DocumentNotFoundError,
    DocumentStateError,
    FuelValidationError,
    StoreError,
)
from shared.common.exceptions import (
    BadRequestException,
    NotFoundException,
    InvalidStateTransitionException,
    ServiceUnavailableException,
)

logger = logging.getLogger(__name__)


class ExceptionHandlerMixin:
    """
    Mixin for handling service layer exceptions.

    Service errors are converted to the shared API exceptions so that
    they are rendered by the common exception handler.
    """

    service_exception_map = (
        (DocumentNotFoundError, NotFoundException),
        (DocumentStateError, InvalidStateTransitionException),
        (FuelValidationError, BadRequestException),
        (StoreError, ServiceUnavailableException),
        (FuelServiceError, BadRequestException),
    )

    def handle_exception(self, exc):
        """Convert service exceptions to API exceptions."""
        if isinstance(exc, FuelServiceError):
            for service_exc, api_exc in self.service_exception_map:
                if isinstance(exc, service_exc):
                    logger.info(
                        f"{exc.code}: {exc.message}",
                        extra={'view': type(self).__name__, 'details': exc.details}
                    )
                    exc = api_exc(
                        detail=exc.message,
                        error_code=exc.code,
                        extra_data={'errors': exc.details}
                    )
                    break

        return super().handle_exception(exc)


class BaseFuelViewSet(ExceptionHandlerMixin, viewsets.GenericViewSet):
    """
    Base ViewSet for Fuel Service.

    Provides exception handling for model-backed viewsets.
    """


class BaseFunctionViewSet(ExceptionHandlerMixin, viewsets.ViewSet):
    """Base ViewSet for endpoints that are not backed by a queryset."""

    def get_query_params(self, serializer_class):
        """
        Validate query parameters.

        Args:
            serializer_class: Serializer class describing the parameters

        Returns:
            Dictionary of validated parameters
        """
        serializer = serializer_class(data=self.request.query_params)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data
