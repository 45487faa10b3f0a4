# services/fuel-service/src/apps/api/views/operation_views.py
"""
Fueling Operation Views

ViewSet for aircraft fueling operations.
"""

import logging

from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters import rest_framework as filters

from apps.core.models import FuelingOperation, OperationStatus
from apps.core.services import FuelingOperationService
from apps.api.serializers import (
    FuelingOperationSerializer,
    FuelingOperationCreateSerializer,
    CompleteFuelingSerializer,
)
from .base import BaseFuelViewSet

logger = logging.getLogger(__name__)


class OperationFilter(filters.FilterSet):
    """Filter for fueling operations."""

    status = filters.ChoiceFilter(choices=OperationStatus.choices)
    storage_facility = filters.UUIDFilter()
    flight_requirement = filters.UUIDFilter()
    aircraft_registration = filters.CharFilter(lookup_expr='iexact')

    class Meta:
        model = FuelingOperation
        fields = ['status', 'storage_facility', 'flight_requirement', 'aircraft_registration']


class FuelingOperationViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    BaseFuelViewSet
):
    """
    ViewSet for fueling operations.

    Custom actions:
    - start: Start fueling
    - complete: Complete fueling and draw from storage
    """

    queryset = FuelingOperation.objects.select_related('storage_facility')
    filterset_class = OperationFilter
    search_fields = ['operation_number', 'aircraft_registration']
    ordering_fields = ['created_at', 'start_time', 'end_time']
    ordering = ['-created_at']

    def get_serializer_class(self):
        if self.action == 'create':
            return FuelingOperationCreateSerializer
        return FuelingOperationSerializer

    def create(self, request):
        """
        Create a fueling operation.

        POST /api/v1/fuel/operations/
        """
        serializer = FuelingOperationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        operation = FuelingOperationService.create_operation(serializer.validated_data)
        return Response(
            FuelingOperationSerializer(operation).data,
            status=status.HTTP_201_CREATED
        )

    @action(detail=True, methods=['post'])
    def start(self, request, pk=None):
        """Start fueling."""
        operation = FuelingOperationService.start_fueling(pk)
        return Response(FuelingOperationSerializer(operation).data)

    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        """Complete fueling with the dispensed volume."""
        serializer = CompleteFuelingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        operation = FuelingOperationService.complete_fueling(
            operation_id=pk,
            volume_dispensed=serializer.validated_data['volume_dispensed'],
        )
        return Response(FuelingOperationSerializer(operation).data)
