# services/fuel-service/src/apps/api/views/requirement_views.py
"""
Requirement Views

ViewSet for flight fuel requirements.
"""

import logging

from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters import rest_framework as filters

from apps.core.models import FlightFuelRequirement, RequirementStatus
from apps.core.services import RequirementService
from apps.api.serializers import (
    FlightFuelRequirementSerializer,
    FlightFuelRequirementCreateSerializer,
)
from .base import BaseFuelViewSet

logger = logging.getLogger(__name__)


class RequirementFilter(filters.FilterSet):
    """Filter for flight fuel requirements."""

    status = filters.ChoiceFilter(choices=RequirementStatus.choices)
    flight_number = filters.CharFilter(lookup_expr='iexact')
    airport = filters.UUIDFilter()
    fuel_type = filters.UUIDFilter()
    flight_date_from = filters.DateFilter(field_name='flight_date', lookup_expr='gte')
    flight_date_to = filters.DateFilter(field_name='flight_date', lookup_expr='lte')

    class Meta:
        model = FlightFuelRequirement
        fields = ['status', 'flight_number', 'flight_date', 'airport', 'fuel_type']


class RequirementViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    BaseFuelViewSet
):
    """
    ViewSet for flight fuel requirements.

    Custom actions:
    - confirm: Confirm a requirement
    - cancel: Cancel a requirement
    """

    queryset = FlightFuelRequirement.objects.select_related('airport', 'fuel_type')
    serializer_class = FlightFuelRequirementSerializer
    filterset_class = RequirementFilter
    search_fields = ['flight_number', 'aircraft_registration']
    ordering_fields = ['flight_date', 'created_at', 'required_volume']
    ordering = ['-flight_date', 'flight_number']

    def get_serializer_class(self):
        if self.action == 'create':
            return FlightFuelRequirementCreateSerializer
        return FlightFuelRequirementSerializer

    def create(self, request):
        """
        Create a requirement.

        POST /api/v1/fuel/requirements/
        """
        serializer = FlightFuelRequirementCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        requirement = RequirementService.create_requirement(serializer.validated_data)
        return Response(
            FlightFuelRequirementSerializer(requirement).data,
            status=status.HTTP_201_CREATED
        )

    # ==========================================================================
    # Workflow Actions
    # ==========================================================================

    @action(detail=True, methods=['post'])
    def confirm(self, request, pk=None):
        """Confirm a requirement."""
        requirement = RequirementService.confirm_requirement(pk)
        return Response(FlightFuelRequirementSerializer(requirement).data)

    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        """Cancel a requirement."""
        requirement = RequirementService.cancel_requirement(pk)
        return Response(FlightFuelRequirementSerializer(requirement).data)
