# services/fuel-service/src/apps/api/views/function_views.py
"""
Function Views

Read-only fuel queries: available stock, optimal supplier, flight cost.
"""

import logging

from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.services import InventoryService, ContractService, CostService
from apps.api.serializers import (
    AvailableFuelQuerySerializer,
    OptimalSupplierQuerySerializer,
    FlightFuelCostQuerySerializer,
    AvailableFuelSerializer,
    OptimalSupplierSerializer,
    FlightFuelCostSerializer,
)
from .base import BaseFunctionViewSet

logger = logging.getLogger(__name__)


class FunctionViewSet(BaseFunctionViewSet):
    """
    ViewSet for fuel functions.

    GET /api/v1/fuel/functions/available-fuel/
    GET /api/v1/fuel/functions/optimal-supplier/
    GET /api/v1/fuel/functions/flight-fuel-cost/
    """

    @action(detail=False, methods=['get'], url_path='available-fuel')
    def available_fuel(self, request):
        """Total stock of a fuel type at an airport."""
        params = self.get_query_params(AvailableFuelQuerySerializer)

        available_volume = InventoryService.get_available_fuel(
            airport_id=params['airport_id'],
            fuel_type_id=params['fuel_type_id'],
        )
        return Response(
            AvailableFuelSerializer({'available_volume': available_volume}).data
        )

    @action(detail=False, methods=['get'], url_path='optimal-supplier')
    def optimal_supplier(self, request):
        """Cheapest valid contract for a requested volume, or null."""
        params = self.get_query_params(OptimalSupplierQuerySerializer)

        offer = ContractService.get_optimal_supplier(
            airport_id=params['airport_id'],
            fuel_type_id=params['fuel_type_id'],
            volume=params['volume'],
            as_of_date=params.get('as_of_date'),
        )
        if offer is None:
            return Response(None)
        return Response(OptimalSupplierSerializer(offer).data)

    @action(detail=False, methods=['get'], url_path='flight-fuel-cost')
    def flight_fuel_cost(self, request):
        """Cost breakdown of a flight fuel requirement."""
        params = self.get_query_params(FlightFuelCostQuerySerializer)

        breakdown = CostService.estimate_flight_fuel_cost(params['flight_requirement_id'])
        return Response(FlightFuelCostSerializer(breakdown).data)
