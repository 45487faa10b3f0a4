# services/fuel-service/src/apps/api/serializers/function_serializers.py
"""
Function Serializers

Query parameters and results of the read-only fuel functions.
"""

from decimal import Decimal

from rest_framework import serializers


# =============================================================================
# Query Parameters
# =============================================================================

class AvailableFuelQuerySerializer(serializers.Serializer):
    airport_id = serializers.UUIDField()
    fuel_type_id = serializers.UUIDField()


class OptimalSupplierQuerySerializer(serializers.Serializer):
    airport_id = serializers.UUIDField()
    fuel_type_id = serializers.UUIDField()
    volume = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0')
    )
    as_of_date = serializers.DateField(required=False)


class FlightFuelCostQuerySerializer(serializers.Serializer):
    flight_requirement_id = serializers.UUIDField()


# =============================================================================
# Results
# =============================================================================

class AvailableFuelSerializer(serializers.Serializer):
    """Total stock of a fuel type at an airport."""

    available_volume = serializers.DecimalField(max_digits=None, decimal_places=2)


class OptimalSupplierSerializer(serializers.Serializer):
    """Cheapest contract offer for a requested volume."""

    supplier_id = serializers.UUIDField()
    supplier_name = serializers.CharField()
    contract_id = serializers.UUIDField()
    contract_number = serializers.CharField()
    price_per_liter = serializers.DecimalField(max_digits=10, decimal_places=4)
    estimated_total = serializers.DecimalField(max_digits=None, decimal_places=2)
    currency = serializers.CharField()


class FlightFuelCostSerializer(serializers.Serializer):
    """Cost breakdown of a flight fuel requirement."""

    flight_requirement_id = serializers.UUIDField()
    fuel_cost = serializers.DecimalField(max_digits=None, decimal_places=2)
    taxes = serializers.DecimalField(max_digits=None, decimal_places=2)
    fees = serializers.DecimalField(max_digits=None, decimal_places=2)
    total_cost = serializers.DecimalField(max_digits=None, decimal_places=2)
    currency = serializers.CharField()
