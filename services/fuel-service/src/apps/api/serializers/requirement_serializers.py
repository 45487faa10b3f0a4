# services/fuel-service/src/apps/api/serializers/requirement_serializers.py
"""
Requirement Serializers

Serializers for flight fuel requirements.
"""

from decimal import Decimal

from rest_framework import serializers

from apps.core.models import FlightFuelRequirement


class FlightFuelRequirementSerializer(serializers.ModelSerializer):
    """Serializer for requirement detail and list views."""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    airport_code = serializers.CharField(source='airport.icao_code', read_only=True)
    fuel_type_code = serializers.CharField(source='fuel_type.code', read_only=True)

    class Meta:
        model = FlightFuelRequirement
        fields = [
            'id', 'flight_number', 'flight_date',
            'airport', 'airport_code',
            'fuel_type', 'fuel_type_code',
            'aircraft_registration',
            'required_volume', 'currency',
            'status', 'status_display',
            'notes',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class FlightFuelRequirementCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating a requirement."""

    class Meta:
        model = FlightFuelRequirement
        fields = [
            'flight_number', 'flight_date', 'airport', 'fuel_type',
            'aircraft_registration', 'required_volume', 'currency', 'notes',
        ]

    def validate_required_volume(self, value):
        if value <= Decimal('0'):
            raise serializers.ValidationError("Required volume must be greater than zero")
        return value

    def validate_flight_number(self, value):
        return value.upper().strip()
