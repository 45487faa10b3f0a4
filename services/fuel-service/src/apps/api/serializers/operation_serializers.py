# services/fuel-service/src/apps/api/serializers/operation_serializers.py
"""
Fueling Operation Serializers
"""

from decimal import Decimal

from rest_framework import serializers

from apps.core.models import FuelingOperation


class FuelingOperationSerializer(serializers.ModelSerializer):
    """Serializer for fueling operation views."""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    duration_minutes = serializers.FloatField(read_only=True)

    class Meta:
        model = FuelingOperation
        fields = [
            'id', 'operation_number',
            'storage_facility', 'flight_requirement', 'fuel_type',
            'aircraft_registration',
            'planned_volume', 'volume_dispensed',
            'status', 'status_display',
            'start_time', 'end_time', 'duration_minutes',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class FuelingOperationCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating a fueling operation."""

    class Meta:
        model = FuelingOperation
        fields = [
            'storage_facility', 'flight_requirement', 'fuel_type',
            'aircraft_registration', 'planned_volume',
        ]

    def validate_aircraft_registration(self, value):
        return value.upper().strip() if value else value


class CompleteFuelingSerializer(serializers.Serializer):
    """Volume put into the aircraft."""

    volume_dispensed = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0')
    )
