# services/fuel-service/src/apps/api/serializers/inventory_serializers.py
"""
Inventory Serializers

Serializers for storage facilities and the inventory ledger.
"""

from decimal import Decimal

from rest_framework import serializers

from apps.core.models import (
    StorageFacility,
    InventoryTransaction,
    InventoryTransactionType,
)


class StorageFacilitySerializer(serializers.ModelSerializer):
    """Serializer for storage facility views."""

    airport_code = serializers.CharField(source='airport.icao_code', read_only=True)
    fuel_type_code = serializers.CharField(source='fuel_type.code', read_only=True)
    fill_percentage = serializers.DecimalField(
        max_digits=None, decimal_places=1, read_only=True, allow_null=True
    )

    class Meta:
        model = StorageFacility
        fields = [
            'id', 'code', 'name',
            'airport', 'airport_code',
            'fuel_type', 'fuel_type_code',
            'capacity', 'current_level', 'fill_percentage',
            'is_operational',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class InventoryTransactionSerializer(serializers.ModelSerializer):
    """Serializer for ledger entries."""

    transaction_type_display = serializers.CharField(
        source='get_transaction_type_display', read_only=True
    )
    facility_code = serializers.CharField(source='storage_facility.code', read_only=True)

    class Meta:
        model = InventoryTransaction
        fields = [
            'id', 'transaction_number',
            'storage_facility', 'facility_code', 'sequence',
            'transaction_type', 'transaction_type_display',
            'volume', 'balance_before', 'balance_after',
            'reference_doc', 'notes',
            'transaction_date', 'created_at',
        ]
        read_only_fields = fields


class PostInventoryTransactionSerializer(serializers.Serializer):
    """
    Manual ledger posting.

    Dispensing is only posted by completing a fueling operation, so
    manual postings are limited to receipts and adjustments.
    """

    storage_facility = serializers.PrimaryKeyRelatedField(
        queryset=StorageFacility.objects.all()
    )
    transaction_type = serializers.ChoiceField(choices=[
        InventoryTransactionType.RECEIPT,
        InventoryTransactionType.ADJUSTMENT,
    ])
    volume = serializers.DecimalField(max_digits=12, decimal_places=2)
    reference_doc = serializers.CharField(
        max_length=50, required=False, allow_blank=True, allow_null=True
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        if attrs['transaction_type'] == InventoryTransactionType.RECEIPT and attrs['volume'] <= Decimal('0'):
            raise serializers.ValidationError(
                {'volume': 'Receipt volume must be greater than zero'}
            )
        if attrs['volume'] == Decimal('0'):
            raise serializers.ValidationError({'volume': 'Volume must not be zero'})
        return attrs


class LedgerVerificationSerializer(serializers.Serializer):
    """Result of a ledger audit."""

    facility_id = serializers.UUIDField()
    is_consistent = serializers.BooleanField()
    entry_count = serializers.IntegerField()
    opening_balance = serializers.DecimalField(max_digits=14, decimal_places=2)
    current_level = serializers.DecimalField(max_digits=14, decimal_places=2)
    errors = serializers.ListField(child=serializers.DictField())
