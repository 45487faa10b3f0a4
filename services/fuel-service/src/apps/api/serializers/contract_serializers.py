# services/fuel-service/src/apps/api/serializers/contract_serializers.py
"""
Contract Serializers
"""

from rest_framework import serializers

from apps.core.models import SupplierContract


class SupplierContractSerializer(serializers.ModelSerializer):
    """Serializer for supplier contracts (read-only)."""

    supplier_name = serializers.CharField(source='supplier.name', read_only=True)
    fuel_type_code = serializers.CharField(source='fuel_type.code', read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = SupplierContract
        fields = [
            'id', 'contract_number',
            'supplier', 'supplier_name',
            'fuel_type', 'fuel_type_code',
            'valid_from', 'valid_to',
            'min_volume', 'max_volume',
            'price_per_liter', 'currency',
            'status', 'status_display',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields
