# services/fuel-service/src/apps/api/serializers/order_serializers.py
"""
Order and Delivery Serializers

Serializers for fuel orders and their deliveries.
"""

from decimal import Decimal

from rest_framework import serializers

from apps.core.models import FuelOrder, FuelDelivery


class FuelDeliverySerializer(serializers.ModelSerializer):
    """Serializer for delivery detail and list views."""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    order_number = serializers.CharField(source='order.order_number', read_only=True)

    class Meta:
        model = FuelDelivery
        fields = [
            'id', 'delivery_number',
            'order', 'order_number',
            'delivered_volume', 'temperature', 'density',
            'delivery_date',
            'status', 'status_display', 'dispute_reason',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class FuelOrderListSerializer(serializers.ModelSerializer):
    """Serializer for order list view."""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    supplier_name = serializers.CharField(source='supplier.name', read_only=True)

    class Meta:
        model = FuelOrder
        fields = [
            'id', 'order_number', 'order_date',
            'flight_requirement', 'supplier', 'supplier_name',
            'ordered_volume', 'total_amount', 'currency',
            'priority', 'status', 'status_display',
        ]
        read_only_fields = fields


class FuelOrderDetailSerializer(serializers.ModelSerializer):
    """Serializer for order detail view."""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    priority_display = serializers.CharField(source='get_priority_display', read_only=True)
    supplier_name = serializers.CharField(source='supplier.name', read_only=True)
    contract_number = serializers.CharField(
        source='contract.contract_number', read_only=True, allow_null=True
    )
    deliveries = FuelDeliverySerializer(many=True, read_only=True)

    class Meta:
        model = FuelOrder
        fields = [
            'id', 'order_number', 'order_date',

            # References
            'flight_requirement', 'supplier', 'supplier_name',
            'contract', 'contract_number',
            'airport', 'fuel_type',

            # Quantity and price
            'ordered_volume', 'price_per_liter', 'total_amount', 'currency',

            # Scheduling
            'priority', 'priority_display', 'requested_delivery_date',

            # Status
            'status', 'status_display',

            # Fulfilment
            'delivered_volume', 'actual_delivery_date', 'deliveries',

            'notes',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class FuelOrderCreateSerializer(serializers.ModelSerializer):
    """Serializer for placing an order."""

    class Meta:
        model = FuelOrder
        fields = [
            'flight_requirement', 'supplier', 'contract',
            'airport', 'fuel_type',
            'ordered_volume', 'price_per_liter', 'total_amount', 'currency',
            'priority', 'requested_delivery_date', 'notes',
        ]

    def validate_ordered_volume(self, value):
        if value <= Decimal('0'):
            raise serializers.ValidationError("Ordered volume must be greater than zero")
        return value

    def validate(self, attrs):
        contract = attrs.get('contract')
        if contract is not None:
            if contract.supplier_id != attrs['supplier'].id:
                raise serializers.ValidationError(
                    {'contract': 'Contract belongs to a different supplier'}
                )
            if contract.fuel_type_id != attrs['fuel_type'].id:
                raise serializers.ValidationError(
                    {'contract': 'Contract is for a different fuel type'}
                )
        return attrs


class RecordDeliverySerializer(serializers.Serializer):
    """Measurements of a delivery against an order."""

    volume = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0')
    )
    temperature = serializers.DecimalField(
        max_digits=5, decimal_places=2, required=False, allow_null=True
    )
    density = serializers.DecimalField(
        max_digits=6, decimal_places=4, required=False, allow_null=True
    )


class DisputeDeliverySerializer(serializers.Serializer):
    """Reason for disputing a delivery."""

    reason = serializers.CharField(required=False, allow_blank=True, default='')
