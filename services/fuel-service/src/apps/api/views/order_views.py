# services/fuel-service/src/apps/api/views/order_views.py
"""
Order Views

ViewSet for fuel orders.
"""

import logging

from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters import rest_framework as filters

from apps.core.models import FuelOrder, OrderStatus, OrderPriority
from apps.core.services import OrderService
from apps.api.serializers import (
    FuelOrderListSerializer,
    FuelOrderDetailSerializer,
    FuelOrderCreateSerializer,
    FuelDeliverySerializer,
    RecordDeliverySerializer,
)
from .base import BaseFuelViewSet

logger = logging.getLogger(__name__)


class OrderFilter(filters.FilterSet):
    """Filter for fuel orders."""

    status = filters.ChoiceFilter(choices=OrderStatus.choices)
    priority = filters.ChoiceFilter(choices=OrderPriority.choices)
    flight_requirement = filters.UUIDFilter()
    supplier = filters.UUIDFilter()
    airport = filters.UUIDFilter()
    ordered_after = filters.DateFilter(field_name='order_date', lookup_expr='date__gte')
    ordered_before = filters.DateFilter(field_name='order_date', lookup_expr='date__lte')

    class Meta:
        model = FuelOrder
        fields = ['status', 'priority', 'flight_requirement', 'supplier', 'airport']


class OrderViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    BaseFuelViewSet
):
    """
    ViewSet for fuel orders.

    Orders are never deleted; they are cancelled instead.

    Custom actions:
    - confirm: Confirm an order
    - cancel: Cancel an order that has not been delivered
    - record-delivery: Record a delivery and mark the order delivered
    """

    queryset = FuelOrder.objects.select_related('supplier', 'contract')
    filterset_class = OrderFilter
    search_fields = ['order_number']
    ordering_fields = ['order_date', 'ordered_volume', 'total_amount', 'status']
    ordering = ['-order_date']

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related('deliveries')
        return queryset

    def get_serializer_class(self):
        if self.action == 'list':
            return FuelOrderListSerializer
        elif self.action == 'create':
            return FuelOrderCreateSerializer
        return FuelOrderDetailSerializer

    def create(self, request):
        """
        Place an order.

        POST /api/v1/fuel/orders/
        """
        serializer = FuelOrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = OrderService.place_order(serializer.validated_data)
        return Response(
            FuelOrderDetailSerializer(order).data,
            status=status.HTTP_201_CREATED
        )

    # ==========================================================================
    # Workflow Actions
    # ==========================================================================

    @action(detail=True, methods=['post'])
    def confirm(self, request, pk=None):
        """Confirm an order."""
        order = OrderService.confirm_order(pk)
        return Response(FuelOrderDetailSerializer(order).data)

    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        """Cancel an order."""
        order = OrderService.cancel_order(pk)
        return Response(FuelOrderDetailSerializer(order).data)

    @action(detail=True, methods=['post'], url_path='record-delivery')
    def record_delivery(self, request, pk=None):
        """Record a delivery against an order."""
        serializer = RecordDeliverySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        delivery = OrderService.record_delivery(
            order_id=pk,
            volume=serializer.validated_data['volume'],
            temperature=serializer.validated_data.get('temperature'),
            density=serializer.validated_data.get('density'),
        )
        return Response(
            FuelDeliverySerializer(delivery).data,
            status=status.HTTP_201_CREATED
        )
