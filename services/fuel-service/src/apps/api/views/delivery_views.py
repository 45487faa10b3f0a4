# services/fuel-service/src/apps/api/views/delivery_views.py
"""
Delivery Views

ViewSet for recorded fuel deliveries.
"""

from rest_framework import mixins
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters import rest_framework as filters

from apps.core.models import FuelDelivery, DeliveryStatus
from apps.core.services import DeliveryService
from apps.api.serializers import FuelDeliverySerializer, DisputeDeliverySerializer
from .base import BaseFuelViewSet


class DeliveryFilter(filters.FilterSet):
    """Filter for deliveries."""

    status = filters.ChoiceFilter(choices=DeliveryStatus.choices)
    order = filters.UUIDFilter()
    delivered_after = filters.DateFilter(field_name='delivery_date', lookup_expr='date__gte')
    delivered_before = filters.DateFilter(field_name='delivery_date', lookup_expr='date__lte')

    class Meta:
        model = FuelDelivery
        fields = ['status', 'order']


class DeliveryViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    BaseFuelViewSet
):
    """
    ViewSet for deliveries.

    Deliveries are created through orders/{id}/record-delivery/.
    """

    queryset = FuelDelivery.objects.select_related('order')
    serializer_class = FuelDeliverySerializer
    filterset_class = DeliveryFilter
    search_fields = ['delivery_number', 'order__order_number']
    ordering_fields = ['delivery_date', 'delivered_volume']
    ordering = ['-delivery_date']

    @action(detail=True, methods=['post'])
    def verify(self, request, pk=None):
        """Mark a delivery verified."""
        delivery = DeliveryService.verify_delivery(pk)
        return Response(FuelDeliverySerializer(delivery).data)

    @action(detail=True, methods=['post'])
    def dispute(self, request, pk=None):
        """Dispute a delivery."""
        serializer = DisputeDeliverySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        delivery = DeliveryService.dispute_delivery(
            pk,
            reason=serializer.validated_data.get('reason') or None
        )
        return Response(FuelDeliverySerializer(delivery).data)
