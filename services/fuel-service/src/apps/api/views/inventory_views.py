# services/fuel-service/src/apps/api/views/inventory_views.py
"""
Inventory Views

ViewSets for storage facilities and the inventory ledger.
"""

import logging

from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters import rest_framework as filters

from apps.core.models import (
    StorageFacility,
    InventoryTransaction,
    InventoryTransactionType,
)
from apps.core.services import InventoryService
from apps.api.serializers import (
    StorageFacilitySerializer,
    InventoryTransactionSerializer,
    PostInventoryTransactionSerializer,
    LedgerVerificationSerializer,
)
from shared.common.exceptions import NotFoundException
from shared.common.pagination import LedgerPagination
from .base import BaseFuelViewSet

logger = logging.getLogger(__name__)


class StorageFacilityFilter(filters.FilterSet):
    """Filter for storage facilities."""

    airport = filters.UUIDFilter()
    fuel_type = filters.UUIDFilter()
    is_operational = filters.BooleanFilter()

    class Meta:
        model = StorageFacility
        fields = ['airport', 'fuel_type', 'is_operational']


class InventoryTransactionFilter(filters.FilterSet):
    """Filter for ledger entries."""

    storage_facility = filters.UUIDFilter()
    transaction_type = filters.ChoiceFilter(choices=InventoryTransactionType.choices)
    reference_doc = filters.CharFilter()
    posted_after = filters.DateFilter(field_name='transaction_date', lookup_expr='date__gte')
    posted_before = filters.DateFilter(field_name='transaction_date', lookup_expr='date__lte')

    class Meta:
        model = InventoryTransaction
        fields = ['storage_facility', 'transaction_type', 'reference_doc']


class StorageFacilityViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    BaseFuelViewSet
):
    """
    ViewSet for storage facilities.

    Levels are read-only here; they change only through ledger postings.

    Custom actions:
    - ledger: Ledger entries in posting order
    - reconciliation: Audit the ledger against the current level
    """

    queryset = StorageFacility.objects.select_related('airport', 'fuel_type')
    serializer_class = StorageFacilitySerializer
    filterset_class = StorageFacilityFilter
    search_fields = ['code', 'name']
    ordering_fields = ['code', 'current_level']
    ordering = ['code']

    @action(detail=True, methods=['get'])
    def ledger(self, request, pk=None):
        """Get the facility's ledger entries."""
        entries = InventoryService.get_ledger(pk).select_related('storage_facility')

        paginator = LedgerPagination()
        page = paginator.paginate_queryset(entries, request, view=self)
        serializer = InventoryTransactionSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    @action(detail=True, methods=['get'])
    def reconciliation(self, request, pk=None):
        """Verify the facility's ledger."""
        report = InventoryService.verify_ledger(pk)
        return Response(LedgerVerificationSerializer(report).data)


class InventoryTransactionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    BaseFuelViewSet
):
    """
    ViewSet for inventory ledger entries.

    Entries are append-only; POST records a manual receipt or adjustment.
    """

    queryset = InventoryTransaction.objects.select_related('storage_facility')
    filterset_class = InventoryTransactionFilter
    search_fields = ['transaction_number', 'reference_doc']
    ordering_fields = ['transaction_date', 'sequence']
    ordering = ['-transaction_date']

    def get_serializer_class(self):
        if self.action == 'create':
            return PostInventoryTransactionSerializer
        return InventoryTransactionSerializer

    def create(self, request):
        """
        Post a manual ledger entry.

        POST /api/v1/fuel/inventory-transactions/
        """
        serializer = PostInventoryTransactionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        entry = InventoryService.post_transaction(
            facility_id=data['storage_facility'].id,
            transaction_type=data['transaction_type'],
            volume=data['volume'],
            reference_doc=data.get('reference_doc') or None,
            notes=data.get('notes') or None,
        )

        if entry is None:
            raise NotFoundException(
                detail=f"Storage facility not found: {data['storage_facility'].id}"
            )

        return Response(
            InventoryTransactionSerializer(entry).data,
            status=status.HTTP_201_CREATED
        )
