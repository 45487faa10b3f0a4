# services/fuel-service/src/apps/api/views/contract_views.py
"""
Contract Views

Read-only access to supplier contracts; contracts are administered
through the Django admin.
"""

from rest_framework import mixins
from django_filters import rest_framework as filters

from apps.core.models import SupplierContract, ContractStatus
from apps.api.serializers import SupplierContractSerializer
from .base import BaseFuelViewSet


class SupplierContractFilter(filters.FilterSet):
    """Filter for supplier contracts."""

    status = filters.ChoiceFilter(choices=ContractStatus.choices)
    supplier = filters.UUIDFilter()
    fuel_type = filters.UUIDFilter()
    valid_on = filters.DateFilter(method='filter_valid_on')

    class Meta:
        model = SupplierContract
        fields = ['status', 'supplier', 'fuel_type']

    def filter_valid_on(self, queryset, name, value):
        return queryset.filter(valid_from__lte=value, valid_to__gte=value)


class SupplierContractViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    BaseFuelViewSet
):
    """ViewSet for supplier contracts."""

    queryset = SupplierContract.objects.select_related('supplier', 'fuel_type')
    serializer_class = SupplierContractSerializer
    filterset_class = SupplierContractFilter
    search_fields = ['contract_number', 'supplier__name']
    ordering_fields = ['price_per_liter', 'valid_from', 'valid_to']
    ordering = ['fuel_type', 'price_per_liter']
