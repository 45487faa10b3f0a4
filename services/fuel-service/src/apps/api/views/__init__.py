"""
Fuel Service API Views
"""

from .requirement_views import RequirementViewSet
from .order_views import OrderViewSet
from .delivery_views import DeliveryViewSet
from .operation_views import FuelingOperationViewSet
from .inventory_views import StorageFacilityViewSet, InventoryTransactionViewSet
from .contract_views import SupplierContractViewSet
from .function_views import FunctionViewSet

__all__ = [
    'RequirementViewSet',
    'OrderViewSet',
    'DeliveryViewSet',
    'FuelingOperationViewSet',
    'StorageFacilityViewSet',
    'InventoryTransactionViewSet',
    'SupplierContractViewSet',
    'FunctionViewSet',
]
