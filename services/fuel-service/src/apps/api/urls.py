"""
Fuel Service API URL Configuration

Defines URL patterns for all fuel service endpoints.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.api.views import (
    RequirementViewSet,
    OrderViewSet,
    DeliveryViewSet,
    FuelingOperationViewSet,
    StorageFacilityViewSet,
    InventoryTransactionViewSet,
    SupplierContractViewSet,
    FunctionViewSet,
)

app_name = 'api'

# Create router and register viewsets
router = DefaultRouter()
router.register(r'requirements', RequirementViewSet, basename='requirement')
router.register(r'orders', OrderViewSet, basename='order')
router.register(r'deliveries', DeliveryViewSet, basename='delivery')
router.register(r'operations', FuelingOperationViewSet, basename='operation')
router.register(r'facilities', StorageFacilityViewSet, basename='facility')
router.register(r'inventory-transactions', InventoryTransactionViewSet, basename='inventory-transaction')
router.register(r'contracts', SupplierContractViewSet, basename='contract')
router.register(r'functions', FunctionViewSet, basename='function')

urlpatterns = [
    # Router URLs
    path('', include(router.urls)),
]

# =============================================================================
# API Endpoint Summary
# =============================================================================
#
# Requirements:
#   GET    /api/v1/fuel/requirements/                   - List requirements
#   POST   /api/v1/fuel/requirements/                   - Create requirement
#   GET    /api/v1/fuel/requirements/{id}/              - Get requirement
#   POST   /api/v1/fuel/requirements/{id}/confirm/      - Confirm
#   POST   /api/v1/fuel/requirements/{id}/cancel/       - Cancel
#
# Orders:
#   GET    /api/v1/fuel/orders/                         - List orders
#   POST   /api/v1/fuel/orders/                         - Place order
#   GET    /api/v1/fuel/orders/{id}/                    - Get order with deliveries
#   POST   /api/v1/fuel/orders/{id}/confirm/            - Confirm
#   POST   /api/v1/fuel/orders/{id}/cancel/             - Cancel
#   POST   /api/v1/fuel/orders/{id}/record-delivery/    - Record delivery
#
# Deliveries:
#   GET    /api/v1/fuel/deliveries/                     - List deliveries
#   GET    /api/v1/fuel/deliveries/{id}/                - Get delivery
#   POST   /api/v1/fuel/deliveries/{id}/verify/         - Verify
#   POST   /api/v1/fuel/deliveries/{id}/dispute/        - Dispute
#
# Fueling Operations:
#   GET    /api/v1/fuel/operations/                     - List operations
#   POST   /api/v1/fuel/operations/                     - Create operation
#   GET    /api/v1/fuel/operations/{id}/                - Get operation
#   POST   /api/v1/fuel/operations/{id}/start/          - Start fueling
#   POST   /api/v1/fuel/operations/{id}/complete/       - Complete fueling
#
# Storage:
#   GET    /api/v1/fuel/facilities/                     - List facilities
#   GET    /api/v1/fuel/facilities/{id}/                - Get facility
#   GET    /api/v1/fuel/facilities/{id}/ledger/         - Ledger entries
#   GET    /api/v1/fuel/facilities/{id}/reconciliation/ - Ledger audit
#   GET    /api/v1/fuel/inventory-transactions/         - List ledger entries
#   POST   /api/v1/fuel/inventory-transactions/         - Manual receipt/adjustment
#   GET    /api/v1/fuel/inventory-transactions/{id}/    - Get ledger entry
#
# Contracts:
#   GET    /api/v1/fuel/contracts/                      - List contracts
#   GET    /api/v1/fuel/contracts/{id}/                 - Get contract
#
# Functions:
#   GET    /api/v1/fuel/functions/available-fuel/       - Available fuel
#   GET    /api/v1/fuel/functions/optimal-supplier/     - Optimal supplier
#   GET    /api/v1/fuel/functions/flight-fuel-cost/     - Flight fuel cost
#
# =============================================================================
