"""
Fuel Service - Service Layer

Business logic layer for fuel operations.
"""

from .exceptions import (
    FuelServiceError,
    DocumentNotFoundError,
    DocumentStateError,
    FuelValidationError,
    StoreError,
    store_operation,
)

from .numbering import DocumentKind, DocumentNumberService
from .inventory_service import InventoryService
from .contract_service import ContractService
from .requirement_service import RequirementService
from .order_service import OrderService
from .delivery_service import DeliveryService
from .operation_service import FuelingOperationService
from .cost_service import CostService

__all__ = [
    # Exceptions
    'FuelServiceError',
    'DocumentNotFoundError',
    'DocumentStateError',
    'FuelValidationError',
    'StoreError',
    'store_operation',
    # Services
    'DocumentKind',
    'DocumentNumberService',
    'InventoryService',
    'ContractService',
    'RequirementService',
    'OrderService',
    'DeliveryService',
    'FuelingOperationService',
    'CostService',
]
