"""
Fuel Service Models

Database models for fuel operations including:
- Master data (airports, fuel types, suppliers)
- Supplier contracts
- Flight fuel requirements, orders and deliveries
- Fueling operations
- Storage facilities and the inventory ledger
- Document number sequences
"""

from .master_data import (
    Airport,
    FuelType,
    Supplier,
)
from .contract import (
    SupplierContract,
    ContractStatus,
)
from .requirement import (
    FlightFuelRequirement,
    RequirementStatus,
)
from .order import (
    FuelOrder,
    FuelDelivery,
    OrderStatus,
    OrderPriority,
    DeliveryStatus,
)
from .operation import (
    FuelingOperation,
    OperationStatus,
)
from .storage import (
    StorageFacility,
    InventoryTransaction,
    InventoryTransactionType,
)
from .sequence import DocumentSequence

__all__ = [
    # Master data
    'Airport',
    'FuelType',
    'Supplier',
    # Contracts
    'SupplierContract',
    'ContractStatus',
    # Requirements
    'FlightFuelRequirement',
    'RequirementStatus',
    # Orders and deliveries
    'FuelOrder',
    'FuelDelivery',
    'OrderStatus',
    'OrderPriority',
    'DeliveryStatus',
    # Operations
    'FuelingOperation',
    'OperationStatus',
    # Storage
    'StorageFacility',
    'InventoryTransaction',
    'InventoryTransactionType',
    # Numbering
    'DocumentSequence',
]
