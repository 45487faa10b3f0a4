"""
Fuel Service API Serializers
"""

from .requirement_serializers import (
    FlightFuelRequirementSerializer,
    FlightFuelRequirementCreateSerializer,
)
from .order_serializers import (
    FuelOrderListSerializer,
    FuelOrderDetailSerializer,
    FuelOrderCreateSerializer,
    FuelDeliverySerializer,
    RecordDeliverySerializer,
    DisputeDeliverySerializer,
)
from .operation_serializers import (
    FuelingOperationSerializer,
    FuelingOperationCreateSerializer,
    CompleteFuelingSerializer,
)
from .inventory_serializers import (
    StorageFacilitySerializer,
    InventoryTransactionSerializer,
    PostInventoryTransactionSerializer,
    LedgerVerificationSerializer,
)
from .contract_serializers import SupplierContractSerializer
from .function_serializers import (
    AvailableFuelQuerySerializer,
    OptimalSupplierQuerySerializer,
    FlightFuelCostQuerySerializer,
    AvailableFuelSerializer,
    OptimalSupplierSerializer,
    FlightFuelCostSerializer,
)

__all__ = [
    # Requirements
    'FlightFuelRequirementSerializer',
    'FlightFuelRequirementCreateSerializer',
    # Orders and deliveries
    'FuelOrderListSerializer',
    'FuelOrderDetailSerializer',
    'FuelOrderCreateSerializer',
    'FuelDeliverySerializer',
    'RecordDeliverySerializer',
    'DisputeDeliverySerializer',
    # Operations
    'FuelingOperationSerializer',
    'FuelingOperationCreateSerializer',
    'CompleteFuelingSerializer',
    # Inventory
    'StorageFacilitySerializer',
    'InventoryTransactionSerializer',
    'PostInventoryTransactionSerializer',
    'LedgerVerificationSerializer',
    # Contracts
    'SupplierContractSerializer',
    # Functions
    'AvailableFuelQuerySerializer',
    'OptimalSupplierQuerySerializer',
    'FlightFuelCostQuerySerializer',
    'AvailableFuelSerializer',
    'OptimalSupplierSerializer',
    'FlightFuelCostSerializer',
]
