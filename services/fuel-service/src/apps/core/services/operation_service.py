# services/fuel-service/src/apps/core/services/operation_service.py
"""
Fueling Operation Service

Aircraft fueling lifecycle and the storage draw it causes.
"""

import uuid
import logging
from decimal import Decimal
from typing import Dict, Any

from django.db import transaction
from django.utils import timezone

from ..models import (
    FuelingOperation,
    OperationStatus,
    InventoryTransactionType,
)
from .base import get_document
from .exceptions import store_operation
from .inventory_service import InventoryService
from .numbering import DocumentKind, DocumentNumberService

logger = logging.getLogger(__name__)


class FuelingOperationService:
    """
    Service for fueling operations.

    Completing an operation dispenses from its storage facility, if it
    has one, in the same transaction as the status change.
    """

    @classmethod
    @store_operation
    @transaction.atomic
    def create_operation(cls, operation_data: Dict[str, Any]) -> FuelingOperation:
        """
        Create a PENDING operation with a generated operation number.

        Args:
            operation_data: Field values keyed by model field name

        Returns:
            Created FuelingOperation instance
        """
        data = dict(operation_data)
        for generated in ('operation_number', 'status', 'start_time', 'end_time', 'volume_dispensed'):
            data.pop(generated, None)

        requirement = data.get('flight_requirement')
        if requirement is not None and data.get('fuel_type') is None:
            data['fuel_type'] = requirement.fuel_type

        operation = FuelingOperation.objects.create(
            operation_number=DocumentNumberService.generate(DocumentKind.OPERATION),
            status=OperationStatus.PENDING,
            **data
        )

        logger.info(
            f"Created fueling operation {operation.operation_number}",
            extra={
                'operation_id': str(operation.id),
                'aircraft_registration': operation.aircraft_registration,
            }
        )
        return operation

    @classmethod
    def get_operation(cls, operation_id: uuid.UUID) -> FuelingOperation:
        return get_document(FuelingOperation, operation_id)

    @classmethod
    @store_operation
    @transaction.atomic
    def start_fueling(cls, operation_id: uuid.UUID) -> FuelingOperation:
        """Mark an operation IN_PROGRESS and stamp its start time."""
        operation = get_document(FuelingOperation, operation_id, for_update=True)
        operation.status = OperationStatus.IN_PROGRESS
        operation.start_time = timezone.now()
        operation.save(update_fields=['status', 'start_time', 'updated_at'])

        logger.info(
            f"Fueling started for {operation.operation_number}",
            extra={'operation_id': str(operation.id)}
        )
        return operation

    @classmethod
    @store_operation
    @transaction.atomic
    def complete_fueling(
        cls,
        operation_id: uuid.UUID,
        volume_dispensed: Decimal
    ) -> FuelingOperation:
        """
        Mark an operation COMPLETED and draw the dispensed volume from storage.

        Args:
            operation_id: FuelingOperation UUID
            volume_dispensed: Volume put into the aircraft, in liters

        Returns:
            Updated FuelingOperation instance

        Raises:
            DocumentNotFoundError: If the operation does not exist
        """
        operation = get_document(FuelingOperation, operation_id, for_update=True)
        volume_dispensed = Decimal(str(volume_dispensed))

        operation.status = OperationStatus.COMPLETED
        operation.end_time = timezone.now()
        operation.volume_dispensed = volume_dispensed
        operation.save(update_fields=['status', 'end_time', 'volume_dispensed', 'updated_at'])

        if operation.storage_facility_id:
            InventoryService.post_transaction(
                facility_id=operation.storage_facility_id,
                transaction_type=InventoryTransactionType.DISPENSE,
                volume=-volume_dispensed,
                reference_doc=operation.operation_number,
            )

        logger.info(
            f"Fueling completed for {operation.operation_number}: {volume_dispensed} L",
            extra={
                'operation_id': str(operation.id),
                'storage_facility_id': str(operation.storage_facility_id),
            }
        )
        return operation
