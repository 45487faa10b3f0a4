# services/fuel-service/src/apps/core/services/inventory_service.py
"""
Inventory Service

Per-facility fuel levels and the append-only inventory ledger.
"""

import uuid
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Dict, Any, List

from django.db import transaction
from django.db.models import Max, Sum, QuerySet

from ..models import (
    StorageFacility,
    InventoryTransaction,
    InventoryTransactionType,
)
from .base import get_document
from .exceptions import FuelValidationError, store_operation
from .numbering import DocumentKind, DocumentNumberService

logger = logging.getLogger(__name__)

VOLUME_QUANTUM = Decimal('0.01')

# Largest magnitude a 12 digit, 2 place ledger column holds
LEVEL_LIMIT = Decimal('99999999999.99')



class InventoryService:
    """
    Service for storage levels and ledger postings.

    A facility's current_level is only changed through post_transaction,
    which appends the matching ledger entry in the same transaction.
    Posts to one facility are serialized by a lock on the facility row.
    """

    # ==========================================================================
    # Ledger Postings
    # ==========================================================================

    @classmethod
    @store_operation
    @transaction.atomic
    def post_transaction(
        cls,
        facility_id: uuid.UUID,
        transaction_type: str,
        volume: Decimal,
        reference_doc: str = None,
        notes: str = None,
    ) -> Optional[InventoryTransaction]:
        """
        Apply a signed volume to a facility and record it in the ledger.

        Args:
            facility_id: StorageFacility UUID
            transaction_type: RECEIPT, DISPENSE or ADJUSTMENT
            volume: Signed volume in liters, negative removes stock
            reference_doc: Number of the originating document
            notes: Free text

        Returns:
            Created InventoryTransaction, or None if the facility
            does not exist

        Raises:
            FuelValidationError: If the transaction type is unknown
                or the resulting level cannot be recorded
        """
        if transaction_type not in InventoryTransactionType.values:
            raise FuelValidationError(
                f"Unknown inventory transaction type: {transaction_type}",
                field='transaction_type'
            )

        facility = StorageFacility.objects.select_for_update().filter(
            id=facility_id
        ).first()

        if facility is None:
            logger.warning(
                f"Storage facility {facility_id} not found, inventory not posted",
                extra={'facility_id': str(facility_id), 'reference_doc': reference_doc}
            )
            return None

        volume = Decimal(str(volume))
        balance_before = facility.level
        if abs(volume) <= LEVEL_LIMIT:
            volume = volume.quantize(VOLUME_QUANTUM, rounding=ROUND_HALF_UP)
        balance_after = balance_before + volume

        if abs(volume) > LEVEL_LIMIT or abs(balance_after) > LEVEL_LIMIT:
            raise FuelValidationError(
                f"Posting {volume} L would take facility {facility.code} "
                f"to {balance_after} L, beyond the recordable level",
                field='volume',
                details={'balance_before': str(balance_before), 'limit': str(LEVEL_LIMIT)}
            )

        last_sequence = facility.inventory_transactions.aggregate(
            last=Max('sequence')
        )['last'] or 0

        entry = InventoryTransaction.objects.create(
            transaction_number=DocumentNumberService.generate(DocumentKind.INVENTORY),
            storage_facility=facility,
            sequence=last_sequence + 1,
            transaction_type=transaction_type,
            volume=volume,
            balance_before=balance_before,
            balance_after=balance_after,
            reference_doc=reference_doc,
            notes=notes,
        )

        facility.current_level = balance_after
        facility.save(update_fields=['current_level', 'updated_at'])

        logger.info(
            f"Posted {transaction_type} {volume} L to facility {facility.code}",
            extra={
                'facility_id': str(facility.id),
                'transaction_number': entry.transaction_number,
                'balance_before': str(balance_before),
                'balance_after': str(balance_after),
            }
        )

        return entry

    # ==========================================================================
    # Queries
    # ==========================================================================

    @classmethod
    @store_operation
    def get_available_fuel(
        cls,
        airport_id: uuid.UUID,
        fuel_type_id: uuid.UUID
    ) -> Decimal:
        """
        Total stock of a fuel type across operational facilities at an airport.

        Facilities without a recorded level count as empty.
        """
        total = StorageFacility.objects.filter(
            airport_id=airport_id,
            fuel_type_id=fuel_type_id,
            is_operational=True,
        ).aggregate(total=Sum('current_level'))['total']

        return Decimal(total or 0).quantize(VOLUME_QUANTUM)

    @classmethod
    @store_operation
    def get_ledger(cls, facility_id: uuid.UUID) -> QuerySet:
        """
        Get a facility's ledger entries in posting order.

        Raises:
            DocumentNotFoundError: If the facility does not exist
        """
        facility = get_document(StorageFacility, facility_id)
        return facility.inventory_transactions.order_by('sequence')

    @classmethod
    @store_operation
    def verify_ledger(cls, facility_id: uuid.UUID) -> Dict[str, Any]:
        """
        Audit a facility's ledger against its current level.

        Checks the arithmetic of every entry, that each entry starts from
        the balance the previous one ended on, that sequences have no
        gaps, and that the last balance equals the facility level.

        Args:
            facility_id: StorageFacility UUID

        Returns:
            Report dictionary with is_consistent and the errors found

        Raises:
            DocumentNotFoundError: If the facility does not exist
        """
        facility = get_document(StorageFacility, facility_id)
        entries = list(facility.inventory_transactions.order_by('sequence'))
        errors: List[Dict[str, Any]] = []

        previous = None
        for expected_sequence, entry in enumerate(entries, start=1):
            if entry.sequence != expected_sequence:
                errors.append({
                    'transaction_number': entry.transaction_number,
                    'error': 'SEQUENCE_GAP',
                    'expected': expected_sequence,
                    'actual': entry.sequence,
                })
            if not entry.is_balanced:
                errors.append({
                    'transaction_number': entry.transaction_number,
                    'error': 'UNBALANCED_ENTRY',
                    'expected': str(entry.balance_before + entry.volume),
                    'actual': str(entry.balance_after),
                })
            if previous is not None and entry.balance_before != previous.balance_after:
                errors.append({
                    'transaction_number': entry.transaction_number,
                    'error': 'BROKEN_CHAIN',
                    'expected': str(previous.balance_after),
                    'actual': str(entry.balance_before),
                })
            previous = entry

        if previous is not None and previous.balance_after != facility.level:
            errors.append({
                'transaction_number': previous.transaction_number,
                'error': 'LEVEL_MISMATCH',
                'expected': str(previous.balance_after),
                'actual': str(facility.level),
            })

        if errors:
            logger.warning(
                f"Ledger of facility {facility.code} is inconsistent",
                extra={'facility_id': str(facility.id), 'error_count': len(errors)}
            )

        return {
            'facility_id': facility.id,
            'is_consistent': not errors,
            'entry_count': len(entries),
            'opening_balance': entries[0].balance_before if entries else facility.level,
            'current_level': facility.level,
            'errors': errors,
        }
