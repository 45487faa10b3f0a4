# services/fuel-service/src/apps/core/services/contract_service.py
"""
Contract Service

Supplier contract resolution.
"""

import uuid
import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Dict, Any

from django.conf import settings
from django.utils import timezone

from ..models import SupplierContract, ContractStatus
from .exceptions import store_operation

logger = logging.getLogger(__name__)


class ContractService:
    """Resolves the contract to order under for a fuel type and volume."""

    @classmethod
    @store_operation
    def find_optimal_contract(
        cls,
        fuel_type_id: uuid.UUID,
        volume: Decimal,
        as_of_date: date = None
    ) -> Optional[SupplierContract]:
        """
        Find the cheapest active contract covering a date and volume.

        Date and volume bounds are inclusive. Equal prices are decided by
        the most recent valid_from, then by contract number.

        Args:
            fuel_type_id: FuelType UUID
            volume: Requested volume in liters
            as_of_date: Date the contract must be valid on, defaults to today

        Returns:
            SupplierContract or None if nothing matches
        """
        as_of_date = as_of_date or timezone.now().date()

        return SupplierContract.objects.select_related('supplier').filter(
            fuel_type_id=fuel_type_id,
            status=ContractStatus.ACTIVE,
            valid_from__lte=as_of_date,
            valid_to__gte=as_of_date,
            min_volume__lte=volume,
            max_volume__gte=volume,
        ).order_by(
            'price_per_liter',
            '-valid_from',
            'contract_number',
        ).first()

    @classmethod
    @store_operation
    def get_optimal_supplier(
        cls,
        airport_id: uuid.UUID,
        fuel_type_id: uuid.UUID,
        volume: Decimal,
        as_of_date: date = None
    ) -> Optional[Dict[str, Any]]:
        """
        Summarize the best supplier offer for a requested volume.

        Contracts are not tied to airports; airport_id is only logged.

        Returns:
            Dictionary with supplier, contract and estimated total,
            or None if no contract matches
        """
        volume = Decimal(str(volume))
        contract = cls.find_optimal_contract(
            fuel_type_id=fuel_type_id,
            volume=volume,
            as_of_date=as_of_date,
        )

        if contract is None:
            logger.info(
                "No contract matches fuel request",
                extra={
                    'airport_id': str(airport_id),
                    'fuel_type_id': str(fuel_type_id),
                    'volume': str(volume),
                }
            )
            return None

        estimated_total = (contract.price_per_liter * volume).quantize(
            Decimal('0.01'), rounding=ROUND_HALF_UP
        )

        logger.info(
            f"Optimal contract {contract.contract_number} at {contract.price_per_liter}/L",
            extra={
                'airport_id': str(airport_id),
                'contract_id': str(contract.id),
                'estimated_total': str(estimated_total),
            }
        )

        return {
            'supplier_id': contract.supplier_id,
            'supplier_name': contract.supplier.name or 'Unknown',
            'contract_id': contract.id,
            'contract_number': contract.contract_number,
            'price_per_liter': contract.price_per_liter,
            'estimated_total': estimated_total,
            'currency': contract.currency or getattr(settings, 'FUEL_DEFAULT_CURRENCY', 'USD'),
        }
