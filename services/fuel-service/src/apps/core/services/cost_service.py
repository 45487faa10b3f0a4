# services/fuel-service/src/apps/core/services/cost_service.py
"""
Cost Service

Fuel cost estimates for flight requirements.
"""

import uuid
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any

from django.conf import settings
from django.db.models import Sum

from ..models import FlightFuelRequirement
from .base import get_document
from .exceptions import store_operation

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')


class CostService:
    """Read-only cost aggregation over a requirement's orders."""

    @staticmethod
    def _rate(name: str, default: str) -> Decimal:
        return Decimal(str(getattr(settings, name, default)))

    @classmethod
    @store_operation
    def estimate_flight_fuel_cost(cls, requirement_id: uuid.UUID) -> Dict[str, Any]:
        """
        Estimate the fuel cost of a flight requirement.

        Sums the total amount of every order placed for the requirement,
        whatever its status; orders without an amount count as zero.
        Taxes and fees are flat rates on the fuel cost.

        Args:
            requirement_id: FlightFuelRequirement UUID

        Returns:
            Dictionary with fuel_cost, taxes, fees, total_cost, currency

        Raises:
            DocumentNotFoundError: If the requirement does not exist
        """
        requirement = get_document(FlightFuelRequirement, requirement_id)

        fuel_cost = requirement.orders.aggregate(
            total=Sum('total_amount')
        )['total'] or Decimal('0')
        fuel_cost = Decimal(fuel_cost)

        tax_rate = cls._rate('FUEL_TAX_RATE', '0.05')
        fee_rate = cls._rate('FUEL_FEE_RATE', '0.02')

        breakdown = {
            'flight_requirement_id': requirement.id,
            'fuel_cost': fuel_cost.quantize(CENT, rounding=ROUND_HALF_UP),
            'taxes': (fuel_cost * tax_rate).quantize(CENT, rounding=ROUND_HALF_UP),
            'fees': (fuel_cost * fee_rate).quantize(CENT, rounding=ROUND_HALF_UP),
            'total_cost': (fuel_cost * (1 + tax_rate + fee_rate)).quantize(CENT, rounding=ROUND_HALF_UP),
            'currency': requirement.currency or getattr(settings, 'FUEL_DEFAULT_CURRENCY', 'USD'),
        }

        logger.debug(
            f"Estimated fuel cost for requirement {requirement.id}",
            extra={'total_cost': str(breakdown['total_cost'])}
        )
        return breakdown
