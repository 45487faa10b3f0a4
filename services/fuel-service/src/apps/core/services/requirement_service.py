# services/fuel-service/src/apps/core/services/requirement_service.py
"""
Requirement Service

Flight fuel requirement lifecycle.
"""

import uuid
import logging
from typing import Dict, Any

from django.db import transaction

from ..models import FlightFuelRequirement, RequirementStatus
from .base import get_document
from .exceptions import store_operation

logger = logging.getLogger(__name__)


class RequirementService:
    """
    Service for flight fuel requirements.

    Confirm and cancel are allowed from any status.
    """

    @classmethod
    @store_operation
    @transaction.atomic
    def create_requirement(cls, requirement_data: Dict[str, Any]) -> FlightFuelRequirement:
        """
        Create a requirement in OPEN status.

        Args:
            requirement_data: Field values; status is ignored

        Returns:
            Created FlightFuelRequirement instance
        """
        data = dict(requirement_data)
        data.pop('status', None)
        requirement = FlightFuelRequirement.objects.create(**data)

        logger.info(
            f"Created fuel requirement for flight {requirement.flight_number}",
            extra={'requirement_id': str(requirement.id)}
        )
        return requirement

    @classmethod
    def get_requirement(cls, requirement_id: uuid.UUID) -> FlightFuelRequirement:
        return get_document(FlightFuelRequirement, requirement_id)

    @classmethod
    @store_operation
    @transaction.atomic
    def confirm_requirement(cls, requirement_id: uuid.UUID) -> FlightFuelRequirement:
        """Mark a requirement CONFIRMED."""
        return cls._set_status(requirement_id, RequirementStatus.CONFIRMED)

    @classmethod
    @store_operation
    @transaction.atomic
    def cancel_requirement(cls, requirement_id: uuid.UUID) -> FlightFuelRequirement:
        """Mark a requirement CANCELLED."""
        return cls._set_status(requirement_id, RequirementStatus.CANCELLED)

    @classmethod
    def _set_status(cls, requirement_id: uuid.UUID, status: str) -> FlightFuelRequirement:
        requirement = get_document(FlightFuelRequirement, requirement_id, for_update=True)
        previous = requirement.status
        requirement.status = status
        requirement.save(update_fields=['status', 'updated_at'])

        logger.info(
            f"Requirement {requirement.id} {previous} -> {status}",
            extra={'requirement_id': str(requirement.id), 'flight_number': requirement.flight_number}
        )
        return requirement
