# services/fuel-service/src/apps/core/services/delivery_service.py
"""
Delivery Service

Status corrections on recorded deliveries.
"""

import uuid
import logging

from django.db import transaction

from ..models import FuelDelivery, DeliveryStatus
from .base import get_document
from .exceptions import store_operation

logger = logging.getLogger(__name__)


class DeliveryService:
    """
    Service for fuel deliveries.

    Deliveries are created by OrderService.record_delivery; measurements
    are never changed afterwards, only the status.
    """

    @classmethod
    def get_delivery(cls, delivery_id: uuid.UUID) -> FuelDelivery:
        return get_document(FuelDelivery, delivery_id)

    @classmethod
    @store_operation
    @transaction.atomic
    def verify_delivery(cls, delivery_id: uuid.UUID) -> FuelDelivery:
        """Mark a delivery VERIFIED after its measurements were checked."""
        delivery = get_document(FuelDelivery, delivery_id, for_update=True)
        delivery.status = DeliveryStatus.VERIFIED
        delivery.save(update_fields=['status', 'updated_at'])

        logger.info(
            f"Delivery {delivery.delivery_number} verified",
            extra={'delivery_id': str(delivery.id)}
        )
        return delivery

    @classmethod
    @store_operation
    @transaction.atomic
    def dispute_delivery(cls, delivery_id: uuid.UUID, reason: str = None) -> FuelDelivery:
        """
        Mark a delivery DISPUTED.

        Args:
            delivery_id: FuelDelivery UUID
            reason: Why the delivery is disputed

        Returns:
            Updated FuelDelivery instance
        """
        delivery = get_document(FuelDelivery, delivery_id, for_update=True)
        delivery.status = DeliveryStatus.DISPUTED
        delivery.dispute_reason = reason
        delivery.save(update_fields=['status', 'dispute_reason', 'updated_at'])

        logger.warning(
            f"Delivery {delivery.delivery_number} disputed",
            extra={'delivery_id': str(delivery.id), 'reason': reason}
        )
        return delivery
