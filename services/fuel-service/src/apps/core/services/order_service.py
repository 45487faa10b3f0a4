# services/fuel-service/src/apps/core/services/order_service.py
"""
Order Service

Fuel order lifecycle and delivery recording.
"""

import uuid
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from ..models import (
    FuelOrder,
    FuelDelivery,
    OrderStatus,
    DeliveryStatus,
)
from .base import get_document
from .exceptions import DocumentStateError, FuelValidationError, store_operation
from .numbering import DocumentKind, DocumentNumberService

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service for fuel orders.

    Transitions are permissive: confirm is allowed from any status and
    cancel from any status except DELIVERED.
    """

    # ==========================================================================
    # Creation
    # ==========================================================================

    @classmethod
    @store_operation
    @transaction.atomic
    def place_order(cls, order_data: Dict[str, Any]) -> FuelOrder:
        """
        Create a DRAFT order with a generated order number.

        When a contract is given without a price, the contract's price and
        currency apply. The total is volume times price unless supplied.

        Args:
            order_data: Field values keyed by model field name

        Returns:
            Created FuelOrder instance

        Raises:
            FuelValidationError: If the ordered volume is not positive
        """
        data = dict(order_data)
        for generated in ('order_number', 'order_date', 'status', 'delivered_volume', 'actual_delivery_date'):
            data.pop(generated, None)

        ordered_volume = data.get('ordered_volume')
        if ordered_volume is None or Decimal(str(ordered_volume)) <= 0:
            raise FuelValidationError(
                "Ordered volume must be greater than zero",
                field='ordered_volume'
            )

        contract = data.get('contract')
        requirement = data.get('flight_requirement')

        if contract is not None and data.get('price_per_liter') is None:
            data['price_per_liter'] = contract.price_per_liter

        if not data.get('currency'):
            data['currency'] = (
                (contract.currency if contract is not None else None)
                or (requirement.currency if requirement is not None else None)
                or getattr(settings, 'FUEL_DEFAULT_CURRENCY', 'USD')
            )

        if data.get('total_amount') is None and data.get('price_per_liter') is not None:
            data['total_amount'] = (
                Decimal(str(ordered_volume)) * Decimal(str(data['price_per_liter']))
            ).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)

        order = FuelOrder.objects.create(
            order_number=DocumentNumberService.generate(DocumentKind.ORDER),
            order_date=timezone.now(),
            status=OrderStatus.DRAFT,
            **data
        )

        logger.info(
            f"Placed fuel order {order.order_number}",
            extra={
                'order_id': str(order.id),
                'supplier_id': str(order.supplier_id),
                'total_amount': str(order.total_amount),
            }
        )
        return order

    @classmethod
    def get_order(cls, order_id: uuid.UUID) -> FuelOrder:
        return get_document(FuelOrder, order_id)

    # ==========================================================================
    # Transitions
    # ==========================================================================

    @classmethod
    @store_operation
    @transaction.atomic
    def confirm_order(cls, order_id: uuid.UUID) -> FuelOrder:
        """
        Mark an order CONFIRMED.

        Confirming an already confirmed order leaves it unchanged.
        """
        order = get_document(FuelOrder, order_id, for_update=True)
        if order.status != OrderStatus.CONFIRMED:
            previous = order.status
            order.status = OrderStatus.CONFIRMED
            order.save(update_fields=['status', 'updated_at'])
            logger.info(
                f"Order {order.order_number} {previous} -> {order.status}",
                extra={'order_id': str(order.id)}
            )
        return order

    @classmethod
    @store_operation
    @transaction.atomic
    def cancel_order(cls, order_id: uuid.UUID) -> FuelOrder:
        """
        Mark an order CANCELLED.

        Raises:
            DocumentNotFoundError: If the order does not exist
            DocumentStateError: If the order was already delivered
        """
        order = get_document(FuelOrder, order_id, for_update=True)

        if order.status == OrderStatus.DELIVERED:
            raise DocumentStateError(
                current_state=order.status,
                target_state=OrderStatus.CANCELLED,
                message="Cannot cancel a delivered order",
                details={'order_number': order.order_number}
            )

        previous = order.status
        order.status = OrderStatus.CANCELLED
        order.save(update_fields=['status', 'updated_at'])

        logger.info(
            f"Order {order.order_number} {previous} -> {order.status}",
            extra={'order_id': str(order.id)}
        )
        return order

    @classmethod
    @store_operation
    @transaction.atomic
    def record_delivery(
        cls,
        order_id: uuid.UUID,
        volume: Decimal,
        temperature: Decimal = None,
        density: Decimal = None,
    ) -> FuelDelivery:
        """
        Record a completed delivery against an order.

        The order becomes DELIVERED with the delivered volume and date.
        Storage levels are not changed; receipts into storage are posted
        separately through the inventory ledger.

        Args:
            order_id: FuelOrder UUID
            volume: Delivered volume in liters
            temperature: Fuel temperature in degrees Celsius
            density: Observed density in kg/L

        Returns:
            Created FuelDelivery instance

        Raises:
            DocumentNotFoundError: If the order does not exist
        """
        order = get_document(FuelOrder, order_id, for_update=True)
        now = timezone.now()

        delivery = FuelDelivery.objects.create(
            delivery_number=DocumentNumberService.generate(DocumentKind.DELIVERY, now=now),
            order=order,
            delivered_volume=volume,
            temperature=temperature,
            density=density,
            delivery_date=now,
            status=DeliveryStatus.COMPLETED,
        )

        order.status = OrderStatus.DELIVERED
        order.delivered_volume = volume
        order.actual_delivery_date = now
        order.save(update_fields=[
            'status', 'delivered_volume', 'actual_delivery_date', 'updated_at'
        ])

        logger.info(
            f"Recorded delivery {delivery.delivery_number} for order {order.order_number}",
            extra={
                'order_id': str(order.id),
                'delivery_id': str(delivery.id),
                'delivered_volume': str(volume),
            }
        )
        return delivery
