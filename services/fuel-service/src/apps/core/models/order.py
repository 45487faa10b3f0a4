# services/fuel-service/src/apps/core/models/order.py
"""
Fuel Order and Delivery Models

Orders placed with suppliers and the deliveries that fulfil them.
"""

from django.db import models
from django.utils import timezone

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class OrderStatus(models.TextChoices):
    """Fuel order status choices."""
    DRAFT = 'DRAFT', 'Draft'
    SUBMITTED = 'SUBMITTED', 'Submitted'
    CONFIRMED = 'CONFIRMED', 'Confirmed'
    IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
    DELIVERED = 'DELIVERED', 'Delivered'
    CANCELLED = 'CANCELLED', 'Cancelled'


class OrderPriority(models.TextChoices):
    """Fuel order priority choices."""
    NORMAL = 'NORMAL', 'Normal'
    HIGH = 'HIGH', 'High'
    URGENT = 'URGENT', 'Urgent'


class DeliveryStatus(models.TextChoices):
    """Fuel delivery status choices."""
    SCHEDULED = 'SCHEDULED', 'Scheduled'
    IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
    COMPLETED = 'COMPLETED', 'Completed'
    VERIFIED = 'VERIFIED', 'Verified'
    DISPUTED = 'DISPUTED', 'Disputed'


class FuelOrder(UUIDPrimaryKeyMixin, TimestampMixin, models.Model):
    """
    Fuel order placed with a supplier.

    Orders are never deleted; they end either DELIVERED or CANCELLED.
    """

    order_number = models.CharField(
        max_length=50,
        unique=True,
        db_index=True
    )
    order_date = models.DateTimeField(default=timezone.now)

    flight_requirement = models.ForeignKey(
        'FlightFuelRequirement',
        on_delete=models.PROTECT,
        related_name='orders',
        blank=True,
        null=True
    )
    supplier = models.ForeignKey(
        'Supplier',
        on_delete=models.PROTECT,
        related_name='orders'
    )
    contract = models.ForeignKey(
        'SupplierContract',
        on_delete=models.PROTECT,
        related_name='orders',
        blank=True,
        null=True
    )
    airport = models.ForeignKey(
        'Airport',
        on_delete=models.PROTECT,
        related_name='fuel_orders'
    )
    fuel_type = models.ForeignKey(
        'FuelType',
        on_delete=models.PROTECT,
        related_name='fuel_orders'
    )

    # Quantity and price
    ordered_volume = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text='Ordered volume in liters'
    )
    price_per_liter = models.DecimalField(
        max_digits=10,
        decimal_places=4,
        blank=True,
        null=True
    )
    total_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        blank=True,
        null=True
    )
    currency = models.CharField(
        max_length=3,
        default='USD'
    )

    priority = models.CharField(
        max_length=10,
        choices=OrderPriority.choices,
        default=OrderPriority.NORMAL
    )
    requested_delivery_date = models.DateTimeField(
        blank=True,
        null=True
    )

    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.DRAFT,
        db_index=True
    )

    # Fulfilment
    delivered_volume = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        blank=True,
        null=True
    )
    actual_delivery_date = models.DateTimeField(
        blank=True,
        null=True
    )

    notes = models.TextField(
        blank=True,
        null=True
    )

    class Meta:
        db_table = 'fuel_orders'
        ordering = ['-order_date']
        indexes = [
            models.Index(fields=['flight_requirement', 'status']),
            models.Index(fields=['supplier', '-order_date']),
        ]

    def __str__(self):
        return f"{self.order_number}: {self.ordered_volume} L ({self.status})"

    @property
    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED


class FuelDelivery(UUIDPrimaryKeyMixin, TimestampMixin, models.Model):
    """
    Measured delivery of fuel against an order.

    Measurements are fixed once recorded; only the status may be
    corrected afterwards (verified or disputed).
    """

    delivery_number = models.CharField(
        max_length=50,
        unique=True,
        db_index=True
    )
    order = models.ForeignKey(
        'FuelOrder',
        on_delete=models.PROTECT,
        related_name='deliveries'
    )

    # Measurements
    delivered_volume = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text='Delivered volume in liters'
    )
    temperature = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        blank=True,
        null=True,
        help_text='Fuel temperature in degrees Celsius'
    )
    density = models.DecimalField(
        max_digits=6,
        decimal_places=4,
        blank=True,
        null=True,
        help_text='Observed density in kg/L'
    )
    delivery_date = models.DateTimeField(default=timezone.now)

    status = models.CharField(
        max_length=20,
        choices=DeliveryStatus.choices,
        default=DeliveryStatus.COMPLETED,
        db_index=True
    )
    dispute_reason = models.TextField(
        blank=True,
        null=True
    )

    class Meta:
        db_table = 'fuel_deliveries'
        ordering = ['-delivery_date']
        verbose_name_plural = 'fuel deliveries'

    def __str__(self):
        return f"{self.delivery_number}: {self.delivered_volume} L"
