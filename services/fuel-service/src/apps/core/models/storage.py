# services/fuel-service/src/apps/core/models/storage.py
"""
Storage Models

Storage facilities and their append-only inventory ledger.
"""

from decimal import Decimal

from django.db import models
from django.utils import timezone

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class StorageFacility(UUIDPrimaryKeyMixin, TimestampMixin, models.Model):
    """
    Physical fuel storage unit (tank or hydrant system) at an airport.

    current_level is only written by InventoryService; it always equals
    the opening level plus the signed volumes of the facility's ledger.
    """

    code = models.CharField(
        max_length=50,
        unique=True,
        db_index=True
    )
    name = models.CharField(max_length=255)
    airport = models.ForeignKey(
        'Airport',
        on_delete=models.PROTECT,
        related_name='storage_facilities'
    )
    fuel_type = models.ForeignKey(
        'FuelType',
        on_delete=models.PROTECT,
        related_name='storage_facilities'
    )

    capacity = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        blank=True,
        null=True,
        help_text='Usable capacity in liters'
    )
    current_level = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        blank=True,
        null=True,
        help_text='Current volume in liters'
    )
    is_operational = models.BooleanField(
        default=True,
        db_index=True
    )

    class Meta:
        db_table = 'storage_facilities'
        ordering = ['code']
        verbose_name_plural = 'storage facilities'
        indexes = [
            models.Index(fields=['airport', 'fuel_type', 'is_operational']),
        ]

    def __str__(self):
        return f"{self.code} ({self.airport_id})"

    @property
    def level(self) -> Decimal:
        """Current level with an unset level read as empty."""
        return self.current_level if self.current_level is not None else Decimal('0')

    @property
    def fill_percentage(self):
        """Fill level as a percentage of capacity, if capacity is known."""
        if not self.capacity:
            return None
        return round(self.level / self.capacity * 100, 1)


class InventoryTransactionType(models.TextChoices):
    """Inventory transaction type choices."""
    RECEIPT = 'RECEIPT', 'Receipt'
    DISPENSE = 'DISPENSE', 'Dispense'
    ADJUSTMENT = 'ADJUSTMENT', 'Adjustment'


class InventoryTransaction(UUIDPrimaryKeyMixin, models.Model):
    """
    Ledger entry for a storage facility.

    Entries are never updated or deleted. For each facility, entries
    form a chain ordered by sequence: balance_after of one entry is
    the balance_before of the next.
    """

    transaction_number = models.CharField(
        max_length=50,
        unique=True,
        db_index=True
    )
    storage_facility = models.ForeignKey(
        'StorageFacility',
        on_delete=models.PROTECT,
        related_name='inventory_transactions'
    )
    sequence = models.PositiveIntegerField(
        help_text='Position of the entry in the facility ledger, starting at 1'
    )
    transaction_type = models.CharField(
        max_length=20,
        choices=InventoryTransactionType.choices,
        db_index=True
    )

    # Signed volume: positive adds stock, negative removes it
    volume = models.DecimalField(
        max_digits=12,
        decimal_places=2
    )
    balance_before = models.DecimalField(
        max_digits=12,
        decimal_places=2
    )
    balance_after = models.DecimalField(
        max_digits=12,
        decimal_places=2
    )

    reference_doc = models.CharField(
        max_length=50,
        blank=True,
        null=True,
        db_index=True,
        help_text='Number of the document that caused the movement'
    )
    notes = models.TextField(
        blank=True,
        null=True
    )

    transaction_date = models.DateTimeField(default=timezone.now)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'inventory_transactions'
        ordering = ['storage_facility', 'sequence']
        constraints = [
            models.UniqueConstraint(
                fields=['storage_facility', 'sequence'],
                name='uq_inventory_transaction_facility_sequence'
            ),
        ]
        indexes = [
            models.Index(fields=['storage_facility', '-transaction_date']),
        ]

    def __str__(self):
        return f"{self.transaction_number}: {self.transaction_type} {self.volume}"

    @property
    def is_balanced(self) -> bool:
        """Check the entry's own arithmetic."""
        return self.balance_after == self.balance_before + self.volume
