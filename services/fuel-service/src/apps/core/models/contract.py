# services/fuel-service/src/apps/core/models/contract.py
"""
Supplier Contract Model

Price agreements with fuel suppliers.
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class ContractStatus(models.TextChoices):
    """Contract status choices."""
    ACTIVE = 'ACTIVE', 'Active'
    INACTIVE = 'INACTIVE', 'Inactive'
    EXPIRED = 'EXPIRED', 'Expired'


class SupplierContract(UUIDPrimaryKeyMixin, TimestampMixin, models.Model):
    """
    Supplier price agreement for one fuel type.

    The price applies on dates within [valid_from, valid_to] and to
    order volumes within [min_volume, max_volume], both inclusive.
    """

    contract_number = models.CharField(
        max_length=50,
        unique=True,
        db_index=True
    )
    supplier = models.ForeignKey(
        'Supplier',
        on_delete=models.PROTECT,
        related_name='contracts'
    )
    fuel_type = models.ForeignKey(
        'FuelType',
        on_delete=models.PROTECT,
        related_name='contracts'
    )

    # Validity
    valid_from = models.DateField()
    valid_to = models.DateField()

    # Volume band in liters
    min_volume = models.DecimalField(
        max_digits=12,
        decimal_places=2
    )
    max_volume = models.DecimalField(
        max_digits=12,
        decimal_places=2
    )

    # Pricing
    price_per_liter = models.DecimalField(
        max_digits=10,
        decimal_places=4
    )
    currency = models.CharField(
        max_length=3,
        blank=True,
        null=True
    )

    status = models.CharField(
        max_length=20,
        choices=ContractStatus.choices,
        default=ContractStatus.ACTIVE,
        db_index=True
    )

    class Meta:
        db_table = 'supplier_contracts'
        ordering = ['fuel_type', 'price_per_liter']
        indexes = [
            models.Index(fields=['fuel_type', 'status', 'valid_from', 'valid_to']),
        ]

    def __str__(self):
        return f"{self.contract_number} ({self.supplier_id}) {self.price_per_liter}/L"

    def is_valid_on(self, as_of_date) -> bool:
        """Check whether the contract date range covers a date."""
        return self.valid_from <= as_of_date <= self.valid_to

    def covers_volume(self, volume) -> bool:
        """Check whether a volume falls inside the contract band."""
        return self.min_volume <= volume <= self.max_volume
