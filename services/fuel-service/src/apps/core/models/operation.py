# services/fuel-service/src/apps/core/models/operation.py
"""
Fueling Operation Model

Dispensing of fuel from storage into an aircraft.
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class OperationStatus(models.TextChoices):
    """Fueling operation status choices."""
    PENDING = 'PENDING', 'Pending'
    IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
    COMPLETED = 'COMPLETED', 'Completed'


class FuelingOperation(UUIDPrimaryKeyMixin, TimestampMixin, models.Model):
    """
    Fueling of one aircraft.

    Created before fueling begins. Completing the operation draws the
    dispensed volume from the storage facility, when one is set.
    """

    operation_number = models.CharField(
        max_length=50,
        unique=True,
        db_index=True
    )
    storage_facility = models.ForeignKey(
        'StorageFacility',
        on_delete=models.PROTECT,
        related_name='fueling_operations',
        blank=True,
        null=True
    )
    flight_requirement = models.ForeignKey(
        'FlightFuelRequirement',
        on_delete=models.PROTECT,
        related_name='fueling_operations',
        blank=True,
        null=True
    )
    fuel_type = models.ForeignKey(
        'FuelType',
        on_delete=models.PROTECT,
        related_name='fueling_operations',
        blank=True,
        null=True
    )
    aircraft_registration = models.CharField(
        max_length=10,
        blank=True,
        null=True
    )

    planned_volume = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        blank=True,
        null=True
    )
    volume_dispensed = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        blank=True,
        null=True
    )

    status = models.CharField(
        max_length=20,
        choices=OperationStatus.choices,
        default=OperationStatus.PENDING,
        db_index=True
    )
    start_time = models.DateTimeField(
        blank=True,
        null=True
    )
    end_time = models.DateTimeField(
        blank=True,
        null=True
    )

    class Meta:
        db_table = 'fueling_operations'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.operation_number} ({self.status})"

    @property
    def duration_minutes(self):
        """Elapsed fueling time in minutes, once both timestamps are set."""
        if self.start_time and self.end_time:
            return round((self.end_time - self.start_time).total_seconds() / 60, 1)
        return None
