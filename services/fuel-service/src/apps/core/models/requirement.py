# services/fuel-service/src/apps/core/models/requirement.py
"""
Flight Fuel Requirement Model

A flight's need for a volume of a fuel grade at an airport.
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class RequirementStatus(models.TextChoices):
    """Requirement status choices."""
    OPEN = 'OPEN', 'Open'
    CONFIRMED = 'CONFIRMED', 'Confirmed'
    CANCELLED = 'CANCELLED', 'Cancelled'


class FlightFuelRequirement(UUIDPrimaryKeyMixin, TimestampMixin, models.Model):
    """Fuel requirement raised by flight planning for one flight."""

    flight_number = models.CharField(
        max_length=10,
        db_index=True
    )
    flight_date = models.DateField(db_index=True)
    airport = models.ForeignKey(
        'Airport',
        on_delete=models.PROTECT,
        related_name='fuel_requirements',
        help_text='Departure airport where the aircraft is fueled'
    )
    fuel_type = models.ForeignKey(
        'FuelType',
        on_delete=models.PROTECT,
        related_name='fuel_requirements'
    )
    aircraft_registration = models.CharField(
        max_length=10,
        blank=True,
        null=True
    )

    required_volume = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text='Required volume in liters'
    )
    currency = models.CharField(
        max_length=3,
        blank=True,
        null=True
    )

    status = models.CharField(
        max_length=20,
        choices=RequirementStatus.choices,
        default=RequirementStatus.OPEN,
        db_index=True
    )
    notes = models.TextField(
        blank=True,
        null=True
    )

    class Meta:
        db_table = 'flight_fuel_requirements'
        ordering = ['-flight_date', 'flight_number']

    def __str__(self):
        return f"{self.flight_number} {self.flight_date}: {self.required_volume} L"
