# services/fuel-service/src/apps/core/models/master_data.py
"""
Master Data Models

Airports, fuel grades and suppliers referenced by fuel documents.
These are maintained by the master data service and read here.
"""

from django.db import models

from shared.common.mixins import UUIDPrimaryKeyMixin, TimestampMixin, ActiveFlagMixin


class Airport(UUIDPrimaryKeyMixin, TimestampMixin, ActiveFlagMixin, models.Model):
    """Airport where fuel is stored and dispensed."""

    icao_code = models.CharField(
        max_length=4,
        unique=True,
        help_text='ICAO location indicator, e.g. ENGM'
    )
    iata_code = models.CharField(
        max_length=3,
        blank=True,
        null=True
    )
    name = models.CharField(max_length=255)
    country = models.CharField(
        max_length=2,
        blank=True,
        null=True,
        help_text='ISO 3166-1 alpha-2 country code'
    )

    class Meta:
        db_table = 'airports'
        ordering = ['icao_code']

    def __str__(self):
        return f"{self.icao_code} - {self.name}"


class FuelType(UUIDPrimaryKeyMixin, TimestampMixin, ActiveFlagMixin, models.Model):
    """Fuel grade, e.g. Jet A-1 or 100LL Avgas."""

    code = models.CharField(
        max_length=20,
        unique=True,
        help_text='Grade code, e.g. JET-A1'
    )
    name = models.CharField(max_length=100)
    density_reference = models.DecimalField(
        max_digits=6,
        decimal_places=4,
        blank=True,
        null=True,
        help_text='Reference density at 15C in kg/L'
    )

    class Meta:
        db_table = 'fuel_types'
        ordering = ['code']

    def __str__(self):
        return self.code


class Supplier(UUIDPrimaryKeyMixin, TimestampMixin, ActiveFlagMixin, models.Model):
    """Fuel supplier holding contracts with the operator."""

    code = models.CharField(max_length=20, unique=True)
    name = models.CharField(max_length=255)
    contact_email = models.EmailField(
        blank=True,
        null=True
    )

    class Meta:
        db_table = 'suppliers'
        ordering = ['name']

    def __str__(self):
        return self.name
