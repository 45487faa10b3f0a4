# services/fuel-service/src/apps/tests/conftest.py
"""
Pytest Configuration and Fixtures

Shared fixtures for fuel service tests.
"""

import uuid
from datetime import date, timedelta
from decimal import Decimal

import pytest


# =============================================================================
# Master Data Fixtures
# =============================================================================

@pytest.fixture
def airport(db):
    """Create an airport."""
    from apps.core.models import Airport
    return Airport.objects.create(
        icao_code='ENGM',
        iata_code='OSL',
        name='Oslo Gardermoen',
        country='NO',
    )


@pytest.fixture
def other_airport(db):
    """Create a second airport."""
    from apps.core.models import Airport
    return Airport.objects.create(
        icao_code='ENBR',
        iata_code='BGO',
        name='Bergen Flesland',
        country='NO',
    )


@pytest.fixture
def fuel_type(db):
    """Create a fuel type."""
    from apps.core.models import FuelType
    return FuelType.objects.create(
        code='JET-A1',
        name='Jet A-1',
        density_reference=Decimal('0.8000'),
    )


@pytest.fixture
def supplier(db):
    """Create a supplier."""
    from apps.core.models import Supplier
    return Supplier.objects.create(
        code='NORDIC',
        name='Nordic Aviation Fuels',
        contact_email='orders@nordic-fuels.example',
    )


@pytest.fixture
def other_supplier(db):
    """Create a second supplier."""
    from apps.core.models import Supplier
    return Supplier.objects.create(code='ARCTIC', name='Arctic Energy')


# =============================================================================
# Storage Fixtures
# =============================================================================

@pytest.fixture
def create_facility(db, airport, fuel_type):
    """Factory fixture for creating storage facilities."""
    from apps.core.models import StorageFacility

    def _create_facility(**overrides):
        data = {
            'code': f"TANK-{uuid.uuid4().hex[:6].upper()}",
            'name': 'Main tank',
            'airport': airport,
            'fuel_type': fuel_type,
            'capacity': Decimal('50000'),
            'current_level': Decimal('1000'),
            'is_operational': True,
        }
        data.update(overrides)
        return StorageFacility.objects.create(**data)

    return _create_facility


@pytest.fixture
def facility(create_facility):
    """Create a storage facility holding 1000 L."""
    return create_facility(code='TANK-01')


# =============================================================================
# Contract Fixtures
# =============================================================================

@pytest.fixture
def create_contract(db, supplier, fuel_type):
    """Factory fixture for creating supplier contracts."""
    from apps.core.models import SupplierContract, ContractStatus

    def _create_contract(**overrides):
        data = {
            'contract_number': f"CT-{uuid.uuid4().hex[:8].upper()}",
            'supplier': supplier,
            'fuel_type': fuel_type,
            'valid_from': date.today() - timedelta(days=30),
            'valid_to': date.today() + timedelta(days=30),
            'min_volume': Decimal('0'),
            'max_volume': Decimal('10000'),
            'price_per_liter': Decimal('0.9000'),
            'currency': 'USD',
            'status': ContractStatus.ACTIVE,
        }
        data.update(overrides)
        return SupplierContract.objects.create(**data)

    return _create_contract


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def requirement_data(airport, fuel_type):
    """Generate basic requirement data."""
    return {
        'flight_number': 'DY604',
        'flight_date': date.today(),
        'airport': airport,
        'fuel_type': fuel_type,
        'aircraft_registration': 'LN-NOA',
        'required_volume': Decimal('5000'),
    }


@pytest.fixture
def requirement(db, requirement_data):
    """Create an OPEN requirement."""
    from apps.core.models import FlightFuelRequirement
    return FlightFuelRequirement.objects.create(**requirement_data)


@pytest.fixture
def create_order(db, supplier, airport, fuel_type):
    """Factory fixture for creating orders without going through the service."""
    from apps.core.models import FuelOrder

    def _create_order(**overrides):
        data = {
            'order_number': f"FO-TEST-{uuid.uuid4().hex[:8].upper()}",
            'supplier': supplier,
            'airport': airport,
            'fuel_type': fuel_type,
            'ordered_volume': Decimal('1000'),
            'price_per_liter': Decimal('0.9000'),
            'total_amount': Decimal('900.00'),
        }
        data.update(overrides)
        return FuelOrder.objects.create(**data)

    return _create_order


@pytest.fixture
def order(create_order):
    """Create a DRAFT order."""
    return create_order()


@pytest.fixture
def create_operation(db, fuel_type):
    """Factory fixture for creating fueling operations."""
    from apps.core.models import FuelingOperation

    def _create_operation(**overrides):
        data = {
            'operation_number': f"OP-TEST-{uuid.uuid4().hex[:8].upper()}",
            'fuel_type': fuel_type,
            'aircraft_registration': 'LN-NOA',
            'planned_volume': Decimal('200'),
        }
        data.update(overrides)
        return FuelingOperation.objects.create(**data)

    return _create_operation


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def api_client():
    """Create API client."""
    from rest_framework.test import APIClient
    return APIClient()
