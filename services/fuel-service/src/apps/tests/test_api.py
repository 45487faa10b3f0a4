# services/fuel-service/src/apps/tests/test_api.py
"""
API Tests

Tests for fuel service REST API endpoints.
"""

import uuid
from datetime import date
from decimal import Decimal
from unittest import mock

import pytest
from rest_framework import status

from apps.core.models import (
    InventoryTransaction,
    InventoryTransactionType,
    OrderStatus,
)

BASE_URL = '/api/v1/fuel'


# =============================================================================
# Requirement API Tests
# =============================================================================

@pytest.mark.django_db
class TestRequirementAPI:
    """Tests for requirement endpoints."""

    def test_create_requirement(self, api_client, airport, fuel_type):
        """Test creating a requirement."""
        data = {
            'flight_number': 'dy604',
            'flight_date': date.today().isoformat(),
            'airport': str(airport.id),
            'fuel_type': str(fuel_type.id),
            'required_volume': '5000.00',
        }

        response = api_client.post(f'{BASE_URL}/requirements/', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['flight_number'] == 'DY604'
        assert response.data['status'] == 'OPEN'

    def test_create_requirement_invalid_volume(self, api_client, airport, fuel_type):
        """Test validation errors use the error envelope."""
        data = {
            'flight_number': 'DY604',
            'flight_date': date.today().isoformat(),
            'airport': str(airport.id),
            'fuel_type': str(fuel_type.id),
            'required_volume': '0',
        }

        response = api_client.post(f'{BASE_URL}/requirements/', data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert response.data['error']['code'] == 'VALIDATION_ERROR'
        assert 'required_volume' in response.data['error']['details']

    def test_list_requirements(self, api_client, requirement):
        """Test listing requirements."""
        response = api_client.get(f'{BASE_URL}/requirements/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['count'] == 1
        assert response.data['results'][0]['flight_number'] == 'DY604'

    def test_filter_requirements_by_status(self, api_client, requirement):
        """Test filtering requirements by status."""
        response = api_client.get(f'{BASE_URL}/requirements/', {'status': 'CONFIRMED'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 0

    def test_confirm_requirement(self, api_client, requirement):
        """Test confirming a requirement."""
        response = api_client.post(f'{BASE_URL}/requirements/{requirement.id}/confirm/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'CONFIRMED'

    def test_cancel_requirement(self, api_client, requirement):
        """Test cancelling a requirement."""
        response = api_client.post(f'{BASE_URL}/requirements/{requirement.id}/cancel/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'CANCELLED'

    def test_confirm_missing_requirement(self, api_client, db):
        """Test confirming an unknown requirement returns 404."""
        response = api_client.post(f'{BASE_URL}/requirements/{uuid.uuid4()}/confirm/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['success'] is False
        assert response.data['error']['code'] == 'DOCUMENT_NOT_FOUND'


# =============================================================================
# Order API Tests
# =============================================================================

@pytest.mark.django_db
class TestOrderAPI:
    """Tests for order endpoints."""

    def test_place_order(self, api_client, supplier, airport, fuel_type, requirement):
        """Test placing an order."""
        data = {
            'flight_requirement': str(requirement.id),
            'supplier': str(supplier.id),
            'airport': str(airport.id),
            'fuel_type': str(fuel_type.id),
            'ordered_volume': '5000.00',
            'price_per_liter': '0.8500',
            'priority': 'HIGH',
        }

        response = api_client.post(f'{BASE_URL}/orders/', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['order_number'].startswith('FO-')
        assert response.data['status'] == 'DRAFT'
        assert response.data['total_amount'] == '4250.00'
        assert response.data['currency'] == 'USD'

    def test_place_order_contract_mismatch(self, api_client, create_contract, other_supplier, airport, fuel_type):
        """Test an order cannot use another supplier's contract."""
        contract = create_contract()
        data = {
            'supplier': str(other_supplier.id),
            'contract': str(contract.id),
            'airport': str(airport.id),
            'fuel_type': str(fuel_type.id),
            'ordered_volume': '1000.00',
        }

        response = api_client.post(f'{BASE_URL}/orders/', data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_get_order_with_deliveries(self, api_client, order):
        """Test order detail lists its deliveries."""
        api_client.post(
            f'{BASE_URL}/orders/{order.id}/record-delivery/',
            {'volume': '500'},
            format='json'
        )

        response = api_client.get(f'{BASE_URL}/orders/{order.id}/')

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['deliveries']) == 1

    def test_confirm_order_twice(self, api_client, order):
        """Test confirming an order is idempotent."""
        api_client.post(f'{BASE_URL}/orders/{order.id}/confirm/')
        response = api_client.post(f'{BASE_URL}/orders/{order.id}/confirm/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'CONFIRMED'

    def test_cancel_delivered_order(self, api_client, create_order):
        """Test cancelling a delivered order is rejected."""
        order = create_order(status=OrderStatus.DELIVERED)

        response = api_client.post(f'{BASE_URL}/orders/{order.id}/cancel/')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'DOCUMENT_STATE_ERROR'
        assert response.data['error']['message'] == 'Cannot cancel a delivered order'

        order.refresh_from_db()
        assert order.status == OrderStatus.DELIVERED

    def test_record_delivery(self, api_client, order):
        """Test recording a delivery."""
        response = api_client.post(
            f'{BASE_URL}/orders/{order.id}/record-delivery/',
            {'volume': '500', 'temperature': '15', 'density': '0.8'},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['delivery_number'].startswith('DL-')
        assert response.data['status'] == 'COMPLETED'
        assert response.data['delivered_volume'] == '500.00'
        assert response.data['density'] == '0.8000'

        order.refresh_from_db()
        assert order.status == OrderStatus.DELIVERED

    def test_record_delivery_requires_volume(self, api_client, order):
        """Test a delivery needs a volume."""
        response = api_client.post(
            f'{BASE_URL}/orders/{order.id}/record-delivery/', {}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_record_delivery_missing_order(self, api_client, db):
        """Test recording against an unknown order returns 404."""
        response = api_client.post(
            f'{BASE_URL}/orders/{uuid.uuid4()}/record-delivery/',
            {'volume': '500'},
            format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_store_failure_returns_503(self, api_client, order):
        """Test database failures are reported as unavailable."""
        from apps.core.services.exceptions import StoreError

        with mock.patch(
            'apps.api.views.order_views.OrderService.confirm_order',
            side_effect=StoreError(operation='OrderService.confirm_order'),
        ):
            response = api_client.post(f'{BASE_URL}/orders/{order.id}/confirm/')

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data['error']['code'] == 'STORE_ERROR'


# =============================================================================
# Delivery API Tests
# =============================================================================

@pytest.mark.django_db
class TestDeliveryAPI:
    """Tests for delivery endpoints."""

    def test_verify_and_dispute(self, api_client, order):
        """Test delivery status corrections."""
        created = api_client.post(
            f'{BASE_URL}/orders/{order.id}/record-delivery/',
            {'volume': '500'},
            format='json'
        )
        delivery_id = created.data['id']

        verified = api_client.post(f'{BASE_URL}/deliveries/{delivery_id}/verify/')
        disputed = api_client.post(
            f'{BASE_URL}/deliveries/{delivery_id}/dispute/',
            {'reason': 'Seal broken on arrival'},
            format='json'
        )

        assert verified.data['status'] == 'VERIFIED'
        assert disputed.status_code == status.HTTP_200_OK
        assert disputed.data['status'] == 'DISPUTED'
        assert disputed.data['dispute_reason'] == 'Seal broken on arrival'


# =============================================================================
# Fueling Operation API Tests
# =============================================================================

@pytest.mark.django_db
class TestFuelingOperationAPI:
    """Tests for fueling operation endpoints."""

    def test_create_operation(self, api_client, facility, fuel_type):
        """Test creating an operation."""
        data = {
            'storage_facility': str(facility.id),
            'fuel_type': str(fuel_type.id),
            'aircraft_registration': 'ln-noa',
            'planned_volume': '300.00',
        }

        response = api_client.post(f'{BASE_URL}/operations/', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['operation_number'].startswith('OP-')
        assert response.data['aircraft_registration'] == 'LN-NOA'
        assert response.data['status'] == 'PENDING'

    def test_fueling_lifecycle(self, api_client, create_operation, facility):
        """Test start then complete draws from storage."""
        operation = create_operation(storage_facility=facility)

        started = api_client.post(f'{BASE_URL}/operations/{operation.id}/start/')
        completed = api_client.post(
            f'{BASE_URL}/operations/{operation.id}/complete/',
            {'volume_dispensed': '300'},
            format='json'
        )

        assert started.data['status'] == 'IN_PROGRESS'
        assert completed.status_code == status.HTTP_200_OK
        assert completed.data['status'] == 'COMPLETED'
        assert completed.data['volume_dispensed'] == '300.00'

        facility.refresh_from_db()
        assert facility.current_level == Decimal('700')

    def test_complete_missing_operation(self, api_client, db):
        """Test completing an unknown operation returns 404."""
        response = api_client.post(
            f'{BASE_URL}/operations/{uuid.uuid4()}/complete/',
            {'volume_dispensed': '300'},
            format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Inventory API Tests
# =============================================================================

@pytest.mark.django_db
class TestInventoryAPI:
    """Tests for storage and ledger endpoints."""

    def test_post_receipt(self, api_client, facility):
        """Test posting a manual receipt."""
        data = {
            'storage_facility': str(facility.id),
            'transaction_type': 'RECEIPT',
            'volume': '2500.00',
            'reference_doc': 'DL-20240315-0001',
        }

        response = api_client.post(f'{BASE_URL}/inventory-transactions/', data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['balance_before'] == '1000.00'
        assert response.data['balance_after'] == '3500.00'
        assert response.data['sequence'] == 1

    def test_manual_dispense_rejected(self, api_client, facility):
        """Test dispensing cannot be posted by hand."""
        data = {
            'storage_facility': str(facility.id),
            'transaction_type': 'DISPENSE',
            'volume': '-100.00',
        }

        response = api_client.post(f'{BASE_URL}/inventory-transactions/', data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert InventoryTransaction.objects.count() == 0

    def test_negative_receipt_rejected(self, api_client, facility):
        """Test receipts must add stock."""
        data = {
            'storage_facility': str(facility.id),
            'transaction_type': 'RECEIPT',
            'volume': '-100.00',
        }

        response = api_client.post(f'{BASE_URL}/inventory-transactions/', data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_facility_ledger(self, api_client, facility):
        """Test reading a facility ledger."""
        from apps.core.services import InventoryService

        InventoryService.post_transaction(facility.id, InventoryTransactionType.RECEIPT, Decimal('500'))
        InventoryService.post_transaction(facility.id, InventoryTransactionType.ADJUSTMENT, Decimal('-20'))

        response = api_client.get(f'{BASE_URL}/facilities/{facility.id}/ledger/')

        assert response.status_code == status.HTTP_200_OK
        assert [e['sequence'] for e in response.data['results']] == [1, 2]
        assert response.data['results'][1]['balance_after'] == '1480.00'

    def test_facility_reconciliation(self, api_client, facility):
        """Test the ledger audit endpoint."""
        from apps.core.services import InventoryService

        InventoryService.post_transaction(facility.id, InventoryTransactionType.RECEIPT, Decimal('500'))

        response = api_client.get(f'{BASE_URL}/facilities/{facility.id}/reconciliation/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_consistent'] is True
        assert response.data['entry_count'] == 1
        assert response.data['current_level'] == '1500.00'

    def test_facility_detail(self, api_client, create_facility):
        """Test facility detail shows its fill level."""
        facility = create_facility(capacity=Decimal('4000'), current_level=Decimal('1000'))

        response = api_client.get(f'{BASE_URL}/facilities/{facility.id}/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['fill_percentage'] == '25.0'


# =============================================================================
# Function API Tests
# =============================================================================

@pytest.mark.django_db
class TestFunctionAPI:
    """Tests for fuel function endpoints."""

    def test_available_fuel(self, api_client, create_facility, airport, fuel_type):
        """Test available fuel at an airport."""
        create_facility(current_level=Decimal('1000'))
        create_facility(current_level=Decimal('2500'))

        response = api_client.get(
            f'{BASE_URL}/functions/available-fuel/',
            {'airport_id': str(airport.id), 'fuel_type_id': str(fuel_type.id)}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'available_volume': '3500.00'}

    def test_available_fuel_beyond_single_tank_precision(self, api_client, create_facility, airport, fuel_type):
        """Test a total wider than any one tank level is returned in full."""
        for _ in range(10):
            create_facility(current_level=Decimal('99999999999.00'))

        response = api_client.get(
            f'{BASE_URL}/functions/available-fuel/',
            {'airport_id': str(airport.id), 'fuel_type_id': str(fuel_type.id)}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'available_volume': '999999999990.00'}

    def test_available_fuel_bad_input(self, api_client, db):
        """Test malformed parameters are rejected."""
        response = api_client.get(
            f'{BASE_URL}/functions/available-fuel/',
            {'airport_id': 'not-a-uuid'}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False

    def test_optimal_supplier(self, api_client, create_contract, airport, fuel_type, supplier):
        """Test the cheapest covering contract is returned."""
        create_contract(price_per_liter=Decimal('0.90'))
        create_contract(
            price_per_liter=Decimal('0.85'),
            min_volume=Decimal('500'),
            max_volume=Decimal('5000'),
        )
        create_contract(price_per_liter=Decimal('0.80'), min_volume=Decimal('2000'))

        response = api_client.get(
            f'{BASE_URL}/functions/optimal-supplier/',
            {
                'airport_id': str(airport.id),
                'fuel_type_id': str(fuel_type.id),
                'volume': '1000',
            }
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['supplier_id'] == str(supplier.id)
        assert response.data['price_per_liter'] == '0.8500'
        assert response.data['estimated_total'] == '850.00'

    def test_optimal_supplier_none(self, api_client, airport, fuel_type):
        """Test null when no contract matches."""
        response = api_client.get(
            f'{BASE_URL}/functions/optimal-supplier/',
            {
                'airport_id': str(airport.id),
                'fuel_type_id': str(fuel_type.id),
                'volume': '1000',
            }
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data is None

    def test_flight_fuel_cost(self, api_client, requirement, create_order):
        """Test the cost breakdown of a requirement."""
        create_order(flight_requirement=requirement, total_amount=Decimal('1000.00'))
        create_order(flight_requirement=requirement, total_amount=Decimal('2000.00'))

        response = api_client.get(
            f'{BASE_URL}/functions/flight-fuel-cost/',
            {'flight_requirement_id': str(requirement.id)}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['fuel_cost'] == '3000.00'
        assert response.data['taxes'] == '150.00'
        assert response.data['fees'] == '60.00'
        assert response.data['total_cost'] == '3210.00'
        assert response.data['currency'] == 'USD'

    def test_flight_fuel_cost_beyond_order_precision(self, api_client, requirement, create_order):
        """Test totals wider than a single order amount are returned in full."""
        create_order(flight_requirement=requirement, total_amount=Decimal('999999999999.00'))
        create_order(flight_requirement=requirement, total_amount=Decimal('999999999999.00'))

        response = api_client.get(
            f'{BASE_URL}/functions/flight-fuel-cost/',
            {'flight_requirement_id': str(requirement.id)}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['fuel_cost'] == '1999999999998.00'
        assert response.data['taxes'] == '99999999999.90'
        assert response.data['fees'] == '39999999999.96'
        assert response.data['total_cost'] == '2139999999997.86'

    def test_flight_fuel_cost_missing_requirement(self, api_client, db):
        """Test costing an unknown requirement returns 404."""
        response = api_client.get(
            f'{BASE_URL}/functions/flight-fuel-cost/',
            {'flight_requirement_id': str(uuid.uuid4())}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error']['code'] == 'DOCUMENT_NOT_FOUND'


# =============================================================================
# Health API Tests
# =============================================================================

@pytest.mark.django_db
class TestHealthAPI:
    """Tests for health endpoints."""

    def test_health(self, api_client):
        response = api_client.get('/health/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['service'] == 'fuel-service'

    def test_readiness(self, api_client):
        response = api_client.get('/health/ready/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['checks'][0]['status'] == 'healthy'
