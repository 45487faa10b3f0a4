from django.contrib import admin
from .models import (
    Airport,
    FuelType,
    Supplier,
    SupplierContract,
    FlightFuelRequirement,
    FuelOrder,
    FuelDelivery,
    FuelingOperation,
    StorageFacility,
    InventoryTransaction,
    DocumentSequence,
)


@admin.register(Airport)
class AirportAdmin(admin.ModelAdmin):
    list_display = ['icao_code', 'iata_code', 'name', 'country', 'is_active']
    search_fields = ['icao_code', 'iata_code', 'name']


@admin.register(FuelType)
class FuelTypeAdmin(admin.ModelAdmin):
    list_display = ['code', 'name', 'density_reference', 'is_active']


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ['code', 'name', 'contact_email', 'is_active']
    search_fields = ['code', 'name']


@admin.register(SupplierContract)
class SupplierContractAdmin(admin.ModelAdmin):
    list_display = ['contract_number', 'supplier', 'fuel_type', 'price_per_liter', 'valid_from', 'valid_to', 'status']
    list_filter = ['status', 'fuel_type']
    search_fields = ['contract_number']


@admin.register(FlightFuelRequirement)
class FlightFuelRequirementAdmin(admin.ModelAdmin):
    list_display = ['flight_number', 'flight_date', 'airport', 'fuel_type', 'required_volume', 'status']
    list_filter = ['status']
    readonly_fields = ['status']


@admin.register(FuelOrder)
class FuelOrderAdmin(admin.ModelAdmin):
    list_display = ['order_number', 'supplier', 'ordered_volume', 'total_amount', 'priority', 'status']
    list_filter = ['status', 'priority']
    search_fields = ['order_number']
    readonly_fields = ['order_number', 'order_date', 'status', 'delivered_volume', 'actual_delivery_date']


@admin.register(FuelDelivery)
class FuelDeliveryAdmin(admin.ModelAdmin):
    list_display = ['delivery_number', 'order', 'delivered_volume', 'delivery_date', 'status']
    list_filter = ['status']
    readonly_fields = ['delivery_number', 'order', 'delivered_volume', 'temperature', 'density', 'delivery_date']


@admin.register(FuelingOperation)
class FuelingOperationAdmin(admin.ModelAdmin):
    list_display = ['operation_number', 'aircraft_registration', 'storage_facility', 'volume_dispensed', 'status']
    list_filter = ['status']
    readonly_fields = ['operation_number', 'status', 'start_time', 'end_time', 'volume_dispensed']


@admin.register(StorageFacility)
class StorageFacilityAdmin(admin.ModelAdmin):
    list_display = ['code', 'name', 'airport', 'fuel_type', 'capacity', 'current_level', 'is_operational']
    list_filter = ['is_operational', 'fuel_type']
    readonly_fields = ['current_level']


@admin.register(InventoryTransaction)
class InventoryTransactionAdmin(admin.ModelAdmin):
    list_display = ['transaction_number', 'storage_facility', 'sequence', 'transaction_type', 'volume', 'balance_after']
    list_filter = ['transaction_type']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(DocumentSequence)
class DocumentSequenceAdmin(admin.ModelAdmin):
    list_display = ['prefix', 'period', 'last_value', 'updated_at']
    readonly_fields = ['last_value']
