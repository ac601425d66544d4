"""
Django admin registrations for the dashboard models.

The dashboard never writes clinical data, so every registration is
read-only: superusers can inspect patients, activity and billing
configuration via ``/admin/`` but not change them here.
"""

from django.contrib import admin

from .models import BillingSettings, Encounter, Patient, Service, Treatment


class ReadOnlyAdmin(admin.ModelAdmin):
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Patient)
class PatientAdmin(ReadOnlyAdmin):
    list_display = ('patient_id', 'first_name', 'last_name', 'age', 'gender', 'village', 'created_at')
    search_fields = ('patient_id', 'first_name', 'last_name')
    list_filter = ('gender', 'village')


@admin.register(Encounter)
class EncounterAdmin(ReadOnlyAdmin):
    list_display = ('id', 'patient', 'created_at')
    search_fields = ('patient__patient_id',)
    date_hierarchy = 'created_at'


@admin.register(Treatment)
class TreatmentAdmin(ReadOnlyAdmin):
    list_display = ('id', 'patient', 'visit_date')
    search_fields = ('patient__patient_id',)
    date_hierarchy = 'visit_date'


@admin.register(BillingSettings)
class BillingSettingsAdmin(ReadOnlyAdmin):
    list_display = ('id', 'currency', 'require_prepayment', 'consultation_fee')


@admin.register(Service)
class ServiceAdmin(ReadOnlyAdmin):
    list_display = ('code', 'name', 'price', 'category')
    search_fields = ('code', 'name')
