"""
URL mappings for the dashboard API.

Paths mirror those the dashboard front-end calls.  Trailing slashes are
deliberately omitted.
"""
from django.urls import path

from .views import billing, health, patients

urlpatterns = [
    path('health', health.health),
    path('health/db', health.health_db),
    # Patients
    path('patients', patients.list_patients, name='patients'),
    path('patients/counts', patients.patient_counts, name='patient-counts'),
    # Billing
    path('billing/settings', billing.billing_settings, name='billing-settings'),
    path('services', billing.services, name='services'),
]
