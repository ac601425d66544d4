"""
Database models for the clinic dashboard.

The tables already exist in the clinic database, so each model pins its
``db_table`` to the deployed name.  Patients are keyed by the externally
assigned ``patient_id``; encounters and treatments are the two
independent sources of patient activity.  Nothing here stores a "last
activity" column: it is always derived from the event tables.
"""
from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class Patient(models.Model):
    """A registered patient.

    Created at intake by another part of the system and never modified
    by the dashboard.
    """
    patient_id = models.CharField(max_length=64, primary_key=True)
    first_name = models.CharField(max_length=128, blank=True)
    last_name = models.CharField(max_length=128, blank=True)
    age = models.PositiveIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=16, blank=True)
    village = models.CharField(max_length=128, blank=True)
    # Registration time; secondary key of the listing order
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'patients'

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.patient_id})".strip()


class Encounter(models.Model):
    """A clinical encounter; its activity date is the date part of ``created_at``."""
    patient = models.ForeignKey(
        Patient, on_delete=models.CASCADE, related_name='encounters', db_column='patient_id'
    )
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'encounters'

    def __str__(self) -> str:
        return f"Encounter {self.pk} for {self.patient_id}"


class Treatment(models.Model):
    """A treatment visit with an explicit calendar ``visit_date``."""
    patient = models.ForeignKey(
        Patient, on_delete=models.CASCADE, related_name='treatments', db_column='patient_id'
    )
    visit_date = models.DateField(db_index=True)

    class Meta:
        db_table = 'treatments'

    def __str__(self) -> str:
        return f"Treatment {self.pk} for {self.patient_id} on {self.visit_date}"


class BillingSettings(models.Model):
    """Clinic-wide billing configuration.

    Logically a singleton; when several rows exist the first by primary
    key is used.
    """
    currency = models.CharField(max_length=3, default='USD')
    require_prepayment = models.BooleanField(default=False)
    consultation_fee = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))],
    )

    class Meta:
        db_table = 'billing_settings'
        verbose_name_plural = 'billing settings'

    def __str__(self) -> str:
        return f"{self.currency} fee={self.consultation_fee}"


class Service(models.Model):
    """A billable service offered by the clinic."""
    code = models.CharField(max_length=32, blank=True)
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    category = models.CharField(max_length=64, blank=True)

    class Meta:
        db_table = 'services'

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"
