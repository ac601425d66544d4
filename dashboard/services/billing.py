from __future__ import annotations

from typing import Optional

from dashboard.models import BillingSettings
from dashboard.services.events import data_source

# Returned when no billing_settings row has been saved yet.
DEFAULT_BILLING_SETTINGS = {'currency': 'USD', 'requirePrepayment': False, 'consultationFee': 0}


def get_billing_settings(using: Optional[str] = None) -> dict:
    with data_source('billing settings'):
        row = BillingSettings.objects.using(using).order_by('pk').first()
    if row is None:
        return dict(DEFAULT_BILLING_SETTINGS)
    return {
        'currency': row.currency,
        'requirePrepayment': row.require_prepayment,
        'consultationFee': float(row.consultation_fee or 0),
    }
