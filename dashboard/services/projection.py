from __future__ import annotations

from dashboard.services.patients import PatientActivity

# Billing balances are not computed yet; the dashboard expects this object.
SERVICE_STATUS_PLACEHOLDER = {'balance': 0, 'balanceToday': 0}


def project_patient(row: PatientActivity) -> dict:
    """Shape one listing row for the dashboard.

    Dates stay as ``date``/``datetime`` objects; the DRF JSON renderer
    writes them as ISO 8601 strings.
    """
    p = row.patient
    return {
        'patientId': p.patient_id,
        'firstName': p.first_name,
        'lastName': p.last_name,
        'age': p.age,
        'gender': p.gender,
        'village': p.village,
        'lastEncounterDate': row.last_activity_date,
        'createdAt': p.created_at,
        'serviceStatus': dict(SERVICE_STATUS_PLACEHOLDER),
    }
