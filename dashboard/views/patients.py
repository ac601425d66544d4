"""
Patient listing and count endpoints for the clinic dashboard.

Both endpoints are read-only.  The listing accepts a single selector
(``today=true``, ``date=YYYY-MM-DD`` or ``search=term``) and an optional
``limit``; the counts endpoint returns distinct active patients for
today and for a requested date plus the registry size.
"""
from __future__ import annotations

from rest_framework.decorators import api_view
from rest_framework.response import Response

from dashboard.serializers.patient import PatientCountsQuerySerializer, PatientListQuerySerializer
from dashboard.services.counts import count_patients
from dashboard.services.patients import list_patients as plan_listing, selector_from_params
from dashboard.services.projection import project_patient


@api_view(['GET'])
def list_patients(request):
    q = PatientListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    data = q.validated_data
    selector = selector_from_params(
        today=data.get('today'),
        day=data.get('date'),
        search=data.get('search'),
    )
    rows = plan_listing(selector, limit=data.get('limit'))
    return Response([project_patient(row) for row in rows])


@api_view(['GET'])
def patient_counts(request):
    q = PatientCountsQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    return Response(count_patients(q.validated_data.get('date')))
