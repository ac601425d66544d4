from rest_framework.decorators import api_view
from rest_framework.response import Response

from dashboard.models import Patient
from dashboard.services.events import data_source


@api_view(['GET'])
def health(request):
    return Response({'ok': True})


@api_view(['GET'])
def health_db(request):
    with data_source('health check'):
        n = Patient.objects.count()
    return Response({'ok': True, 'patients': n})
