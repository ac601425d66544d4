from rest_framework.decorators import api_view
from rest_framework.response import Response

from dashboard.services.billing import get_billing_settings
from dashboard.services.catalogue import list_services


@api_view(['GET'])
def billing_settings(request):
    """Clinic billing configuration, or the fixed default when none is saved."""
    return Response(get_billing_settings())


@api_view(['GET'])
def services(request):
    return Response(list_services())
