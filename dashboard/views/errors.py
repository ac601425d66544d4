"""
JSON replacements for Django's HTML error pages.

DRF views go through ``dashboard.exceptions.api_exception_handler``;
these cover everything else (unknown paths, errors outside DRF).
"""
from django.http import JsonResponse


def not_found(request, exception=None):
    return JsonResponse(
        {'ok': False, 'error': {'code': 'not_found', 'message': 'Not found'}},
        status=404,
    )


def server_error(request):
    return JsonResponse(
        {'ok': False, 'error': {'code': 'server_error', 'message': 'Server error'}},
        status=500,
    )
