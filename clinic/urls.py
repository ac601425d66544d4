"""
URL configuration for the clinic dashboard project.

The `urlpatterns` list routes URLs to views.  This module includes
both the Django admin and the API routes provided by the dashboard app.
The dashboard routes are served at the root and again under ``/api/``
so that clients built against either base path keep working.
OpenAPI documentation is exposed at ``/swagger/`` and ``/redoc/``.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Clinic Dashboard API",
    default_version='v1',
    description="Read-only patient activity and billing configuration for the clinic dashboard.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    # Django admin site (read-only registrations)
    path('admin/', admin.site.urls),
    path('', include('django_prometheus.urls')),
    # Swagger and ReDoc
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
    path('api/', include('dashboard.routers')),
    path('', include('dashboard.routers')),
]

handler404 = 'dashboard.views.errors.not_found'
handler500 = 'dashboard.views.errors.server_error'
