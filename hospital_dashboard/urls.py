"""
URL configuration for the hospital dashboard project.

The `urlpatterns` list routes URLs to views.  All dashboard endpoints
live in the ``dashboard`` app; this module only adds the OpenAPI
documentation at ``/swagger/`` and ``/redoc/``.
"""
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Hospital Dashboard API",
    default_version='v1',
    description="Patients, doctors, appointments and departments backed by a remote spreadsheet store.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    # Include API routes from the dashboard app
    path('', include('dashboard.routers')),
    # Swagger and ReDoc
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]
