"""
URL mappings for the hospital dashboard API.

This module registers all API endpoints with their corresponding view
functions.  Note that trailing slashes are deliberately omitted, the
front-end calls every path without one.
"""
from django.urls import path, include

from .views import health
from .views.dashboard import admin_dashboard, show_view, global_search, notifications
from .views.patients import list_patients, add_patient, patient_detail, sort_patients
from .views.appointments import list_appointments, appointment_form, add_appointment, sort_appointments
from .views.doctors import list_doctors, add_doctor
from .views.departments import departments
from .views.schedule import schedule, change_week
from .views.remote import storage_status, test_connection, sync_now, retry_pending


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # View router & dashboard
    path('api/views/<str:view>', show_view),
    path('api/dashboard', admin_dashboard),
    path('api/search', global_search),
    path('api/notifications', notifications),
    # Patients
    path('api/patients', list_patients),
    path('api/patients/add', add_patient),
    path('api/patients/sort', sort_patients),
    path('api/patients/<int:pk>', patient_detail),
    # Appointments
    path('api/appointments', list_appointments),
    path('api/appointments/form', appointment_form),
    path('api/appointments/add', add_appointment),
    path('api/appointments/sort', sort_appointments),
    # Doctors / departments / schedule
    path('api/doctors', list_doctors),
    path('api/doctors/add', add_doctor),
    path('api/departments', departments),
    path('api/schedule', schedule),
    path('api/schedule/week', change_week),
    # Settings: remote store connection
    path('api/settings/status', storage_status),
    path('api/settings/test-connection', test_connection),
    path('api/settings/sync', sync_now),
    path('api/settings/retry', retry_pending),
]
