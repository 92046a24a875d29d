from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from dashboard.serializers.appointment import AppointmentCreateSerializer, AppointmentListQuerySerializer
from dashboard.serializers.patient import SortSerializer
from dashboard.services import forms, navigation, renderers
from dashboard.services.listing import sort_collection
from dashboard.state import get_state
from dashboard.views.common import respond


@api_view(['GET'])
@permission_classes([AllowAny])
def list_appointments(request):
    """List appointments.

    Query params:
      - q: search over patient name, doctor name and treatment
      - status: exact status, ``all`` for none
      - doctorId: doctor identifier, ``all`` for none
      - page: 1-based page number
    """
    q = AppointmentListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    state = get_state()
    result = navigation.load_appointments(
        state,
        search=q.validated_data.get('q') or None,
        status=q.validated_data.get('status') or None,
        doctor_id=q.validated_data.get('doctorId') or None,
        page=q.validated_data.get('page') or 1,
    )
    return respond(state, result)


@api_view(['GET'])
@permission_classes([AllowAny])
def appointment_form(request):
    """Patient and doctor choices for the new-appointment form."""
    state = get_state()
    return respond(state, forms.appointment_form_options(state))


@api_view(['POST'])
@permission_classes([AllowAny])
def add_appointment(request):
    data = AppointmentCreateSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    state = get_state()
    appointment, synced = forms.add_appointment(state, data.validated_data)
    return respond(state, {
        'id': appointment.appt_id,
        'data': renderers.appointment_row(state.store, appointment),
        'synced': synced,
        'listing': navigation.load_appointments(state),
    }, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def sort_appointments(request):
    data = SortSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    state = get_state()
    column, order = sort_collection(state.store, 'appointments', data.validated_data['column'])
    return respond(state, {'sort': {'column': column, 'order': order},
                           'listing': navigation.load_appointments(state)})
