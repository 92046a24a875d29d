"""
Patient views.

Listing supports a free-text search (``q``) over names and the patient
id, an exact ``status`` filter and ``page``.  New patients are appended
locally first and then pushed to the remote store.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny

from dashboard.serializers.patient import PatientCreateSerializer, PatientListQuerySerializer, SortSerializer
from dashboard.services import forms, navigation, renderers
from dashboard.services.listing import sort_collection
from dashboard.state import get_state
from dashboard.views.common import respond


@api_view(['GET'])
@permission_classes([AllowAny])
def list_patients(request):
    q = PatientListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    state = get_state()
    result = navigation.load_patients(
        state,
        search=q.validated_data.get('q') or None,
        status=q.validated_data.get('status') or None,
        page=q.validated_data.get('page') or 1,
    )
    return respond(state, result)


@api_view(['GET'])
@permission_classes([AllowAny])
def patient_detail(request, pk: int):
    state = get_state()
    detail = renderers.patient_detail(state.store, pk)
    if detail is None:
        raise NotFound('patient not found')
    return respond(state, {'data': detail})


@api_view(['POST'])
@permission_classes([AllowAny])
def add_patient(request):
    """Register a new patient.

    The identifier is the largest existing one plus one.  The response is
    a success even when the remote sync fails; ``synced`` tells the two
    apart and the sync failure is reported in ``notifications``.
    """
    data = PatientCreateSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    state = get_state()
    patient, synced = forms.add_patient(state, data.validated_data)
    listing = navigation.load_patients(state)
    return respond(state, {'id': patient.patient_id, 'data': renderers.patient_row(patient),
                           'synced': synced, 'listing': listing}, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def sort_patients(request):
    data = SortSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    state = get_state()
    column, order = sort_collection(state.store, 'patients', data.validated_data['column'])
    return respond(state, {'sort': {'column': column, 'order': order}, 'listing': navigation.load_patients(state)})
