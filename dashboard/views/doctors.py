from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from dashboard.services import forms, renderers
from dashboard.state import get_state
from dashboard.views.common import respond


@api_view(['GET'])
@permission_classes([AllowAny])
def list_doctors(request):
    """Doctor cards with today's appointment count and availability."""
    state = get_state()
    return respond(state, renderers.render_doctors(state.store, timezone.localdate()))


@api_view(['POST'])
@permission_classes([AllowAny])
def add_doctor(request):
    """Doctors are read-only for now; always answers 501."""
    forms.add_doctor(get_state())
