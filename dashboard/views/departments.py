"""
Department views.

Departments are read-only cards.  The patient count on each card is
placeholder data generated per request and is not persisted anywhere.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from dashboard.services import renderers
from dashboard.state import get_state
from dashboard.views.common import respond


@api_view(['GET'])
@permission_classes([AllowAny])
def departments(request):
    state = get_state()
    return respond(state, renderers.render_departments(state.store))
