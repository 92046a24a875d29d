"""
Dashboard, view routing and header endpoints.

``/api/views/<view>`` is the view router: it switches the current view
and returns that view's content.  ``/api/dashboard`` is a shortcut for
the dashboard view itself.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from dashboard.serializers.remote import GlobalSearchSerializer
from dashboard.services import navigation
from dashboard.state import get_state
from dashboard.views.common import respond


def _view_params(request) -> dict:
    """Map query parameters onto loader keyword arguments."""
    params = {}
    qp = request.query_params
    if qp.get('q'):
        params['search'] = qp.get('q')
    if qp.get('status'):
        params['status'] = qp.get('status')
    if qp.get('doctorId'):
        params['doctor_id'] = qp.get('doctorId')
    try:
        params['page'] = max(int(qp.get('page') or 1), 1)
    except ValueError:
        params['page'] = 1
    return params


@api_view(['GET'])
@permission_classes([AllowAny])
def show_view(request, view: str):
    """Switch to ``view`` and return its content."""
    state = get_state()
    result = state.router.show(state, view, **_view_params(request))
    return respond(state, result)


@api_view(['GET'])
@permission_classes([AllowAny])
def admin_dashboard(request):
    """Summary cards, chart series and the five most recent appointments."""
    state = get_state()
    result = state.router.show(state, 'dashboard')
    return respond(state, result['content'])


@api_view(['GET'])
@permission_classes([AllowAny])
def global_search(request):
    q = GlobalSearchSerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    state = get_state()
    return respond(state, navigation.global_search(state, q.validated_data.get('q') or ''))


@api_view(['GET'])
@permission_classes([AllowAny])
def notifications(request):
    state = get_state()
    latest = state.notifications.latest
    return respond(state, {'latest': latest.as_dict() if latest else None})
