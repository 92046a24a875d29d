"""
Settings view endpoints for the remote spreadsheet store.

``test-connection`` swaps the active endpoint at runtime; ``sync``
reloads every collection; ``retry`` replays writes that failed to
reach the remote store.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from dashboard.serializers.remote import ConnectionTestSerializer
from dashboard.services import connection, sync
from dashboard.state import get_state
from dashboard.views.common import respond


@api_view(['GET'])
@permission_classes([AllowAny])
def storage_status(request):
    state = get_state()
    return respond(state, connection.storage_status(state))


@api_view(['POST'])
@permission_classes([AllowAny])
def test_connection(request):
    data = ConnectionTestSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    state = get_state()
    connected = connection.test_connection(state, data.validated_data.get('url') or '')
    return respond(state, {'connected': connected, 'status': connection.storage_status(state)})


@api_view(['POST'])
@permission_classes([AllowAny])
def sync_now(request):
    """Reload all collections and re-render the current view."""
    state = get_state()
    synced = connection.sync_from_remote(state)
    current = state.router.show(state, state.router.current_view)
    return respond(state, {'synced': synced, 'counts': state.store.counts(), 'view': current})


@api_view(['POST'])
@permission_classes([AllowAny])
def retry_pending(request):
    state = get_state()
    synced, remaining = sync.retry_pending(state)
    return respond(state, {'synced': synced, 'remaining': remaining})
