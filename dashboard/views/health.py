from django.http import JsonResponse

from dashboard.state import get_state


def healthz(request):
    state = get_state()
    return JsonResponse({
        'ok': True,
        'remoteStore': state.config.is_configured,
        'pendingWrites': len(state.pending_writes),
        'counts': state.store.counts(),
    })
