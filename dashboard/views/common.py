from rest_framework.response import Response


def respond(state, payload: dict, status: int = 200) -> Response:
    """Wrap ``payload`` with the notifications raised while handling the request."""
    body = {'ok': True, **payload, 'notifications': state.notifications.drain()}
    return Response(body, status=status)
