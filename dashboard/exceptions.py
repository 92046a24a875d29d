from rest_framework.exceptions import APIException, NotFound
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response


class RemoteStoreError(Exception):
    """The remote spreadsheet rejected a request or could not be reached."""


class ValidationFailure(APIException):
    status_code = 400
    default_detail = 'invalid submission'
    default_code = 'validation_failure'


class UnknownView(NotFound):
    default_detail = 'unknown view'
    default_code = 'unknown_view'


class FeatureUnavailable(APIException):
    status_code = 501
    default_detail = 'not implemented yet'
    default_code = 'not_implemented'


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    # normalize response
    detail = None
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = str(resp.data)
    code = getattr(exc, 'default_code', None) or 'api_error'
    # deliver warnings raised before the failure along with the error
    from dashboard.state import current_state
    state = current_state()
    notes = state.notifications.drain() if state is not None else []
    return Response({'ok': False, 'error': {'code': code, 'message': detail}, 'notifications': notes},
                    status=resp.status_code)
