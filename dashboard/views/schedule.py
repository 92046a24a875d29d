from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from dashboard.serializers.remote import ChangeWeekSerializer
from dashboard.services import navigation
from dashboard.state import get_state
from dashboard.views.common import respond


@api_view(['GET'])
@permission_classes([AllowAny])
def schedule(request):
    """Weekly schedule grid (placeholder data, doctors placed at random)."""
    state = get_state()
    return respond(state, navigation.load_schedule(state))


@api_view(['POST'])
@permission_classes([AllowAny])
def change_week(request):
    data = ChangeWeekSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    state = get_state()
    return respond(state, navigation.change_week(state, data.validated_data['direction']))
