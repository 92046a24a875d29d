import logging

from dashboard.exceptions import ValidationFailure
from dashboard.services.sync import pull

logger = logging.getLogger(__name__)


def storage_status(state) -> dict:
    config = state.config
    with state.store.lock:
        pending = [w.as_dict() for w in state.pending_writes]
    return {
        'storage': 'Remote Store Connected' if config.enabled else 'Local Storage Only',
        'connection': 'Connected' if config.is_configured else 'Not Configured',
        'url': config.url,
        'enabled': config.enabled,
        'pendingWrites': pending,
    }


def test_connection(state, url: str) -> bool:
    """Point the dashboard at ``url`` and try a full load.

    A failed load switches the remote store back off.
    """
    url = (url or '').strip()
    if not url:
        state.notifications.notify('warning', 'Please enter the remote store URL')
        raise ValidationFailure('remote store URL is required')
    state.notifications.notify('info', 'Testing connection...')
    state.config.url = url
    state.config.enabled = True
    if not pull(state):
        state.config.enabled = False
        logger.warning('connection test against %s failed', url)
        state.notifications.notify('error', 'Connection failed. Check URL and try again.')
        return False
    state.notifications.notify('success', 'Connection successful!')
    return True


def sync_from_remote(state) -> bool:
    if not state.config.is_configured:
        state.notifications.notify('warning', 'Remote store not configured')
        return False
    return pull(state)
