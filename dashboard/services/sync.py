"""
Apply the remote store to the in-memory domain store.

Reads replace the local collections only on success; a failed read leaves
every collection exactly as it was.  Writes are optimistic: the local
mutation has already happened when ``push`` runs, and a failed write is
queued for an explicit retry instead of being rolled back.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from dashboard.exceptions import RemoteStoreError
from dashboard.services import analytics

logger = logging.getLogger(__name__)


@dataclass
class PendingWrite:
    sheet: str
    action: str
    record: dict
    attempts: int = 1
    last_error: str = ''

    def as_dict(self) -> dict:
        return {'sheet': self.sheet, 'action': self.action, 'record': self.record,
                'attempts': self.attempts, 'lastError': self.last_error}


def pull(state) -> bool:
    if not state.config.is_configured:
        logger.info('remote store not configured, skipping load')
        return False
    state.notifications.notify('info', 'Syncing data from the remote store...')
    try:
        payload = state.client.load()
    except RemoteStoreError as e:
        logger.warning('loading from remote store failed: %s', e)
        state.notifications.notify('error', 'Failed to sync data from the remote store')
        return False
    replaced = state.store.replace(payload)
    analytics.recompute(state.store)
    logger.info('remote sync replaced %s', ', '.join(replaced) or 'nothing')
    state.notifications.notify('success', 'Data synced successfully!')
    return True


def _save(state, sheet: str, action: str, record: dict) -> tuple[bool, str]:
    try:
        ok = state.client.save(sheet, action, record)
    except RemoteStoreError as e:
        logger.warning('saving %s/%s failed: %s', sheet, action, e)
        return False, str(e)
    if not ok:
        logger.warning('remote store refused %s/%s', sheet, action)
        return False, 'remote store did not report success'
    return True, ''


def push(state, sheet: str, record: dict, action: str = 'add') -> bool:
    if not state.config.is_configured:
        return True  # nothing to sync against
    ok, error = _save(state, sheet, action, record)
    if not ok:
        with state.store.lock:
            state.pending_writes.append(PendingWrite(sheet=sheet, action=action, record=record, last_error=error))
        state.notifications.notify('error', 'Failed to sync with the remote store')
    return ok


def retry_pending(state) -> tuple[int, int]:
    """Replay queued writes in order; return ``(synced, remaining)``.

    The queue is taken over before replaying so writes queued by other
    requests meanwhile are kept, after the ones that failed again.
    """
    configured = state.config.is_configured
    with state.store.lock:
        batch = list(state.pending_writes)
        if configured:
            state.pending_writes.clear()
    if not batch:
        return 0, 0
    if not configured:
        state.notifications.notify('warning', 'Remote store not configured')
        return 0, len(batch)
    failed = []
    synced = 0
    for write in batch:
        ok, error = _save(state, write.sheet, write.action, write.record)
        if ok:
            synced += 1
        else:
            write.attempts += 1
            write.last_error = error
            failed.append(write)
    with state.store.lock:
        state.pending_writes[:0] = failed
        remaining = len(state.pending_writes)
    if remaining:
        state.notifications.notify('error', f'{remaining} change(s) still not synced')
    else:
        state.notifications.notify('success', f'{synced} pending change(s) synced')
    return synced, remaining
