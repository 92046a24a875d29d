"""
User-facing notifications (the dashboard's toasts).

Only the latest notification is "visible"; older ones are kept in a
bounded history so API responses can hand back everything raised since
the last delivery.
"""
from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from django.utils import timezone

logger = logging.getLogger(__name__)

LEVELS = {
    'success': logging.INFO,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


@dataclass
class Notification:
    level: str
    message: str
    created_at: str = field(default_factory=lambda: timezone.now().isoformat())

    def as_dict(self) -> dict:
        return {'type': self.level, 'message': self.message, 'createdAt': self.created_at}


class NotificationCenter:
    def __init__(self, maxlen: int = 50):
        self.history: deque[Notification] = deque(maxlen=maxlen)
        self._undelivered: deque[Notification] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def notify(self, level: str, message: str) -> Notification:
        if level not in LEVELS:
            level = 'info'
        note = Notification(level=level, message=message)
        logger.log(LEVELS[level], 'notification %s: %s', level, message)
        with self._lock:
            self.history.append(note)
            self._undelivered.append(note)
        return note

    @property
    def latest(self) -> Optional[Notification]:
        with self._lock:
            return self.history[-1] if self.history else None

    def drain(self) -> list[dict]:
        with self._lock:
            notes = list(self._undelivered)
            self._undelivered.clear()
        return [n.as_dict() for n in notes]

    def levels(self) -> list[str]:
        with self._lock:
            return [n.level for n in self.history]
