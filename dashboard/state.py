"""
In-memory domain store and the process-wide dashboard state container.

The store is the sole owner of entity data for the lifetime of the
process: it is replaced wholesale by a successful remote sync and
appended to optimistically by the form handlers in between.  Service
functions receive the :class:`HospitalState` by reference instead of
reaching for module globals; :func:`get_state` hands out the shared
instance and :func:`reset_state` rebuilds it (tests inject a fake
remote client this way).
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Optional

from django.conf import settings

from dashboard.entities import ENTITY_TYPES, ID_FIELDS, Appointment, Department, Doctor, Patient
from dashboard.services.navigation import ViewRouter
from dashboard.services.notifications import NotificationCenter
from dashboard.services.remote_store import RemoteStore, RemoteStoreConfig, SheetsClient
from dashboard.services.sync import PendingWrite, pull

logger = logging.getLogger(__name__)


def empty_age_distribution() -> dict[str, int]:
    return {'Child': 0, 'Adult': 0, 'Elderly': 0}


def weekly_placeholder() -> list[dict]:
    return [{'day': day, 'appointments': 0} for day in ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat')]


@dataclass
class Analytics:
    patient_age_distribution: dict[str, int] = field(default_factory=empty_age_distribution)
    patient_department_distribution: dict[str, int] = field(default_factory=dict)
    weekly_appointments: list[dict] = field(default_factory=weekly_placeholder)
    monthly_revenue: list[dict] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            'patient_age_distribution': dict(self.patient_age_distribution),
            'patient_department_distribution': dict(self.patient_department_distribution),
            'weekly_appointments': [dict(w) for w in self.weekly_appointments],
            'monthly_revenue': [dict(m) for m in self.monthly_revenue],
        }


class DomainStore:
    def __init__(self):
        self.patients: list[Patient] = []
        self.doctors: list[Doctor] = []
        self.appointments: list[Appointment] = []
        self.departments: list[Department] = []
        self.analytics = Analytics()
        self.sort_state: dict[str, tuple[str, str]] = {}
        self.lock = threading.RLock()

    def collection(self, name: str) -> list:
        if name not in ENTITY_TYPES:
            raise KeyError(name)
        return getattr(self, name)

    def replace(self, payload: dict) -> list[str]:
        """Replace every collection present in ``payload``; return their names."""
        replaced = []
        with self.lock:
            for name, entity_type in ENTITY_TYPES.items():
                records = payload.get(name)
                if records is None:
                    continue
                setattr(self, name, [entity_type.from_record(r) for r in records])
                self.sort_state.pop(name, None)
                replaced.append(name)
        return replaced

    def append(self, name: str, entity: Any) -> None:
        with self.lock:
            self.collection(name).append(entity)

    def next_id(self, name: str) -> int:
        id_field = ID_FIELDS[name]
        ids = [getattr(item, id_field) for item in self.collection(name)]
        # Only integer ids take part; codes such as "P001" never equal an int,
        # so local numbering cannot collide with them.
        ids = [i for i in ids if isinstance(i, int) and not isinstance(i, bool)]
        return max(ids) + 1 if ids else 1

    def find_patient(self, patient_id: Any) -> Optional[Patient]:
        return next((p for p in self.patients if p.patient_id == patient_id), None)

    def find_doctor(self, doctor_id: Any) -> Optional[Doctor]:
        return next((d for d in self.doctors if d.doctor_id == doctor_id), None)

    def counts(self) -> dict[str, int]:
        return {name: len(self.collection(name)) for name in ENTITY_TYPES}

    def snapshot(self) -> dict[str, list[dict]]:
        return {name: [item.to_record() for item in self.collection(name)] for name in ENTITY_TYPES}


@dataclass
class HospitalState:
    config: RemoteStoreConfig
    client: RemoteStore
    store: DomainStore = field(default_factory=DomainStore)
    router: ViewRouter = field(default_factory=ViewRouter)
    notifications: NotificationCenter = field(default_factory=NotificationCenter)
    pending_writes: list[PendingWrite] = field(default_factory=list)
    schedule_week: int = 0
    page_size: int = 10


_state: Optional[HospitalState] = None
_state_lock = threading.Lock()


def build_state(*, client: Optional[RemoteStore] = None, config: Optional[RemoteStoreConfig] = None) -> HospitalState:
    config = config or RemoteStoreConfig(
        url=settings.REMOTE_STORE_URL,
        enabled=settings.REMOTE_STORE_ENABLED,
        timeout=settings.REMOTE_STORE_TIMEOUT,
    )
    return HospitalState(
        config=config,
        client=client or SheetsClient(config),
        page_size=getattr(settings, 'DASHBOARD_PAGE_SIZE', 10),
    )


def get_state() -> HospitalState:
    """Return the process-wide state, syncing from the remote store on first use."""
    global _state
    if _state is not None:
        return _state
    with _state_lock:
        if _state is None:
            state = build_state()
            logger.info('dashboard state initialised, remote store %s',
                        'configured' if state.config.is_configured else 'not configured')
            if settings.REMOTE_STORE_SYNC_ON_STARTUP and state.config.is_configured:
                pull(state)
            _state = state
    return _state


def current_state() -> Optional[HospitalState]:
    """The process-wide state if it has been built, without building it."""
    return _state


def reset_state(**overrides) -> HospitalState:
    global _state
    with _state_lock:
        _state = build_state(**overrides)
    return _state
