"""
View routing for the dashboard.

A view is one top-level dashboard screen.  ``ViewRouter.show`` records
the current view, marks exactly that one active and dispatches to its
loader.  There is no history stack and no deep linking.
"""
from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from django.utils import timezone

from dashboard.exceptions import UnknownView
from dashboard.services import analytics, renderers
from dashboard.services.connection import storage_status

logger = logging.getLogger(__name__)

VIEW_TITLES = {
    'dashboard': 'Dashboard',
    'patients': 'Patients',
    'appointments': 'Appointments',
    'doctors': 'Doctors',
    'departments': 'Departments',
    'schedule': 'Schedule',
    'settings': 'Settings',
}
VIEWS = tuple(VIEW_TITLES)


def clock_label(now=None) -> str:
    now = now or timezone.localtime()
    return now.strftime('%d %b %Y %I:%M %p')


def load_dashboard(state, **params) -> dict:
    store = state.store
    analytics.recompute(store)
    return {
        'summary': renderers.dashboard_summary(store, timezone.localdate()),
        'analytics': store.analytics.as_dict(),
        'charts': analytics.chart_series(store.analytics),
        'recentAppointments': renderers.recent_appointments(store),
    }


def load_patients(state, *, search=None, status=None, page=1, **params) -> dict:
    return renderers.render_patients(state.store, search=search, status=status,
                                     page=page, page_size=state.page_size)


def load_appointments(state, *, search=None, status=None, doctor_id=None, page=1, **params) -> dict:
    return renderers.render_appointments(state.store, search=search, status=status, doctor_id=doctor_id,
                                         page=page, page_size=state.page_size)


def load_doctors(state, **params) -> dict:
    return renderers.render_doctors(state.store, timezone.localdate())


def load_departments(state, rng: Optional[random.Random] = None, **params) -> dict:
    return renderers.render_departments(state.store, rng=rng)


def load_schedule(state, rng: Optional[random.Random] = None, **params) -> dict:
    return renderers.render_schedule(state.store, today=timezone.localdate(),
                                     week_offset=state.schedule_week, rng=rng)


def load_settings(state, **params) -> dict:
    return storage_status(state)


LOADERS: dict[str, Callable[..., dict]] = {
    'dashboard': load_dashboard,
    'patients': load_patients,
    'appointments': load_appointments,
    'doctors': load_doctors,
    'departments': load_departments,
    'schedule': load_schedule,
    'settings': load_settings,
}


class ViewRouter:
    def __init__(self, initial: str = 'dashboard'):
        self.current_view = initial

    def visibility(self) -> dict[str, bool]:
        return {name: name == self.current_view for name in VIEWS}

    def show(self, state, view: str, **params) -> dict:
        if view not in LOADERS:
            raise UnknownView(f'unknown view: {view}')
        self.current_view = view
        logger.debug('showing view %s', view)
        return {
            'view': view,
            'title': VIEW_TITLES[view],
            'active': self.visibility(),
            'content': LOADERS[view](state, **params),
            'clock': clock_label(),
        }


def global_search(state, term: str) -> dict:
    """Jump to the patients view when a patient name matches ``term``."""
    term = (term or '').strip().lower()
    if not term:
        return {'matched': False, 'navigated': False, 'view': state.router.current_view}
    found = next((p for p in state.store.patients
                  if term in p.first_name.lower() or term in p.last_name.lower()), None)
    if found is None:
        return {'matched': False, 'navigated': False, 'view': state.router.current_view}
    if state.router.current_view == 'patients':
        return {'matched': True, 'navigated': False, 'view': 'patients', 'patientId': found.patient_id}
    shown = state.router.show(state, 'patients', search=term)
    return {'matched': True, 'navigated': True, 'view': 'patients',
            'patientId': found.patient_id, 'result': shown}


def change_week(state, direction: int) -> dict:
    state.schedule_week += 1 if direction > 0 else -1 if direction < 0 else 0
    return load_schedule(state)
