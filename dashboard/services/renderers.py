"""
Per-view renderers.

Each renderer takes the domain store (plus the view's filters) and
returns plain rows ready for JSON.  Foreign keys that do not resolve
degrade to ``"N/A"``.
"""
from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Optional

from dashboard.entities import status_slug
from dashboard.services.listing import (
    EMPTY,
    PAGE_SIZE,
    filter_records,
    is_filter_active,
    list_state,
    matches_search,
    paginate,
    pagination_control,
    placeholder,
)

MISSING = 'N/A'

SCHEDULE_DAYS = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday')
SCHEDULE_TIMES = ('09:00', '10:00', '11:00', '14:00', '15:00', '16:00')
SCHEDULE_FILL_THRESHOLD = 0.6


def _listing(view: str, collection_size: int, filtered: list, rows: list, page) -> dict:
    state = list_state(collection_size, len(filtered))
    return {
        'state': state,
        'placeholder': placeholder(view, state),
        'rows': rows,
        # an empty collection shows no pagination at all
        'pagination': pagination_control(page) if state != EMPTY else None,
    }


def patient_row(patient) -> dict:
    return {
        'id': patient.patient_id,
        'name': patient.full_name,
        'age': patient.age,
        'gender': patient.gender_label,
        'phone': patient.phone,
        'bloodGroup': patient.blood_group,
        'status': patient.status,
        'statusClass': f'status-{status_slug(patient.status)}',
    }


def render_patients(store, *, search: Optional[str] = None, status: Optional[str] = None,
                    page: int = 1, page_size: int = PAGE_SIZE) -> dict:
    predicates = []
    if search:
        predicates.append(lambda p: matches_search((p.first_name, p.last_name, p.patient_id), search))
    if is_filter_active(status):
        predicates.append(lambda p: p.status == status)
    filtered = filter_records(store.patients, *predicates)
    current = paginate(filtered, page, page_size)
    return _listing('patients', len(store.patients), filtered,
                    [patient_row(p) for p in current.items], current)


def patient_detail(store, patient_id) -> Optional[dict]:
    patient = store.find_patient(patient_id)
    if patient is None:
        return None
    return {
        'id': patient.patient_id,
        'firstName': patient.first_name,
        'lastName': patient.last_name,
        'fullName': patient.full_name,
        'age': patient.age,
        'gender': patient.gender_label,
        'bloodGroup': patient.blood_group,
        'phone': patient.phone,
        'address': patient.address,
        'status': patient.status,
        'statusClass': f'status-{status_slug(patient.status)}',
    }


def _patient_name(store, patient_id) -> str:
    patient = store.find_patient(patient_id)
    return patient.full_name if patient else MISSING


def _doctor_name(store, doctor_id) -> str:
    doctor = store.find_doctor(doctor_id)
    return doctor.name if doctor else MISSING


def appointment_row(store, appt) -> dict:
    return {
        'id': appt.appt_id,
        'patient': _patient_name(store, appt.patient_id),
        'doctor': _doctor_name(store, appt.doctor_id),
        'date': appt.date,
        'time': appt.time,
        'treatment': appt.treatment,
        'status': appt.status,
        'statusClass': f'status-{status_slug(appt.status)}',
    }


def _appointment_matches(store, appt, term: str) -> bool:
    patient = store.find_patient(appt.patient_id)
    doctor = store.find_doctor(appt.doctor_id)
    values = [appt.treatment]
    if patient:
        values += [patient.first_name, patient.last_name]
    if doctor:
        values.append(doctor.name)
    return matches_search(values, term)


def doctor_options(store) -> list[dict]:
    return [{'value': 'all', 'label': 'All Doctors'}] + [
        {'value': str(d.doctor_id), 'label': d.name} for d in store.doctors
    ]


def render_appointments(store, *, search: Optional[str] = None, status: Optional[str] = None,
                        doctor_id: Optional[str] = None, page: int = 1,
                        page_size: int = PAGE_SIZE) -> dict:
    predicates = []
    if search:
        predicates.append(lambda a: _appointment_matches(store, a, search))
    if is_filter_active(status):
        predicates.append(lambda a: a.status == status)
    if is_filter_active(doctor_id):
        predicates.append(lambda a: str(a.doctor_id) == str(doctor_id))
    filtered = filter_records(store.appointments, *predicates)
    current = paginate(filtered, page, page_size)
    result = _listing('appointments', len(store.appointments), filtered,
                      [appointment_row(store, a) for a in current.items], current)
    result['doctorOptions'] = doctor_options(store)
    return result


def recent_appointments(store, limit: int = 5) -> dict:
    if not store.appointments:
        return {'state': EMPTY, 'placeholder': placeholder('recent_appointments', EMPTY), 'rows': []}
    rows = []
    for appt in store.appointments[:limit]:
        row = appointment_row(store, appt)
        row.pop('id')
        rows.append(row)
    return {'state': 'ok', 'placeholder': None, 'rows': rows}


def render_doctors(store, today: date) -> dict:
    if not store.doctors:
        return {'state': EMPTY, 'placeholder': placeholder('doctors', EMPTY), 'cards': []}
    today_iso = today.isoformat()
    cards = []
    for doctor in store.doctors:
        todays = sum(1 for a in store.appointments if a.doctor_id == doctor.doctor_id and a.date == today_iso)
        cards.append({
            'id': doctor.doctor_id,
            'name': doctor.name,
            'department': doctor.department,
            'specialization': doctor.specialist,
            'phone': doctor.phone,
            'todayAppointments': todays,
            'available': doctor.available,
            'availability': 'Available' if doctor.available else 'Unavailable',
            'statusClass': 'status-available' if doctor.available else 'status-unavailable',
        })
    return {'state': 'ok', 'placeholder': None, 'cards': cards}


def render_departments(store, rng: Optional[random.Random] = None) -> dict:
    """Department cards.  ``patients`` is random placeholder data."""
    rng = rng or random.Random()
    if not store.departments:
        return {'state': EMPTY, 'placeholder': placeholder('departments', EMPTY), 'cards': []}
    cards = [{
        'name': dept.name,
        'description': dept.description,
        'icon': dept.icon,
        'doctors': dept.total_doctors,
        'patients': rng.randint(20, 69),
    } for dept in store.departments]
    return {'state': 'ok', 'placeholder': None, 'cards': cards}


def week_start(today: date, offset: int = 0) -> date:
    monday = today - timedelta(days=today.weekday())
    return monday + timedelta(weeks=offset)


def render_schedule(store, *, today: date, week_offset: int = 0,
                    rng: Optional[random.Random] = None) -> dict:
    """Weekly schedule grid filled with randomly placed doctors.

    This is visual placeholder data: slots are not derived from the
    appointments collection.
    """
    rng = rng or random.Random()
    start = week_start(today, week_offset)
    rows = []
    for slot in SCHEDULE_TIMES:
        cells = []
        for _ in SCHEDULE_DAYS:
            filled = rng.random() > SCHEDULE_FILL_THRESHOLD
            if filled and store.doctors:
                cells.append(rng.choice(store.doctors).surname)
            else:
                cells.append(None)
        rows.append({'time': slot, 'cells': cells})
    return {
        'weekOffset': week_offset,
        'weekStart': start.isoformat(),
        'days': list(SCHEDULE_DAYS),
        'rows': rows,
    }


def dashboard_summary(store, today: date) -> dict:
    today_iso = today.isoformat()
    return {
        'totalPatients': len(store.patients),
        'todayAppointments': sum(1 for a in store.appointments if a.date == today_iso),
        'activeDoctors': sum(1 for d in store.doctors if d.available),
        'totalDepartments': len(store.departments),
    }
