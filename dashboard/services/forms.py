"""
Form handlers: build a new entity, append it locally, then sync.

Required fields are enforced by the serializers before these run; the
only check made here is the appointment form's patient/doctor selection.
The local append always stands, whatever the remote store answers.
"""
from __future__ import annotations

import logging

from dashboard.entities import SHEET_NAMES, Appointment, Patient, to_int
from dashboard.exceptions import FeatureUnavailable, ValidationFailure
from dashboard.services import analytics
from dashboard.services.sync import push

logger = logging.getLogger(__name__)

NEW_PATIENT_STATUS = 'New Patient'
NEW_APPOINTMENT_STATUS = 'Pending'


def add_patient(state, data: dict) -> tuple[Patient, bool]:
    store = state.store
    with store.lock:
        patient = Patient(
            patient_id=store.next_id('patients'),
            first_name=data['first_name'],
            last_name=data['last_name'],
            gender=data['gender'],
            age=int(data['age']),
            phone=data['phone'],
            address=data['address'],
            blood_group=data['blood_group'],
            status=NEW_PATIENT_STATUS,
        )
        store.append('patients', patient)
    logger.info('added patient %s', patient.patient_id)
    synced = push(state, SHEET_NAMES['patients'], patient.to_record())
    analytics.recompute(store)
    state.notifications.notify('success', 'Patient added successfully!')
    return patient, synced


def add_appointment(state, data: dict) -> tuple[Appointment, bool]:
    if not data.get('patient_id') or not data.get('doctor_id'):
        state.notifications.notify('warning', 'Please select both patient and doctor')
        raise ValidationFailure('patient and doctor selection required')
    store = state.store
    with store.lock:
        appointment = Appointment(
            appt_id=store.next_id('appointments'),
            patient_id=to_int(data['patient_id']),
            doctor_id=to_int(data['doctor_id']),
            date=str(data.get('date') or ''),
            time=str(data.get('time') or ''),
            treatment=data.get('treatment') or '',
            status=NEW_APPOINTMENT_STATUS,
            notes=data.get('notes') or '',
        )
        store.append('appointments', appointment)
    logger.info('added appointment %s', appointment.appt_id)
    synced = push(state, SHEET_NAMES['appointments'], appointment.to_record())
    analytics.recompute(store)
    state.notifications.notify('success', 'Appointment scheduled successfully!')
    return appointment, synced


def appointment_form_options(state) -> dict:
    store = state.store
    if not store.patients:
        state.notifications.notify('warning', 'Please add patients first before scheduling appointments')
        raise ValidationFailure('no patients available')
    if not store.doctors:
        state.notifications.notify('warning', 'Please add doctors first before scheduling appointments')
        raise ValidationFailure('no doctors available')
    return {
        'patients': [{'value': str(p.patient_id), 'label': p.full_name} for p in store.patients],
        'doctors': [{'value': str(d.doctor_id), 'label': d.name} for d in store.doctors],
    }


def add_doctor(state) -> None:
    state.notifications.notify('info', 'Add Doctor functionality - Coming Soon!')
    raise FeatureUnavailable('adding doctors is not available yet')
