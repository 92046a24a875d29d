"""
Domain entities held by the dashboard store.

Records arrive from the remote spreadsheet in whatever shape the sheet
happens to have, so every ``from_record`` is tolerant: missing fields
fall back to defaults and identifiers are coerced to ``int`` when they
look numeric.  ``to_record`` returns the wire dict with the sheet's
field names.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Optional

GENDER_LABELS = {'M': 'Male', 'F': 'Female'}


def to_int(value: Any) -> Any:
    """Return ``value`` as an int when it is numeric, unchanged otherwise."""
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return value
            return int(number) if number.is_integer() else value
    return value


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'y')
    return bool(value)


def _text(value: Any) -> str:
    return '' if value is None else str(value)


class Record:
    """Shared helpers for the sheet-backed dataclasses."""

    def to_record(self) -> dict:
        return asdict(self)  # type: ignore[call-overload]

    def get(self, column: str, default: Any = None) -> Any:
        return getattr(self, column, default)


@dataclass
class Patient(Record):
    patient_id: Any = None
    first_name: str = ''
    last_name: str = ''
    age: Any = None
    gender: str = ''
    phone: str = ''
    address: str = ''
    blood_group: str = ''
    status: str = ''

    @classmethod
    def from_record(cls, data: dict) -> 'Patient':
        return cls(
            patient_id=to_int(data.get('patient_id')),
            first_name=_text(data.get('first_name')),
            last_name=_text(data.get('last_name')),
            age=to_int(data.get('age')),
            gender=_text(data.get('gender')),
            phone=_text(data.get('phone')),
            address=_text(data.get('address')),
            blood_group=_text(data.get('blood_group')),
            status=_text(data.get('status')),
        )

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'

    @property
    def gender_label(self) -> str:
        return GENDER_LABELS.get(self.gender, 'Other')


@dataclass
class Doctor(Record):
    doctor_id: Any = None
    name: str = ''
    department: str = ''
    specialist: str = ''
    phone: str = ''
    available: bool = False

    @classmethod
    def from_record(cls, data: dict) -> 'Doctor':
        return cls(
            doctor_id=to_int(data.get('doctor_id')),
            name=_text(data.get('name')),
            department=_text(data.get('department')),
            specialist=_text(data.get('specialist') or data.get('specialization')),
            phone=_text(data.get('phone')),
            available=to_bool(data.get('available')),
        )

    @property
    def surname(self) -> str:
        parts = self.name.split(' ')
        return parts[1] if len(parts) > 1 else self.name


@dataclass
class Appointment(Record):
    appt_id: Any = None
    patient_id: Any = None
    doctor_id: Any = None
    date: str = ''
    time: str = ''
    treatment: str = ''
    status: str = ''
    notes: str = ''

    @classmethod
    def from_record(cls, data: dict) -> 'Appointment':
        return cls(
            appt_id=to_int(data.get('appt_id')),
            patient_id=to_int(data.get('patient_id')),
            doctor_id=to_int(data.get('doctor_id')),
            date=_text(data.get('date')),
            time=_text(data.get('time')),
            treatment=_text(data.get('treatment')),
            status=_text(data.get('status')),
            notes=_text(data.get('notes')),
        )


@dataclass
class Department(Record):
    name: str = ''
    description: str = ''
    icon: str = ''
    total_doctors: Any = 0

    @classmethod
    def from_record(cls, data: dict) -> 'Department':
        return cls(
            name=_text(data.get('name')),
            description=_text(data.get('description')),
            icon=_text(data.get('icon')),
            total_doctors=to_int(data.get('total_doctors')) or 0,
        )


ENTITY_TYPES = {
    'patients': Patient,
    'doctors': Doctor,
    'appointments': Appointment,
    'departments': Department,
}

# Identifier column per collection; departments are keyed by name.
ID_FIELDS = {
    'patients': 'patient_id',
    'doctors': 'doctor_id',
    'appointments': 'appt_id',
}

# Sheet names used by the remote spreadsheet.
SHEET_NAMES = {
    'patients': 'Patients',
    'doctors': 'Doctors',
    'appointments': 'Appointments',
    'departments': 'Departments',
}


def status_slug(status: Optional[str]) -> str:
    """CSS-style badge suffix, ``"New Patient"`` -> ``"new-patient"``."""
    return (status or '').lower().replace(' ', '-')
