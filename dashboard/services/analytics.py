"""
Derived statistics for the dashboard charts.

Everything is recomputed from scratch on each call; collections are
dashboard sized so the department join (departments x appointments) is
acceptable.
"""
from __future__ import annotations

from typing import Iterable

from dashboard.entities import Appointment, Department, Doctor, Patient

CHILD_MAX_AGE = 18
ADULT_MAX_AGE = 60


def age_bucket(age) -> str:
    """Bucket an age into Child [0, 18), Adult [18, 60) or Elderly [60, inf).

    Ages that cannot be read as numbers fall through to Elderly.
    """
    try:
        value = float(age)
    except (TypeError, ValueError):
        return 'Elderly'
    if value < CHILD_MAX_AGE:
        return 'Child'
    if value < ADULT_MAX_AGE:
        return 'Adult'
    return 'Elderly'


def age_distribution(patients: Iterable[Patient]) -> dict[str, int]:
    dist = {'Child': 0, 'Adult': 0, 'Elderly': 0}
    for p in patients:
        dist[age_bucket(p.age)] += 1
    return dist


def department_distribution(departments: Iterable[Department], appointments: list[Appointment],
                            doctors: list[Doctor]) -> dict[str, int]:
    dist: dict[str, int] = {}
    for d in departments:
        count = 0
        for a in appointments:
            doctor = next((doc for doc in doctors if doc.doctor_id == a.doctor_id), None)
            if doctor and doctor.department == d.name:
                count += 1
        if count > 0:
            dist[d.name] = count
    return dist


def recompute(store) -> None:
    """Rebuild the derived analytics on ``store`` in place."""
    store.analytics.patient_age_distribution = age_distribution(store.patients)
    store.analytics.patient_department_distribution = department_distribution(
        store.departments, store.appointments, store.doctors
    )


def _shares(distribution: dict[str, int]) -> list[dict]:
    total = sum(distribution.values())
    return [{
        'label': label,
        'value': value,
        'percentage': round(value / total * 100, 1) if total else 0.0,
    } for label, value in distribution.items()]


def chart_series(analytics) -> dict:
    """Chart feeds for the dashboard: doughnut, pie, bar and line series."""
    return {
        'ageDistribution': _shares(analytics.patient_age_distribution),
        'departmentDistribution': _shares(analytics.patient_department_distribution),
        'weeklyAppointments': {
            'labels': [w['day'] for w in analytics.weekly_appointments],
            'data': [w['appointments'] for w in analytics.weekly_appointments],
        },
        'monthlyRevenue': {
            'labels': [m.get('month') for m in analytics.monthly_revenue],
            'income': [m.get('income') for m in analytics.monthly_revenue],
            'expense': [m.get('expense') for m in analytics.monthly_revenue],
        },
    }
