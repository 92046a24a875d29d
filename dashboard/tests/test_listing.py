import math
import random
from datetime import date

import pytest

from dashboard.services import listing, renderers
from dashboard.state import DomainStore


def patients_store(n):
    store = DomainStore()
    store.replace({'patients': [
        {'patient_id': i, 'first_name': f'Name{i}', 'last_name': 'Doe' if i % 2 else 'Roe', 'age': 20 + i,
         'status': 'Admitted' if i % 3 == 0 else 'New Patient'}
        for i in range(1, n + 1)
    ]})
    return store


@pytest.mark.parametrize('n', [1, 9, 10, 11, 25, 30])
def test_pagination_page_count_and_slices(n):
    items = list(range(n))
    pages = math.ceil(n / 10)
    assert listing.paginate(items, 1, 10).total_pages == pages
    for k in range(1, pages + 1):
        assert listing.paginate(items, k, 10).items == items[(k - 1) * 10:min(k * 10, n)]


def test_pagination_control_hides_single_page():
    assert listing.pagination_control(listing.paginate(list(range(5))))['pages'] == []
    control = listing.pagination_control(listing.paginate(list(range(25)), page=2))
    assert control['pages'] == [1, 2, 3]
    assert control['page'] == 2
    assert control['totalPages'] == 3


def test_page_below_one_is_clamped():
    assert listing.paginate([1, 2, 3], page=0).page == 1


def test_search_and_status_filters_intersect():
    store = patients_store(30)

    def ids(**kw):
        return {row['id'] for row in renderers.render_patients(store, page_size=100, **kw)['rows']}

    by_search = ids(search='doe')
    by_status = ids(status='Admitted')
    assert ids(search='doe', status='Admitted') == by_search & by_status
    assert ids(search='doe', status='all') == by_search


def test_patient_search_covers_id():
    store = patients_store(12)
    rows = renderers.render_patients(store, search='12')['rows']
    assert [r['id'] for r in rows] == [12]


def test_render_patients_states():
    empty = renderers.render_patients(DomainStore())
    assert empty['state'] == listing.EMPTY
    assert empty['pagination'] is None
    assert empty['placeholder']['title'] == 'No Patients Yet'

    store = patients_store(3)
    miss = renderers.render_patients(store, search='nobody')
    assert miss['state'] == listing.NO_RESULTS
    assert miss['rows'] == []
    assert miss['pagination']['total'] == 0
    assert miss['placeholder']['title'] == 'No Matching Patients'

    hit = renderers.render_patients(store)
    assert hit['state'] == listing.OK
    assert hit['placeholder'] is None
    assert hit['rows'][0]['statusClass'] == 'status-new-patient'


def test_sort_toggles_direction():
    store = patients_store(3)
    assert listing.sort_collection(store, 'patients', 'age') == ('age', 'asc')
    assert [p.age for p in store.patients] == [21, 22, 23]
    assert listing.sort_collection(store, 'patients', 'age') == ('age', 'desc')
    assert [p.age for p in store.patients] == [23, 22, 21]
    # a different column starts ascending again
    assert listing.sort_collection(store, 'patients', 'last_name') == ('last_name', 'asc')


def test_sort_puts_blanks_last():
    store = DomainStore()
    store.replace({'patients': [{'patient_id': 1, 'age': None}, {'patient_id': 2, 'age': 50},
                                {'patient_id': 3, 'age': 'n/a'}, {'patient_id': 4, 'age': 5}]})
    listing.sort_collection(store, 'patients', 'age')
    assert [p.patient_id for p in store.patients] == [4, 2, 3, 1]
    listing.sort_collection(store, 'patients', 'age')
    assert [p.patient_id for p in store.patients] == [3, 2, 4, 1]


def test_descending_sort_keeps_empty_strings_last():
    store = DomainStore()
    store.replace({'patients': [{'patient_id': 1, 'first_name': ''}, {'patient_id': 2, 'first_name': 'Ann'},
                                {'patient_id': 3, 'first_name': 'Zoe'}]})
    listing.sort_collection(store, 'patients', 'first_name')
    assert listing.sort_collection(store, 'patients', 'first_name') == ('first_name', 'desc')
    assert [p.patient_id for p in store.patients] == [3, 2, 1]


def test_appointment_rows_join_names(state):
    result = renderers.render_appointments(state.store)
    first = result['rows'][0]
    assert first['patient'] == 'John Smith'
    assert first['doctor'] == 'Dr. Sarah Wilson'
    assert result['doctorOptions'][0] == {'value': 'all', 'label': 'All Doctors'}
    assert len(result['doctorOptions']) == 3


def test_appointment_row_missing_references(state):
    state.store.replace({'patients': [], 'doctors': []})
    row = renderers.render_appointments(state.store)['rows'][0]
    assert row['patient'] == renderers.MISSING
    assert row['doctor'] == renderers.MISSING


def test_appointment_filters(state):
    store = state.store
    assert len(renderers.render_appointments(store, doctor_id='2')['rows']) == 1
    assert len(renderers.render_appointments(store, doctor_id='all')['rows']) == 3
    assert len(renderers.render_appointments(store, status='Pending')['rows']) == 1
    rows = renderers.render_appointments(store, search='wilson')['rows']
    assert {r['id'] for r in rows} == {1, 2}
    rows = renderers.render_appointments(store, search='khan')['rows']
    assert [r['treatment'] for r in rows] == ['Blood Test']


def test_recent_appointments_drop_id_and_limit(state):
    state.store.replace({'appointments': [{'appt_id': i, 'patient_id': 1, 'doctor_id': 1} for i in range(1, 10)]})
    recent = renderers.recent_appointments(state.store)
    assert len(recent['rows']) == 5
    assert 'id' not in recent['rows'][0]
    assert renderers.recent_appointments(DomainStore())['placeholder']['title'] == 'No Appointments Yet'


def test_doctor_cards(state):
    cards = renderers.render_doctors(state.store, date(2026, 10, 19))['cards']
    assert cards[0]['todayAppointments'] == 1
    assert cards[0]['availability'] == 'Available'
    assert cards[1]['todayAppointments'] == 0
    assert cards[1]['statusClass'] == 'status-unavailable'


def test_department_cards_use_placeholder_patient_counts(state):
    cards = renderers.render_departments(state.store, rng=random.Random(3))['cards']
    assert [c['name'] for c in cards] == ['Cardiology', 'Neurology', 'Orthopedics']
    assert all(20 <= c['patients'] <= 69 for c in cards)
    assert renderers.render_departments(DomainStore())['state'] == listing.EMPTY


def test_schedule_grid(state):
    grid = renderers.render_schedule(state.store, today=date(2026, 10, 21), week_offset=1,
                                     rng=random.Random(7))
    assert grid['weekStart'] == '2026-10-26'
    assert len(grid['rows']) == 6
    surnames = {d.surname for d in state.store.doctors}
    for row in grid['rows']:
        assert len(row['cells']) == 6
        assert all(cell is None or cell in surnames for cell in row['cells'])


def test_schedule_without_doctors_is_blank():
    grid = renderers.render_schedule(DomainStore(), today=date(2026, 10, 19), rng=random.Random(1))
    assert all(cell is None for row in grid['rows'] for cell in row['cells'])
    assert grid['weekStart'] == '2026-10-19'


def test_dashboard_summary(state):
    summary = renderers.dashboard_summary(state.store, date(2026, 10, 20))
    assert summary == {'totalPatients': 3, 'todayAppointments': 1, 'activeDoctors': 1, 'totalDepartments': 3}
