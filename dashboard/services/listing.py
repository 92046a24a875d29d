"""
Collection-agnostic filtering, sorting and pagination.

These helpers never touch the HTTP layer: they take plain lists and
return plain data so the per-view renderers can be tested directly.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

PAGE_SIZE = 10

EMPTY = 'empty'
NO_RESULTS = 'no_results'
OK = 'ok'


@dataclass
class Page:
    items: list
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0


def matches_search(values: Iterable[Any], term: Optional[str]) -> bool:
    """Case-insensitive substring match of ``term`` against any of ``values``."""
    if not term:
        return True
    needle = term.lower()
    return any(needle in str(v).lower() for v in values if v is not None)


def filter_records(records: Iterable, *predicates: Callable[[Any], bool]) -> list:
    return [r for r in records if all(pred(r) for pred in predicates)]


def is_filter_active(value: Optional[str]) -> bool:
    return bool(value) and value != 'all'


def paginate(items: list, page: int = 1, page_size: int = PAGE_SIZE) -> Page:
    page = max(int(page or 1), 1)
    start = (page - 1) * page_size
    end = start + page_size
    return Page(items=items[start:end], page=page, page_size=page_size, total=len(items))


def pagination_control(page: Page) -> dict:
    total_pages = page.total_pages
    return {
        'page': page.page,
        'pageSize': page.page_size,
        'total': page.total,
        'totalPages': total_pages,
        # single-page results render no page buttons
        'pages': list(range(1, total_pages + 1)) if total_pages > 1 else [],
    }


def _is_blank(value: Any) -> bool:
    return value is None or value == ''


def _sort_key(value: Any) -> tuple:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value)
    return (1, str(value))


def sort_collection(store, collection: str, column: str) -> tuple[str, str]:
    """Sort ``collection`` in place by ``column``, toggling the direction.

    The first sort on a column is ascending; sorting the same column again
    flips to descending.  Blank values stay at the end in both directions.
    The resulting ``(column, order)`` is recorded in ``store.sort_state``.
    """
    with store.lock:
        items = store.collection(collection)
        current = store.sort_state.get(collection)
        descending = current == (column, 'asc')
        present = [item for item in items if not _is_blank(item.get(column))]
        blanks = [item for item in items if _is_blank(item.get(column))]
        present.sort(key=lambda item: _sort_key(item.get(column)), reverse=descending)
        items[:] = present + blanks
        order = 'desc' if descending else 'asc'
        store.sort_state[collection] = (column, order)
    return column, order


PLACEHOLDERS = {
    'patients': {
        EMPTY: {'icon': 'fa-user-injured', 'title': 'No Patients Yet',
                'message': 'Click "+ Add Patient" button above to register your first patient'},
        NO_RESULTS: {'icon': 'fa-search', 'title': 'No Matching Patients',
                     'message': 'Try a different search term or status filter'},
    },
    'appointments': {
        EMPTY: {'icon': 'fa-calendar-plus', 'title': 'No Appointments Scheduled',
                'message': 'Click "+ New Appointment" to schedule your first appointment'},
        NO_RESULTS: {'icon': 'fa-search', 'title': 'No Matching Appointments',
                     'message': 'Try a different search term, status or doctor filter'},
    },
    'recent_appointments': {
        EMPTY: {'icon': 'fa-calendar-times', 'title': 'No Appointments Yet',
                'message': 'Schedule your first appointment to get started'},
    },
    'doctors': {
        EMPTY: {'icon': 'fa-user-md', 'title': 'No Doctors Registered',
                'message': 'Add doctors to manage appointments and schedules'},
    },
    'departments': {
        EMPTY: {'icon': 'fa-building', 'title': 'No Departments',
                'message': 'Add departments to organize your hospital services'},
    },
}


def list_state(collection_size: int, filtered_size: int) -> str:
    if collection_size == 0:
        return EMPTY
    if filtered_size == 0:
        return NO_RESULTS
    return OK


def placeholder(view: str, state: str) -> Optional[dict]:
    return PLACEHOLDERS.get(view, {}).get(state)
