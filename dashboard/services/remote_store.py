import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import requests

from dashboard.entities import ENTITY_TYPES
from dashboard.exceptions import RemoteStoreError

logger = logging.getLogger(__name__)

COLLECTIONS = tuple(ENTITY_TYPES)


@dataclass
class RemoteStoreConfig:
    url: str = ''
    enabled: bool = False
    timeout: int = 10

    @property
    def is_configured(self) -> bool:
        return bool(self.enabled and self.url)


class RemoteStore(Protocol):
    def load(self) -> dict: ...

    def save(self, sheet: str, action: str, record: dict) -> bool: ...


def rows_to_records(rows: list) -> list[dict]:
    """Turn a row-oriented sheet (header row first) into a list of dicts."""
    if not rows:
        return []
    header = [str(h).strip() for h in rows[0]]
    records = []
    for row in rows[1:]:
        if not isinstance(row, (list, tuple)):
            continue
        records.append({key: row[i] if i < len(row) else None for i, key in enumerate(header) if key})
    return records


def normalize_collection(value: Any) -> Optional[list[dict]]:
    if not isinstance(value, list):
        return None
    if value and isinstance(value[0], (list, tuple)):
        return rows_to_records(value)
    return [item for item in value if isinstance(item, dict)]


def normalize_payload(data: Any) -> dict:
    """Normalise a load response to ``{collection: [record, ...]}``.

    Only collections present in the response appear in the result.  A
    body reporting a non-success status or an ``error`` raises
    :class:`RemoteStoreError`.
    """
    if not isinstance(data, dict):
        raise RemoteStoreError('Invalid response from remote store: expected an object')
    status = data.get('status')
    if (status is not None and status != 'success') or data.get('error'):
        raise RemoteStoreError(f"Remote store refused the read: {data.get('message') or data.get('error') or status}")
    if status == 'success' and isinstance(data.get('data'), dict):
        data = data['data']
    # sheet names may be capitalised ("Patients")
    lowered = {str(k).lower(): v for k, v in data.items()}
    payload = {}
    for name in COLLECTIONS:
        if name not in lowered:
            continue
        records = normalize_collection(lowered[name])
        if records is not None:
            payload[name] = records
    return payload


class SheetsClient:
    """Client for the spreadsheet web app acting as system of record."""

    def __init__(self, config: RemoteStoreConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def _json(self, response: requests.Response) -> Any:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise RemoteStoreError(f'Remote store answered {response.status_code}') from exc
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteStoreError('Invalid JSON from remote store') from exc

    def load(self) -> dict:
        if not self.config.url:
            raise RemoteStoreError('Remote store URL not configured')
        logger.info('loading collections from %s', self.config.url)
        try:
            r = self.session.get(
                self.config.url,
                params={'action': 'load'},
                headers={'Content-Type': 'application/json'},
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise RemoteStoreError(f'Remote store unreachable: {exc}') from exc
        return normalize_payload(self._json(r))

    def fetch_sheet(self, sheet: str) -> list[dict]:
        """Read a single sheet as a row table (``{"action": "get"}`` variant)."""
        if not self.config.url:
            raise RemoteStoreError('Remote store URL not configured')
        try:
            r = self.session.post(
                self.config.url,
                json={'action': 'get', 'sheet': sheet},
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise RemoteStoreError(f'Remote store unreachable: {exc}') from exc
        data = self._json(r)
        if not isinstance(data, dict) or data.get('status') != 'success':
            raise RemoteStoreError(f'Remote store refused to read sheet {sheet}')
        return normalize_collection(data.get('data')) or []

    def save(self, sheet: str, action: str, record: dict) -> bool:
        if not self.config.url:
            raise RemoteStoreError('Remote store URL not configured')
        logger.info('saving %s/%s to remote store', sheet, action)
        try:
            r = self.session.post(
                self.config.url,
                json={'sheet': sheet, 'action': action, 'data': record},
                headers={'Content-Type': 'application/json'},
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise RemoteStoreError(f'Remote store unreachable: {exc}') from exc
        result = self._json(r)
        if not isinstance(result, dict):
            return False
        return bool(result.get('success') or result.get('status') == 'success')
