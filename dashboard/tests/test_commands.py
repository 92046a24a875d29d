import importlib
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from dashboard.services.remote_store import RemoteStoreConfig
from dashboard.state import build_state
from dashboard.tests.fakes import FakeRemoteStore


def patch_state(monkeypatch, command, remote, url='https://sheets.example/exec'):
    module = importlib.import_module(f'dashboard.management.commands.{command}')
    monkeypatch.setattr(module, 'build_state',
                        lambda: build_state(client=remote, config=RemoteStoreConfig(url=url, enabled=bool(url))))


def test_sync_remote_store_prints_counts(monkeypatch):
    remote = FakeRemoteStore()
    patch_state(monkeypatch, 'sync_remote_store', remote)
    out = StringIO()
    call_command('sync_remote_store', stdout=out)
    text = out.getvalue()
    assert 'patients: 3' in text
    assert "'Cardiology': 2" in text
    assert remote.loads == 1


def test_sync_remote_store_per_sheet(monkeypatch):
    remote = FakeRemoteStore()
    patch_state(monkeypatch, 'sync_remote_store', remote)
    out = StringIO()
    call_command('sync_remote_store', '--per-sheet', stdout=out)
    assert 'departments: 3' in out.getvalue()
    assert remote.loads == 0


def test_sync_remote_store_failure(monkeypatch):
    patch_state(monkeypatch, 'sync_remote_store', FakeRemoteStore(fail_load=True))
    with pytest.raises(CommandError):
        call_command('sync_remote_store', stdout=StringIO())


def test_sync_remote_store_requires_url(monkeypatch):
    patch_state(monkeypatch, 'sync_remote_store', FakeRemoteStore(), url='')
    with pytest.raises(CommandError):
        call_command('sync_remote_store', stdout=StringIO())


def test_seed_remote_store_pushes_every_sheet(monkeypatch):
    remote = FakeRemoteStore(payload={})
    patch_state(monkeypatch, 'seed_remote_store', remote)
    call_command('seed_remote_store', '--patients', '3', '--appointments', '4', '--seed', '1', stdout=StringIO())
    sheets = [sheet for sheet, _, _ in remote.saved]
    assert sheets.count('Departments') == 4
    assert sheets.count('Doctors') == 5
    assert sheets.count('Patients') == 3
    assert sheets.count('Appointments') == 4
    patient_ids = {r['patient_id'] for s, _, r in remote.saved if s == 'Patients'}
    assert all(r['patient_id'] in patient_ids for s, _, r in remote.saved if s == 'Appointments')


def test_seed_remote_store_reports_refusals(monkeypatch):
    patch_state(monkeypatch, 'seed_remote_store', FakeRemoteStore(fail_save=True))
    with pytest.raises(CommandError):
        call_command('seed_remote_store', '--patients', '1', '--appointments', '1', stdout=StringIO(),
                     stderr=StringIO())
