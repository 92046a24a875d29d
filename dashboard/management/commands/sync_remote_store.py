from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from dashboard.entities import SHEET_NAMES
from dashboard.exceptions import RemoteStoreError
from dashboard.services import analytics
from dashboard.services.sync import pull
from dashboard.state import build_state


class Command(BaseCommand):
    help = "Load every collection from the remote store and report counts and analytics."

    def add_arguments(self, parser):
        parser.add_argument('--url', help='Override REMOTE_STORE_URL for this run')
        parser.add_argument('--per-sheet', action='store_true',
                            help='Read each sheet separately instead of a single load request')

    def handle(self, *args, **options):
        state = build_state()
        if options.get('url'):
            state.config.url = options['url']
            state.config.enabled = True
        if not state.config.is_configured:
            raise CommandError('Remote store not configured (set REMOTE_STORE_URL or pass --url)')

        if options['per_sheet']:
            payload = {}
            for name, sheet in SHEET_NAMES.items():
                try:
                    payload[name] = state.client.fetch_sheet(sheet)
                except RemoteStoreError as e:
                    self.stderr.write(self.style.WARNING(f"skipped {sheet}: {e}"))
            state.store.replace(payload)
            analytics.recompute(state.store)
        elif not pull(state):
            raise CommandError('Loading from the remote store failed')

        for name, count in state.store.counts().items():
            self.stdout.write(f"{name}: {count}")
        dist = state.store.analytics
        self.stdout.write(f"age distribution: {dist.patient_age_distribution}")
        self.stdout.write(f"department distribution: {dist.patient_department_distribution}")
        self.stdout.write(self.style.SUCCESS(f"Synced at {timezone.now()}"))
