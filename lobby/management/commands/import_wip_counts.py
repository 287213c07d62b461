import requests
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from lobby.models import Campaign, Politician, WipCount


class Command(BaseCommand):
    help = "Fetch politician response counters from a JSON feed and store them as WIP counts"

    def add_arguments(self, parser):
        parser.add_argument('--campaign', required=True, help='Campaign slug')
        parser.add_argument('--url', required=True, help='URL of the JSON feed')
        parser.add_argument('--timeout', type=int, default=15, help='HTTP timeout seconds')
        parser.add_argument('--dry-run', action='store_true', help='Fetch and validate without saving')

    def handle(self, *args, **options):
        try:
            campaign = Campaign.objects.get(slug=options['campaign'])
        except Campaign.DoesNotExist:
            raise CommandError(f"Campaign not found: {options['campaign']}")

        rows = self.fetch(options['url'], options['timeout'])

        politicians = {p.slug: p for p in Politician.objects.filter(slug__in=[r.get('politician') for r in rows])}
        saved = 0
        skipped = 0
        with transaction.atomic():
            for row in rows:
                politician = politicians.get(row.get('politician'))
                if politician is None:
                    self.stderr.write(f"Unknown politician: {row.get('politician')!r}")
                    skipped += 1
                    continue
                try:
                    status = int(row.get('status', 0))
                    voted = row.get('voted')
                    voted = int(voted) if voted is not None else None
                except (TypeError, ValueError):
                    self.stderr.write(f"Invalid counters for {politician.slug}: {row}")
                    skipped += 1
                    continue

                if not options['dry_run']:
                    WipCount.objects.update_or_create(
                        campaign=campaign,
                        politician=politician,
                        defaults={'status': status, 'voted': voted},
                    )
                saved += 1

        verb = 'Validated' if options['dry_run'] else 'Imported'
        self.stdout.write(self.style.SUCCESS(f"{verb} {saved} WIP counts for {campaign.slug}, skipped {skipped}"))

    def fetch(self, url, timeout):
        try:
            r = requests.get(url, timeout=timeout)
            r.raise_for_status()
            rows = r.json()
        except requests.RequestException as ex:
            raise CommandError(f"Error fetching {url}: {ex}")
        except ValueError as ex:
            raise CommandError(f"Feed at {url} is not JSON: {ex}")

        if not isinstance(rows, list):
            raise CommandError(f"Feed at {url} must be a JSON list")
        return [row for row in rows if isinstance(row, dict)]
