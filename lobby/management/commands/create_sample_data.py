"""
Management command to create sample data for local development
"""
from django.core.management.base import BaseCommand

from lobby.models import Argument, Campaign, Politician, Region, WipCount


class Command(BaseCommand):
    help = 'Create a sample campaign with regions, politicians and arguments'

    def add_arguments(self, parser):
        parser.add_argument(
            '--campaign',
            default='klima',
            help='Slug (and subdomain) of the sample campaign (default: klima)',
        )

    def handle(self, *args, **options):
        self.stdout.write('Creating sample data...')

        regions = {}
        for slug, name in [('zh', 'Zürich'), ('be', 'Bern'), ('vd', 'Vaud')]:
            regions[slug], created = Region.objects.get_or_create(slug=slug, defaults={'name': name})
            if created:
                self.stdout.write(f'Created region: {name}')

        politicians_data = [
            {'first_name': 'Anna', 'last_name': 'Muster', 'party': 'SP', 'region': 'zh'},
            {'first_name': 'Beat', 'last_name': 'Beispiel', 'party': 'FDP', 'region': 'zh'},
            {'first_name': 'Claire', 'last_name': 'Exemple', 'party': 'Grüne', 'region': 'vd'},
            {'first_name': 'Daniel', 'last_name': 'Probst', 'party': 'SVP', 'region': 'be'},
        ]
        politicians = []
        for data in politicians_data:
            slug = f"{data['first_name']}-{data['last_name']}".lower()
            politician, created = Politician.objects.get_or_create(
                slug=slug,
                defaults={
                    'first_name': data['first_name'],
                    'last_name': data['last_name'],
                    'party': data['party'],
                    'politician_type': Politician.TYPE_NATIONAL_COUNCIL,
                }
            )
            politician.regions.add(regions[data['region']])
            politicians.append(politician)
            if created:
                self.stdout.write(f'Created politician: {politician.full_name}')

        campaign, created = Campaign.objects.get_or_create(
            slug=options['campaign'],
            defaults={
                'name': 'Klimaschutz jetzt',
                'description': 'Schreiben Sie Ihren Nationalrätinnen und Nationalräten.',
                'politician_type': Politician.TYPE_NATIONAL_COUNCIL,
            }
        )
        campaign.regions.add(*regions.values())
        if created:
            self.stdout.write(f'Created campaign: {campaign.name}')

        arguments = [
            'Bitte stimmen Sie für ein griffiges CO2-Gesetz.',
            'Die nächste Generation zählt auf Ihre Stimme.',
            'Investitionen in erneuerbare Energie schaffen Arbeitsplätze.',
        ]
        for order, text in enumerate(arguments):
            Argument.objects.get_or_create(campaign=campaign, text=text, defaults={'display_order': order})

        for politician in politicians:
            WipCount.objects.get_or_create(campaign=campaign, politician=politician)

        self.stdout.write(
            self.style.SUCCESS(f'Sample data ready, open http://{campaign.slug}.<LOBBY_DOMAIN>/')
        )
