from django.core.management.base import BaseCommand
from django.utils import timezone

from lobby.models import Person


class Command(BaseCommand):
    help = 'Clear expired confirmation tokens of unconfirmed people'

    def handle(self, *args, **options):
        count = Person.objects.filter(
            confirmed=False,
            confirmation_expires__lt=timezone.now(),
        ).update(confirmation_token=None, confirmation_expires=None)
        self.stdout.write(self.style.SUCCESS(f'Cleared {count} expired confirmation tokens'))
