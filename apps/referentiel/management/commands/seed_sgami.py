"""
Management command to seed the paying authorities (SGAMI).
"""
from django.core.management.base import BaseCommand

from apps.referentiel.models import Sgami

INITIAL_SGAMI = [
    'SGAMI Ouest',
    'SGAMI Est',
    'SGAMI Nord',
    'SGAMI Sud',
    'SGAMI Centre',
    'SGAMI Île-de-France',
    'SGAMI Outre-mer',
]


class Command(BaseCommand):
    help = 'Seed the paying authorities (SGAMI)'

    def handle(self, *args, **kwargs):
        count = 0
        for nom in INITIAL_SGAMI:
            obj, created = Sgami.objects.get_or_create(nom=nom)
            if created:
                count += 1
                self.stdout.write(f'Created: {nom}')

        self.stdout.write(self.style.SUCCESS(f'Successfully seeded {count} SGAMI.'))
