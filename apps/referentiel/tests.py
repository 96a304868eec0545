"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Test cases for the reference data (SGAMI, PCE)
-------------------------------------------------------------------------
"""
from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.referentiel.management.commands.seed_sgami import INITIAL_SGAMI
from apps.referentiel.models import Pce, Sgami


class PceModelTest(TestCase):
    """Test cases for Pce"""

    def test_libelle(self):
        pce = Pce.objects.create(ordre=1, pce_detaille="Frais d'avocat", pce_numerique='6227-01')
        self.assertEqual(pce.libelle, "6227-01 - Frais d'avocat")

    def test_ordering_follows_ordre(self):
        Pce.objects.create(ordre=3, pce_detaille='C', pce_numerique='3')
        Pce.objects.create(ordre=1, pce_detaille='A', pce_numerique='1')
        Pce.objects.create(ordre=2, pce_detaille='B', pce_numerique='2')

        self.assertEqual(list(Pce.objects.values_list('ordre', flat=True)), [1, 2, 3])


class SeedSgamiCommandTest(TestCase):
    """Test cases for the seed_sgami command"""

    def test_seed_is_idempotent(self):
        call_command('seed_sgami', stdout=StringIO())
        call_command('seed_sgami', stdout=StringIO())

        self.assertEqual(Sgami.objects.count(), len(INITIAL_SGAMI))
        self.assertTrue(Sgami.objects.filter(nom='SGAMI Ouest').exists())
