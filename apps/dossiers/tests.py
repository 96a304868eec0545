"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Test cases for dossiers, conventions and payments
-------------------------------------------------------------------------
"""
from datetime import date
from decimal import Decimal

from django.test import TestCase

from apps.dossiers.models import Convention, ConventionType, Dossier, Paiement
from apps.referentiel.models import Sgami


class DossierModelTest(TestCase):
    """Test cases for the dossier models"""

    def setUp(self):
        self.sgami = Sgami.objects.create(nom='SGAMI Nord')
        self.dossier = Dossier.objects.create(numero='AJ-2024-0042', sgami=self.sgami)

    def test_convention_defaults_to_convention_type(self):
        convention = Convention.objects.create(
            dossier=self.dossier, montant_ht=Decimal('1500.00'), date_creation=date(2024, 2, 1)
        )

        self.assertEqual(convention.type, ConventionType.CONVENTION)
        self.assertEqual(str(self.dossier), 'AJ-2024-0042')
        self.assertIn('AJ-2024-0042', str(convention))

    def test_related_records(self):
        Convention.objects.create(dossier=self.dossier, date_creation=date(2024, 2, 1))
        Paiement.objects.create(
            dossier=self.dossier, sgami=self.sgami,
            montant_ttc=Decimal('1800.00'), date_emission=date(2024, 3, 1)
        )

        self.assertEqual(self.dossier.conventions.count(), 1)
        self.assertEqual(self.sgami.paiements.count(), 1)
        self.assertEqual(self.sgami.dossiers.count(), 1)

    def test_deleting_dossier_removes_its_conventions(self):
        Convention.objects.create(dossier=self.dossier, date_creation=date(2024, 2, 1))
        self.dossier.delete()

        self.assertEqual(Convention.objects.count(), 0)
