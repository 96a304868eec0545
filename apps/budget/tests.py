"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Test cases for the annual budget model
-------------------------------------------------------------------------
"""
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase

from apps.budget.models import BudgetAnnuel


class BudgetAnnuelModelTest(TestCase):
    """Test cases for BudgetAnnuel"""

    def test_total_is_base_plus_top_ups(self):
        budget = BudgetAnnuel.objects.create(
            annee=2024, budget_base=Decimal('80000.00'), abondements=Decimal('20000.00')
        )
        self.assertEqual(budget.total, Decimal('100000.00'))

    def test_total_for_year(self):
        BudgetAnnuel.objects.create(annee=2024, budget_base=Decimal('50000.00'))

        self.assertEqual(BudgetAnnuel.total_for_year(2024), Decimal('50000.00'))
        self.assertIsNone(BudgetAnnuel.total_for_year(2023))

    def test_top_ups_are_reflected_after_update(self):
        budget = BudgetAnnuel.objects.create(annee=2025, budget_base=Decimal('1000.00'))
        budget.abondements = Decimal('500.00')
        budget.save()

        self.assertEqual(BudgetAnnuel.total_for_year(2025), Decimal('1500.00'))
        self.assertIsNotNone(budget.public_id)

    def test_negative_base_is_invalid(self):
        budget = BudgetAnnuel(annee=2026, budget_base=Decimal('-1.00'))
        with self.assertRaises(ValidationError):
            budget.full_clean()

    def test_str(self):
        self.assertEqual(str(BudgetAnnuel(annee=2024, budget_base=Decimal('0'))), 'Budget 2024')
