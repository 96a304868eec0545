"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Test cases for the statistics endpoints and the printable
             table
-------------------------------------------------------------------------
"""
from datetime import date
from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.test import Client, TestCase, override_settings
from django.urls import reverse

from apps.budget.models import BudgetAnnuel
from apps.core.exceptions import UpstreamFetchFailure
from apps.dossiers.models import Convention, Dossier, Paiement
from apps.referentiel.models import Pce, Sgami
from apps.statistiques.records import OrmRecordSource

User = get_user_model()


@override_settings(STATISTIQUES_ANNEE_FONDATION=2015, STATISTIQUES_CATEGORIES_EN_GRAS={})
class StatistiquesViewsTest(TestCase):
    """Test cases for the statistics views"""

    def setUp(self):
        """Set up test fixtures"""
        self.user = User.objects.create_user(username='gestionnaire', password='testpass123')
        self.client = Client()
        self.client.force_login(self.user)

        ouest = Sgami.objects.create(nom='SGAMI Ouest')
        pce = Pce.objects.create(ordre=1, pce_detaille="Frais d'avocat", pce_numerique='6227-01')
        dossier = Dossier.objects.create(numero='AJ-2024-0001', sgami=ouest)

        BudgetAnnuel.objects.create(annee=2024, budget_base=Decimal('100000.00'))
        Convention.objects.create(dossier=dossier, montant_ht=Decimal('1000.00'), date_creation=date(2024, 1, 15))
        Convention.objects.create(dossier=dossier, montant_ht=Decimal('2000.00'), date_creation=date(2024, 2, 15))
        Paiement.objects.create(
            dossier=dossier, sgami=ouest, pce=pce,
            montant_ttc=Decimal('4000.00'), date_emission=date(2024, 3, 1)
        )
        Paiement.objects.create(dossier=dossier, montant_ttc=Decimal('1000.00'), date_emission=date(2024, 4, 1))

    def test_login_required(self):
        response = Client().get(reverse('statistiques:budget_mensuel'), {'annee': 2024})
        self.assertEqual(response.status_code, 302)

    def test_monthly_report(self):
        response = self.client.get(reverse('statistiques:budget_mensuel'), {'annee': '2024'})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        february = data['engagementsMensuels'][1]
        self.assertEqual(data['annee'], 2024)
        self.assertEqual(data['budgetTotal'], 100000.0)
        self.assertEqual(february['cumuleHT'], 3000.0)
        self.assertAlmostEqual(february['pourcentageCumuleHT'], 3.0)
        self.assertAlmostEqual(february['prevision10'], 3300.0)
        self.assertAlmostEqual(february['prevision20'], 3600.0)
        self.assertEqual(data['total']['montantGageHT'], 3000.0)

    def test_monthly_report_from_payments(self):
        response = self.client.get(
            reverse('statistiques:budget_mensuel'), {'annee': '2024', 'source': 'paiements'}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['total']['montantGageHT'], 5000.0)

    def test_monthly_report_invalid_year(self):
        response = self.client.get(reverse('statistiques:budget_mensuel'), {'annee': '1990'})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error_code'], 'ERR_INVALID_YEAR')

    def test_monthly_report_non_numeric_year(self):
        response = self.client.get(reverse('statistiques:budget_mensuel'), {'annee': 'abc'})
        self.assertEqual(response.status_code, 400)

    def test_category_report_by_payer(self):
        response = self.client.get(
            reverse('statistiques:budget_categories'),
            {'annee': '2024', 'dimension': 'payer', 'details': 'true'}
        )

        self.assertEqual(response.status_code, 200)
        rows = response.json()['statistiques']
        self.assertEqual([row['libelle'] for row in rows], ['SGAMI Ouest', 'Sans SGAMI assigné', 'TOTAL'])
        self.assertAlmostEqual(rows[0]['pourcentage'], 4.0)
        self.assertEqual(rows[0]['extraInfo']['nombrePaiements'], 1)
        self.assertTrue(rows[-1]['isTotal'])
        self.assertEqual(rows[-1]['nombre'], 5000.0)

    def test_category_report_by_budget_line(self):
        response = self.client.get(
            reverse('statistiques:budget_categories'),
            {'annee': '2024', 'dimension': 'budgetLine', 'previsions': '1'}
        )

        rows = response.json()['statistiques']
        self.assertEqual(rows[0]['libelle'], "6227-01 - Frais d'avocat")
        self.assertEqual(rows[1]['libelle'], 'Sans PCE assigné')
        self.assertAlmostEqual(rows[0]['prevision10'], 4400.0)
        self.assertNotIn('extraInfo', rows[0])

    def test_category_report_unknown_dimension(self):
        response = self.client.get(
            reverse('statistiques:budget_categories'), {'annee': '2024', 'dimension': 'region'}
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error_code'], 'ERR_INVALID_DIMENSION')

    def test_upstream_failure_returns_500(self):
        failure = UpstreamFetchFailure("Could not fetch payment records.")
        with mock.patch.object(OrmRecordSource, 'fetch_payment_records', side_effect=failure):
            with self.assertLogs('apps.statistiques', level='ERROR'):
                response = self.client.get(reverse('statistiques:budget_mensuel'), {'annee': '2024'})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()['error_code'], 'ERR_UPSTREAM_FETCH')

    def test_available_years(self):
        response = self.client.get(reverse('statistiques:annees'))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [2024])

    def test_tableau(self):
        response = self.client.get(reverse('statistiques:budget_tableau'), {'annee': '2024'})

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Statistiques budgétaires 2024')
        self.assertContains(response, '100 000,00 €')
        self.assertContains(response, '3,0 %')
        self.assertContains(response, 'Sans PCE assigné')

    def test_tableau_invalid_year(self):
        response = self.client.get(reverse('statistiques:budget_tableau'), {'annee': '1990'})

        self.assertEqual(response.status_code, 400)
        self.assertContains(response, 'ERR_INVALID_YEAR', status_code=400)
        self.assertNotContains(response, '<table>', status_code=400)

    def test_engagement_summary(self):
        response = self.client.get(reverse('statistiques:budget_synthese'), {'annee': '2024'})

        self.assertEqual(response.status_code, 200)
        rows = response.json()['statistiques']
        self.assertEqual(rows[0]['nombre'], 1)
        self.assertEqual(rows[0]['type'], 'number')
        self.assertEqual(rows[2]['libelle'], 'Conventions créées')
        self.assertEqual(rows[2]['nombre'], 2)
        self.assertEqual(rows[-1]['libelle'], 'Montant HT gagé total')
        self.assertEqual(rows[-1]['nombre'], 3000.0)
        self.assertAlmostEqual(rows[-1]['pourcentage'], 3.0)

    def test_payment_summary(self):
        response = self.client.get(reverse('statistiques:budget_depenses'), {'annee': '2024'})

        self.assertEqual(response.status_code, 200)
        rows = response.json()['statistiques']
        self.assertEqual(rows[0]['nombre'], 2)
        self.assertEqual(rows[1]['nombre'], 2500.0)
        self.assertEqual(rows[-1]['libelle'], 'Dépense totale TTC')
        self.assertEqual(rows[-1]['nombre'], 5000.0)

    def test_payment_summary_invalid_year(self):
        response = self.client.get(reverse('statistiques:budget_depenses'), {'annee': '1990'})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error_code'], 'ERR_INVALID_YEAR')

    def test_tableau_shows_every_panel(self):
        response = self.client.get(reverse('statistiques:budget_tableau'), {'annee': '2024'})

        self.assertContains(response, 'Montant HT gagé total')
        self.assertContains(response, 'Dépense totale TTC')
        self.assertContains(response, 'SGAMI Ouest')

    def test_tableau_reads_the_budget_once(self):
        with mock.patch.object(
            OrmRecordSource, 'fetch_annual_budget', autospec=True, return_value=Decimal('100000.00')
        ) as fetch_budget:
            response = self.client.get(reverse('statistiques:budget_tableau'), {'annee': '2024'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(fetch_budget.call_count, 1)
