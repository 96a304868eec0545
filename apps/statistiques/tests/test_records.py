"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Test cases for the ORM-backed record source
-------------------------------------------------------------------------
"""
from datetime import date
from decimal import Decimal
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from django.utils import timezone

from apps.budget.models import BudgetAnnuel
from apps.core.exceptions import InvalidDimension, UpstreamFetchFailure
from apps.dossiers.models import Convention, ConventionType, Dossier, Paiement
from apps.referentiel.models import Pce, Sgami
from apps.statistiques.records import OrmRecordSource, RecordKind, parse_record_kind


class OrmRecordSourceTest(TestCase):
    """Test cases for OrmRecordSource"""

    def setUp(self):
        """Set up test fixtures"""
        self.ouest = Sgami.objects.create(nom='SGAMI Ouest')
        self.sud = Sgami.objects.create(nom='SGAMI Sud')

        self.avocat = Pce.objects.create(
            ordre=2, pce_detaille="Frais d'avocat", pce_numerique='6227-01'
        )
        self.huissier = Pce.objects.create(
            ordre=1, pce_detaille="Frais d'huissier", pce_numerique='6227-02'
        )

        self.dossier = Dossier.objects.create(numero='AJ-2024-0001', sgami=self.ouest)
        self.orphan = Dossier.objects.create(numero='AJ-2024-0002')

        Convention.objects.create(
            dossier=self.dossier, montant_ht=Decimal('1000.00'), date_creation=date(2024, 1, 10)
        )
        Convention.objects.create(
            dossier=self.dossier, type=ConventionType.AVENANT,
            montant_ht=Decimal('250.00'), date_creation=date(2024, 3, 2)
        )
        # Not yet valued: no engagement
        Convention.objects.create(dossier=self.orphan, date_creation=date(2024, 4, 1))
        Convention.objects.create(
            dossier=self.orphan, montant_ht=Decimal('99.00'), date_creation=date(2022, 6, 1)
        )

        Paiement.objects.create(
            dossier=self.dossier, sgami=self.sud, pce=self.avocat,
            montant_ht=Decimal('1000.00'), montant_ttc=Decimal('1200.00'),
            date_emission=date(2024, 2, 5)
        )
        Paiement.objects.create(
            dossier=self.orphan, montant_ttc=Decimal('300.00'), date_emission=date(2024, 5, 20)
        )
        Paiement.objects.create(
            dossier=self.dossier, sgami=self.ouest, montant_ttc=Decimal('50.00'),
            date_emission=date(2025, 1, 3)
        )

    def test_engagements_come_from_valued_conventions(self):
        records = OrmRecordSource().fetch_payment_records(2024, RecordKind.ENGAGEMENT)

        self.assertEqual([r.amount for r in records], [Decimal('1000.00'), Decimal('250.00')])
        self.assertEqual([r.date for r in records], [date(2024, 1, 10), date(2024, 3, 2)])
        self.assertEqual({r.payer for r in records}, {'SGAMI Ouest'})
        self.assertTrue(all(r.budget_line is None for r in records))
        self.assertEqual(records[0].dossier, self.dossier.pk)

    def test_payments_carry_payer_and_budget_line(self):
        records = OrmRecordSource().fetch_payment_records(2024)

        self.assertEqual(len(records), 2)
        first, second = records
        self.assertEqual(first.amount, Decimal('1200.00'))
        self.assertEqual(first.payer, 'SGAMI Sud')
        self.assertEqual(first.budget_line, '6227-01')
        self.assertIsNone(second.payer)
        self.assertIsNone(second.budget_line)

    def test_payments_carry_pre_tax_amount_and_dossier(self):
        first, second = OrmRecordSource().fetch_payment_records(2024)

        self.assertEqual(first.pre_tax_amount, Decimal('1000.00'))
        self.assertEqual(first.dossier, self.dossier.pk)
        self.assertIsNone(second.pre_tax_amount)
        self.assertEqual(second.dossier, self.orphan.pk)

    def test_conventions_created_or_signed_in_year(self):
        Convention.objects.create(
            dossier=self.orphan, montant_ht=Decimal('400.00'),
            date_creation=date(2023, 12, 1), date_retour_signe=date(2024, 1, 8)
        )

        records = OrmRecordSource().fetch_convention_records(2024)

        self.assertEqual(
            [r.created for r in records],
            [date(2023, 12, 1), date(2024, 1, 10), date(2024, 3, 2), date(2024, 4, 1)]
        )
        self.assertEqual(records[0].signed, date(2024, 1, 8))
        self.assertEqual(records[2].type, ConventionType.AVENANT)
        self.assertIsNone(records[3].amount)

    def test_dossier_counts(self):
        Dossier.objects.filter(pk=self.orphan.pk).update(
            created_at=timezone.now().replace(year=2022, month=6, day=1)
        )
        this_year = timezone.now().year

        counts = OrmRecordSource().fetch_dossier_counts(this_year)

        self.assertEqual(counts.all_years, 2)
        self.assertEqual(counts.year, 1)
        self.assertEqual(OrmRecordSource().fetch_dossier_counts(2022).year, 1)

    def test_annual_budget_includes_top_ups(self):
        BudgetAnnuel.objects.create(
            annee=2024, budget_base=Decimal('90000.00'), abondements=Decimal('10000.00')
        )

        source = OrmRecordSource()
        self.assertEqual(source.fetch_annual_budget(2024), Decimal('100000.00'))
        self.assertIsNone(source.fetch_annual_budget(2023))

    def test_budget_line_order(self):
        lines = OrmRecordSource().fetch_budget_line_order()

        self.assertEqual([line.code for line in lines], ['6227-02', '6227-01'])
        self.assertEqual(lines[0].label, "6227-02 - Frais d'huissier")

    def test_available_years(self):
        self.assertEqual(OrmRecordSource().fetch_available_years(), [2025, 2024, 2022])

    def test_database_error_becomes_upstream_failure(self):
        with mock.patch.object(BudgetAnnuel, 'total_for_year', side_effect=DatabaseError('connection lost')):
            with self.assertRaises(UpstreamFetchFailure) as ctx:
                OrmRecordSource().fetch_annual_budget(2024)

        self.assertEqual(ctx.exception.http_status, 500)
        self.assertIsInstance(ctx.exception.__cause__, DatabaseError)


class ParseRecordKindTest(TestCase):
    """Test cases for parse_record_kind"""

    def test_default_when_missing(self):
        self.assertEqual(parse_record_kind(None, RecordKind.ENGAGEMENT), RecordKind.ENGAGEMENT)
        self.assertEqual(parse_record_kind('', RecordKind.PAIEMENT), RecordKind.PAIEMENT)

    def test_explicit_value(self):
        self.assertEqual(parse_record_kind('paiements', RecordKind.ENGAGEMENT), RecordKind.PAIEMENT)

    def test_unknown_value(self):
        with self.assertRaises(InvalidDimension):
            parse_record_kind('factures', RecordKind.PAIEMENT)
