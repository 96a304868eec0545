"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Test cases for monthly aggregation and year validation
-------------------------------------------------------------------------
"""
from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase, override_settings

from apps.core.exceptions import InvalidAmount, InvalidRecord, InvalidYear
from apps.statistiques.monthly import MONTH_LABELS, aggregate_monthly, validate_year
from apps.statistiques.records import PaymentRecord
from apps.statistiques.tests.helpers import record


class AggregateMonthlyTest(SimpleTestCase):
    """Test cases for aggregate_monthly"""

    def test_twelve_buckets_even_without_records(self):
        series = aggregate_monthly([], 2024)

        self.assertEqual(len(series.months), 12)
        self.assertEqual([m.label for m in series.months], list(MONTH_LABELS))
        self.assertEqual([m.month for m in series.months], list(range(1, 13)))
        for month in series.months:
            self.assertEqual(month.gross, Decimal('0'))
            self.assertEqual(month.cumulative, Decimal('0'))
        self.assertEqual(series.total.gross, Decimal('0'))

    def test_gross_is_sum_of_month_records(self):
        records = [
            record('1000.00', 2024, 1, 3),
            record('250.50', 2024, 1, 28),
            record('2000.00', 2024, 2),
        ]

        series = aggregate_monthly(records, 2024)

        self.assertEqual(series.months[0].gross, Decimal('1250.50'))
        self.assertEqual(series.months[1].gross, Decimal('2000.00'))
        self.assertEqual(series.months[2].gross, Decimal('0'))

    def test_cumulative_is_running_sum(self):
        records = [
            record('1000', 2024, 1),
            record('2000', 2024, 2),
            record('500', 2024, 6),
        ]

        series = aggregate_monthly(records, 2024)
        cumulative = [m.cumulative for m in series.months]

        self.assertEqual(cumulative[0], Decimal('1000'))
        self.assertEqual(cumulative[1], Decimal('3000'))
        self.assertEqual(cumulative[4], Decimal('3000'))
        self.assertEqual(cumulative[5], Decimal('3500'))
        self.assertEqual(cumulative[11], Decimal('3500'))
        self.assertEqual(cumulative, sorted(cumulative))

    def test_total_entry(self):
        records = [record('1000', 2024, 1), record('2000', 2024, 12)]

        series = aggregate_monthly(records, 2024)

        self.assertTrue(series.total.is_total)
        self.assertFalse(series.months[0].is_total)
        self.assertEqual(series.total.label, 'TOTAL')
        self.assertEqual(series.total.gross, Decimal('3000'))
        self.assertEqual(series.total.cumulative, series.months[11].cumulative)

    def test_record_outside_year_is_rejected(self):
        with self.assertRaises(InvalidRecord):
            aggregate_monthly([record('10', 2023, 12, 31)], 2024)

    def test_to_dict_keys(self):
        series = aggregate_monthly([record('1000', 2024, 1)], 2024)
        data = series.months[0].to_dict()

        self.assertEqual(data['mois'], 'Janvier')
        self.assertEqual(data['montantGageHT'], 1000.0)
        self.assertEqual(data['cumuleHT'], 1000.0)
        self.assertEqual(data['pourcentageMontantGage'], 0.0)
        self.assertEqual(data['prevision10'], 0.0)


class PaymentRecordTest(SimpleTestCase):
    """Test cases for PaymentRecord validation"""

    def test_negative_amount_is_rejected(self):
        with self.assertRaises(InvalidAmount):
            PaymentRecord(amount=Decimal('-1'), date=date(2024, 1, 1))

    def test_non_finite_amount_is_rejected(self):
        with self.assertRaises(InvalidAmount):
            PaymentRecord(amount=Decimal('NaN'), date=date(2024, 1, 1))

    def test_float_amount_is_rejected(self):
        with self.assertRaises(InvalidAmount):
            PaymentRecord(amount=12.5, date=date(2024, 1, 1))

    def test_integer_amount_is_converted(self):
        item = PaymentRecord(amount=12, date=date(2024, 1, 1))
        self.assertEqual(item.amount, Decimal('12'))

    def test_missing_date_is_rejected(self):
        with self.assertRaises(InvalidRecord):
            PaymentRecord(amount=Decimal('1'), date=None)

    def test_invalid_amount_is_an_invalid_record(self):
        self.assertTrue(issubclass(InvalidAmount, InvalidRecord))


@override_settings(STATISTIQUES_ANNEE_FONDATION=2015)
class ValidateYearTest(SimpleTestCase):
    """Test cases for validate_year"""

    today = date(2026, 5, 10)

    def test_missing_year_defaults_to_current_year(self):
        self.assertEqual(validate_year(None, today=self.today), 2026)
        self.assertEqual(validate_year('', today=self.today), 2026)

    def test_string_year_is_parsed(self):
        self.assertEqual(validate_year('2024', today=self.today), 2024)
        self.assertEqual(validate_year(' 2024 ', today=self.today), 2024)

    def test_next_year_is_allowed(self):
        self.assertEqual(validate_year(2027, today=self.today), 2027)

    def test_non_numeric_year(self):
        with self.assertRaises(InvalidYear) as ctx:
            validate_year('deux-mille', today=self.today)
        self.assertEqual(ctx.exception.http_status, 400)

    def test_year_after_next_year(self):
        with self.assertRaises(InvalidYear):
            validate_year(2028, today=self.today)

    def test_year_before_foundation(self):
        with self.assertRaises(InvalidYear):
            validate_year(2014, today=self.today)

    def test_boolean_is_not_a_year(self):
        with self.assertRaises(InvalidYear):
            validate_year(True, today=self.today)

    @override_settings(STATISTIQUES_ANNEE_FONDATION=2020)
    def test_foundation_year_is_configurable(self):
        self.assertEqual(validate_year(2020, today=self.today), 2020)
        with self.assertRaises(InvalidYear):
            validate_year(2019, today=self.today)
