"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Report composition for the budgetary statistics panels.

    Each call fetches its own snapshot from the record source and runs
    the whole pipeline before returning:

        records -> monthly aggregation -> ratios & forecasts
        records -> category breakdown (payer / budget line)
        conventions, dossiers -> engagement summary
        payments -> payment summary

    The returned dictionaries are ready for JsonResponse. Nothing is
    cached or stored; either a complete report is returned or an
    exception is raised. ``compute_dashboard`` builds every panel from a
    single snapshot so they always agree with each other.

    USAGE:
        from apps.statistiques.services import StatistiquesBudgetairesService

        service = StatistiquesBudgetairesService()
        report = service.compute_monthly_report(2024)
        breakdown = service.compute_category_report(2024, 'budgetLine', with_secondary_stats=True)
-------------------------------------------------------------------------
"""
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Union

from django.conf import settings

from apps.statistiques.categories import DIMENSIONS, Dimension, Row, build_breakdown, parse_dimension
from apps.statistiques.logging import StatistiquesLogger
from apps.statistiques.monthly import aggregate_monthly, validate_year
from apps.statistiques.ratios import apply_ratios
from apps.statistiques.records import BudgetLine, OrmRecordSource, PaymentRecord, RecordKind, as_json_number
from apps.statistiques.summaries import build_engagement_summary, build_payment_summary


def _rows_payload(rows: List[Row], budget: Optional[Decimal], annee: int) -> Dict[str, Any]:
    return {
        'statistiques': [row.to_dict() for row in rows],
        'budgetTotal': as_json_number(budget),
        'annee': annee,
    }


class StatistiquesBudgetairesService:
    """
    Service class composing the budgetary statistics reports.

    The record source is injected so reports can be computed from any
    snapshot; it defaults to the ORM-backed source.
    """

    def __init__(self, source: Optional[Any] = None) -> None:
        self.source = source or OrmRecordSource()

    def compute_monthly_report(
        self,
        year: Union[str, int, None],
        kind: RecordKind = RecordKind.ENGAGEMENT
    ) -> Dict[str, Any]:
        """
        Build the monthly engagement table of a year.

        Args:
            year: Requested year (None means the current year).
            kind: Records to aggregate, engagements by default.

        Returns:
            Dictionary containing:
                - engagementsMensuels: Twelve monthly entries, January first
                - total: TOTAL entry
                - budgetTotal: Annual budget, None when not configured
                - annee: The validated year

        Raises:
            InvalidYear: If the year is invalid.
            InvalidAmount: If a record carries a malformed amount.
            UpstreamFetchFailure: If the record source cannot be read.
        """
        annee = validate_year(year)
        records = self.source.fetch_payment_records(annee, kind)
        budget = self.source.fetch_annual_budget(annee)
        return self._monthly(annee, records, budget, kind)

    def compute_category_report(
        self,
        year: Union[str, int, None],
        dimension: Union[Dimension, str],
        with_secondary_stats: bool = False,
        with_forecasts: bool = False,
        kind: RecordKind = RecordKind.PAIEMENT
    ) -> Dict[str, Any]:
        """
        Build the breakdown of a year's records along one dimension.

        Args:
            year: Requested year (None means the current year).
            dimension: 'payer' or 'budgetLine'.
            with_secondary_stats: Add payment count and average per row.
            with_forecasts: Add +10%/+20% projections per row.
            kind: Records to group, ordered payments by default.

        Returns:
            Dictionary containing:
                - statistiques: Category rows followed by the total row
                - budgetTotal: Annual budget, None when not configured
                - annee: The validated year

        Raises:
            InvalidYear: If the year is invalid.
            InvalidDimension: If the dimension is unknown.
            InvalidAmount: If a record carries a malformed amount.
            UpstreamFetchFailure: If the record source cannot be read.
        """
        annee = validate_year(year)
        dimension = parse_dimension(dimension)
        grouping = DIMENSIONS[dimension]

        records = self.source.fetch_payment_records(annee, kind)
        budget = self.source.fetch_annual_budget(annee)
        reference = grouping.reference(self.source) if grouping.reference else []

        return self._categories(
            annee, dimension, records, budget, reference,
            with_secondary_stats, with_forecasts, kind
        )

    def compute_engagement_summary(self, year: Union[str, int, None]) -> Dict[str, Any]:
        """
        Build the engagement panel: dossier and convention counts, average
        amounts per convention and amendment, signed and total pre-tax
        amounts with forecasts.

        Returns:
            Dictionary containing statistiques, budgetTotal and annee.
        """
        annee = validate_year(year)
        conventions = self.source.fetch_convention_records(annee)
        dossiers = self.source.fetch_dossier_counts(annee)
        budget = self.source.fetch_annual_budget(annee)

        rows = build_engagement_summary(conventions, dossiers, annee, budget)

        StatistiquesLogger.log_report_computed('engagement_summary', annee, len(conventions), {})
        return _rows_payload(rows, budget, annee)

    def compute_payment_summary(self, year: Union[str, int, None]) -> Dict[str, Any]:
        """
        Build the ordered-payments panel: payment count, averages per
        payment and per dossier, pre-tax and tax-inclusive totals.

        Returns:
            Dictionary containing statistiques, budgetTotal and annee.
        """
        annee = validate_year(year)
        payments = self.source.fetch_payment_records(annee, RecordKind.PAIEMENT)
        budget = self.source.fetch_annual_budget(annee)

        rows = build_payment_summary(payments, budget)

        StatistiquesLogger.log_report_computed('payment_summary', annee, len(payments), {})
        return _rows_payload(rows, budget, annee)

    def compute_dashboard(self, year: Union[str, int, None]) -> Dict[str, Any]:
        """
        Build every panel of a year from one snapshot of the record source.

        Returns:
            Dictionary containing:
                - annee, budgetTotal
                - mensuel: monthly engagements report
                - synthese: engagement summary
                - parSgami, parPce: payment breakdowns with secondary stats
                - depenses: payment summary
        """
        annee = validate_year(year)
        engagements = self.source.fetch_payment_records(annee, RecordKind.ENGAGEMENT)
        payments = self.source.fetch_payment_records(annee, RecordKind.PAIEMENT)
        budget = self.source.fetch_annual_budget(annee)
        budget_lines = self.source.fetch_budget_line_order()
        conventions = self.source.fetch_convention_records(annee)
        dossiers = self.source.fetch_dossier_counts(annee)

        def breakdown(dimension, reference):
            return self._categories(
                annee, dimension, payments, budget, reference,
                True, False, RecordKind.PAIEMENT
            )

        dashboard = {
            'annee': annee,
            'budgetTotal': as_json_number(budget),
            'mensuel': self._monthly(annee, engagements, budget, RecordKind.ENGAGEMENT),
            'synthese': _rows_payload(build_engagement_summary(conventions, dossiers, annee, budget), budget, annee),
            'parSgami': breakdown(Dimension.PAYER, []),
            'parPce': breakdown(Dimension.BUDGET_LINE, budget_lines),
            'depenses': _rows_payload(build_payment_summary(payments, budget), budget, annee),
        }
        StatistiquesLogger.log_report_computed(
            'dashboard', annee, len(engagements) + len(payments), {'conventions': len(conventions)}
        )
        return dashboard

    def available_years(self) -> List[int]:
        """Years holding engagements or payments, most recent first."""
        return self.source.fetch_available_years()

    def _monthly(
        self,
        annee: int,
        records: List[PaymentRecord],
        budget: Optional[Decimal],
        kind: RecordKind
    ) -> Dict[str, Any]:
        series = apply_ratios(aggregate_monthly(records, annee), budget)

        StatistiquesLogger.log_report_computed(
            'monthly', annee, len(records), {'source': str(kind)}
        )
        return {
            'engagementsMensuels': [month.to_dict() for month in series.months],
            'total': series.total.to_dict(),
            'budgetTotal': as_json_number(budget),
            'annee': annee,
        }

    def _categories(
        self,
        annee: int,
        dimension: Dimension,
        records: List[PaymentRecord],
        budget: Optional[Decimal],
        reference: Sequence[BudgetLine],
        with_secondary_stats: bool,
        with_forecasts: bool,
        kind: RecordKind
    ) -> Dict[str, Any]:
        rows = build_breakdown(
            records,
            dimension,
            budget=budget,
            reference=reference,
            emphasized=settings.STATISTIQUES_CATEGORIES_EN_GRAS.get(dimension.value, ()),
            with_secondary_stats=with_secondary_stats,
            with_forecasts=with_forecasts,
        )

        StatistiquesLogger.log_report_computed(
            f'category:{dimension.value}', annee, len(records), {'source': str(kind)}
        )
        return _rows_payload(rows, budget, annee)
