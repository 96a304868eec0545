"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Percentage-of-budget ratios and fixed-margin forecasts.

    A missing or zero annual budget is not an error: every percentage
    computed against it is 0. Forecasts project the cumulative pre-tax
    amount to a year-end liability including a fixed administrative/tax
    margin of +10% or +20%.
-------------------------------------------------------------------------
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Dict, Optional

from apps.statistiques.monthly import MonthlyAggregate, MonthlySeries
from apps.statistiques.records import ZERO, as_json_number, validate_amount


FORECAST_10_RATE = Decimal('1.10')
FORECAST_20_RATE = Decimal('1.20')
# Flat VAT rate used to estimate tax-inclusive totals from pre-tax engagements
VAT_RATE = Decimal('1.20')
HUNDRED = Decimal('100')


def percentage(amount: Decimal, budget: Optional[Decimal]) -> Decimal:
    """
    Get ``amount`` as a percentage of ``budget``.

    The value is not rounded; display rounding belongs to
    ``apps.statistiques.formatting``.

    Raises:
        InvalidAmount: If the amount or the budget is malformed or negative.
    """
    amount = validate_amount(amount, 'amount')
    if budget is None:
        return ZERO
    budget = validate_amount(budget, 'budget')
    if budget == 0:
        return ZERO
    return amount / budget * HUNDRED


def forecast_10(cumulative: Decimal) -> Decimal:
    return validate_amount(cumulative, 'cumulative') * FORECAST_10_RATE


def forecast_20(cumulative: Decimal) -> Decimal:
    return validate_amount(cumulative, 'cumulative') * FORECAST_20_RATE


def tax_inclusive(amount: Decimal) -> Decimal:
    """Estimated tax-inclusive value of a pre-tax amount."""
    return validate_amount(amount, 'amount') * VAT_RATE


@dataclass(frozen=True)
class Forecast:
    """Both projections of an amount and their share of the budget."""

    forecast_10: Decimal
    forecast_20: Decimal
    pct_forecast_10: Decimal
    pct_forecast_20: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            'prevision10': as_json_number(self.forecast_10),
            'prevision20': as_json_number(self.forecast_20),
            'pourcentagePrevision10': as_json_number(self.pct_forecast_10),
            'pourcentagePrevision20': as_json_number(self.pct_forecast_20),
        }


def project(amount: Decimal, budget: Optional[Decimal]) -> Forecast:
    """Project ``amount`` with both margins against ``budget``."""
    projected_10 = forecast_10(amount)
    projected_20 = forecast_20(amount)
    return Forecast(
        forecast_10=projected_10,
        forecast_20=projected_20,
        pct_forecast_10=percentage(projected_10, budget),
        pct_forecast_20=percentage(projected_20, budget),
    )


def _with_ratios(aggregate: MonthlyAggregate, budget: Optional[Decimal]) -> MonthlyAggregate:
    # Forecasts always start from the cumulative amount, never the gross one.
    forecast = project(aggregate.cumulative, budget)
    cumulative_ttc = tax_inclusive(aggregate.cumulative)
    return replace(
        aggregate,
        pct_gross=percentage(aggregate.gross, budget),
        pct_cumulative=percentage(aggregate.cumulative, budget),
        forecast_10=forecast.forecast_10,
        forecast_20=forecast.forecast_20,
        pct_forecast_10=forecast.pct_forecast_10,
        pct_forecast_20=forecast.pct_forecast_20,
        cumulative_ttc=cumulative_ttc,
        pct_cumulative_ttc=percentage(cumulative_ttc, budget),
    )


def apply_ratios(series: MonthlySeries, budget: Optional[Decimal]) -> MonthlySeries:
    """
    Fill the percentage and forecast fields of every monthly aggregate.

    Args:
        series: Output of ``monthly.aggregate_monthly``.
        budget: Total annual budget, or None when not configured.

    Returns:
        A new series; the input is left untouched.
    """
    return MonthlySeries(
        year=series.year,
        months=tuple(_with_ratios(month, budget) for month in series.months),
        total=_with_ratios(series.total, budget),
    )
