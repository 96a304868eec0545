"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Monthly aggregation of engagements and payments.
             Produces twelve fixed monthly buckets (January to December)
             with gross and running cumulative totals, plus a TOTAL entry.
-------------------------------------------------------------------------
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from django.conf import settings
from django.utils import timezone

from apps.core.exceptions import InvalidRecord, InvalidYear
from apps.statistiques.records import ZERO, PaymentRecord, as_json_number


MONTH_LABELS = (
    'Janvier', 'Février', 'Mars', 'Avril', 'Mai', 'Juin',
    'Juillet', 'Août', 'Septembre', 'Octobre', 'Novembre', 'Décembre',
)
TOTAL_LABEL = 'TOTAL'


def validate_year(raw: Union[str, int, None], today=None) -> int:
    """
    Validate the year requested by a caller.

    A missing value means the current year. Valid years run from
    ``settings.STATISTIQUES_ANNEE_FONDATION`` to next year included.

    Args:
        raw: Year as received (query string value or integer).
        today: Reference date, defaults to the local date.

    Returns:
        The year as an integer.

    Raises:
        InvalidYear: If the value is not an integer or is out of range.
    """
    today = today or timezone.localdate()
    if raw is None or raw == '':
        return today.year
    if isinstance(raw, bool):
        raise InvalidYear(details={'annee': raw})
    try:
        year = int(str(raw).strip())
    except ValueError:
        raise InvalidYear(f"'{raw}' is not a valid year.", details={'annee': raw}) from None

    lower = settings.STATISTIQUES_ANNEE_FONDATION
    upper = today.year + 1
    if not lower <= year <= upper:
        raise InvalidYear(
            f"Year must be between {lower} and {upper}.",
            details={'annee': year, 'min': lower, 'max': upper}
        )
    return year


@dataclass(frozen=True)
class MonthlyAggregate:
    """
    One line of the monthly table.

    ``month`` is None for the TOTAL entry. Percentage and forecast fields
    stay at zero until the series goes through ``ratios.apply_ratios``.
    """

    label: str
    gross: Decimal
    cumulative: Decimal
    month: Optional[int] = None
    pct_gross: Decimal = ZERO
    pct_cumulative: Decimal = ZERO
    forecast_10: Decimal = ZERO
    forecast_20: Decimal = ZERO
    pct_forecast_10: Decimal = ZERO
    pct_forecast_20: Decimal = ZERO
    cumulative_ttc: Decimal = ZERO
    pct_cumulative_ttc: Decimal = ZERO

    @property
    def is_total(self) -> bool:
        return self.month is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mois': self.label,
            'montantGageHT': as_json_number(self.gross),
            'pourcentageMontantGage': as_json_number(self.pct_gross),
            'cumuleHT': as_json_number(self.cumulative),
            'pourcentageCumuleHT': as_json_number(self.pct_cumulative),
            'prevision10': as_json_number(self.forecast_10),
            'pourcentagePrevision10': as_json_number(self.pct_forecast_10),
            'prevision20': as_json_number(self.forecast_20),
            'pourcentagePrevision20': as_json_number(self.pct_forecast_20),
            'cumuleTTC': as_json_number(self.cumulative_ttc),
            'pourcentageCumuleTTC': as_json_number(self.pct_cumulative_ttc),
        }


@dataclass(frozen=True)
class MonthlySeries:
    """Twelve monthly aggregates (January first) and the TOTAL entry."""

    year: int
    months: Tuple[MonthlyAggregate, ...]
    total: MonthlyAggregate


def aggregate_monthly(records: Iterable[PaymentRecord], year: int) -> MonthlySeries:
    """
    Group records into twelve monthly buckets and accumulate them.

    Months without records are kept with a zero amount. The TOTAL entry
    carries the sum of the twelve months as both its gross and its
    cumulative amount.

    Raises:
        InvalidRecord: If a record is dated outside ``year``.
    """
    buckets = [ZERO] * 12
    for record in records:
        if record.date.year != year:
            raise InvalidRecord(
                f"Record dated {record.date.isoformat()} does not belong to {year}.",
                details={'date': record.date.isoformat(), 'annee': year, 'dossier': record.dossier}
            )
        buckets[record.month - 1] += record.amount

    months = []
    cumulative = ZERO
    for index, gross in enumerate(buckets):
        cumulative += gross
        months.append(MonthlyAggregate(
            label=MONTH_LABELS[index],
            month=index + 1,
            gross=gross,
            cumulative=cumulative,
        ))

    total = MonthlyAggregate(
        label=TOTAL_LABEL,
        gross=sum(buckets, ZERO),
        cumulative=cumulative,
    )
    return MonthlySeries(year=year, months=tuple(months), total=total)
