"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Category breakdowns of engagements and payments, by paying
             authority (SGAMI) or by budget line (PCE).

    A breakdown is a list of ``CategoryRow`` terminated by exactly one
    ``TotalRow``. Whether a row is the total is carried by its type, never
    by its label.

    Ordering depends on the dimension and is declared in ``DIMENSIONS``:
    - payer: order of first appearance in the records
    - budget line: the ``ordre`` sequence of the PCE master data
    Records without a value for the dimension are grouped into an
    "unassigned" category placed after the others, so the total row is
    always the sum of the category rows.
-------------------------------------------------------------------------
"""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from operator import attrgetter, methodcaller
from typing import Any, Callable, ClassVar, Collection, Dict, Iterable, List, Optional, Sequence, Union

from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.exceptions import InvalidDimension
from apps.statistiques.ratios import Forecast, percentage, project
from apps.statistiques.records import ZERO, BudgetLine, PaymentRecord, as_json_number


CENT = Decimal('0.01')
TOTAL_LABEL = 'TOTAL'


class Dimension(models.TextChoices):
    """
    Grouping dimension of a category breakdown.
    """
    PAYER = 'payer', _('Paying authority')
    BUDGET_LINE = 'budgetLine', _('Budget line')


class RowKind(models.TextChoices):
    """
    Display hint telling the reporting panels which columns to render.
    """
    CURRENCY = 'currency', _('Amount')
    CURRENCY_WITH_PERCENTAGE = 'currency_with_percentage', _('Amount with percentage')
    NUMBER = 'number', _('Number')


def parse_dimension(raw: Optional[str]) -> Dimension:
    try:
        return Dimension(raw)
    except ValueError:
        raise InvalidDimension(
            f"Unknown grouping dimension '{raw}'.",
            details={'dimension': raw, 'allowed': list(Dimension.values)}
        ) from None


def first_appearance(keys: List[str], sequence: Sequence[str]) -> List[str]:
    return list(keys)


def configured_sequence(keys: List[str], sequence: Sequence[str]) -> List[str]:
    """Sort keys by their rank in ``sequence``; unknown keys follow in appearance order."""
    rank = {code: position for position, code in enumerate(sequence)}
    known = sorted((key for key in keys if key in rank), key=rank.__getitem__)
    return known + [key for key in keys if key not in rank]


@dataclass(frozen=True)
class GroupingDimension:
    """
    How records are grouped along one dimension.

    Attributes:
        key: Extracts the category key of a record (None when unassigned)
        ordering: Orders the keys found, given the reference sequence
        unassigned_label: Label of the category gathering unassigned records
        reference: Loads the ordered master data (code, label) from a record
                   source, or None when the dimension has no reference list
    """

    key: Callable[[PaymentRecord], Optional[str]]
    ordering: Callable[[List[str], Sequence[str]], List[str]]
    unassigned_label: str
    reference: Optional[Callable[[Any], List[BudgetLine]]] = None


DIMENSIONS: Dict[Dimension, GroupingDimension] = {
    Dimension.PAYER: GroupingDimension(attrgetter('payer'), first_appearance, 'Sans SGAMI assigné'),
    Dimension.BUDGET_LINE: GroupingDimension(attrgetter('budget_line'), configured_sequence, 'Sans PCE assigné', methodcaller('fetch_budget_line_order')),
}


@dataclass(frozen=True)
class _Row:
    label: str
    amount: Decimal
    percentage: Decimal
    kind: str
    bold: bool = False
    payment_count: Optional[int] = None
    average_amount: Optional[Decimal] = None
    forecast: Optional[Forecast] = None

    is_total: ClassVar[bool] = False

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'libelle': self.label,
            'nombre': int(self.amount) if self.kind == RowKind.NUMBER else as_json_number(self.amount),
            'pourcentage': as_json_number(self.percentage),
            'type': self.kind,
            'bold': self.bold,
            'isTotal': self.is_total,
        }
        if self.payment_count is not None:
            data['extraInfo'] = {
                'nombrePaiements': self.payment_count,
                'montantMoyen': as_json_number(self.average_amount),
            }
        if self.forecast is not None:
            data.update(self.forecast.to_dict())
        return data


@dataclass(frozen=True)
class CategoryRow(_Row):
    """One category of the breakdown. ``key`` is None for the unassigned group."""

    key: Optional[str] = None


@dataclass(frozen=True)
class TotalRow(_Row):
    """Synthesized grand total, always the last row of a breakdown."""

    is_total: ClassVar[bool] = True


Row = Union[CategoryRow, TotalRow]


def amount_kind(budget: Optional[Decimal]) -> RowKind:
    """Amounts only show a percentage when there is a budget to compare with."""
    if not budget:
        return RowKind.CURRENCY
    return RowKind.CURRENCY_WITH_PERCENTAGE


def average(amount: Decimal, count: int) -> Decimal:
    """Average amount rounded to the cent; 0 when there is nothing to average."""
    if count == 0:
        return ZERO
    return (amount / count).quantize(CENT, rounding=ROUND_HALF_UP)


def _row_values(amount: Decimal, count: int, budget: Optional[Decimal],
                with_secondary_stats: bool, with_forecasts: bool) -> Dict[str, Any]:
    return {
        'amount': amount,
        'percentage': percentage(amount, budget),
        'kind': amount_kind(budget),
        'payment_count': count if with_secondary_stats else None,
        'average_amount': average(amount, count) if with_secondary_stats else None,
        'forecast': project(amount, budget) if with_forecasts else None,
    }


def build_breakdown(
    records: Iterable[PaymentRecord],
    dimension: Union[Dimension, str],
    budget: Optional[Decimal] = None,
    reference: Sequence[BudgetLine] = (),
    emphasized: Collection[str] = (),
    with_secondary_stats: bool = False,
    with_forecasts: bool = False,
) -> List[Row]:
    """
    Group records along ``dimension`` and append the total row.

    Args:
        records: Records of the requested year.
        dimension: Grouping dimension (enum member or its value).
        budget: Total annual budget, or None when not configured.
        reference: Ordered master data giving the sequence and the labels
                   of the categories (budget lines).
        emphasized: Category keys to flag as bold.
        with_secondary_stats: Add payment count and average amount.
        with_forecasts: Add the +10%/+20% projections of each amount.

    Returns:
        Category rows in dimension order, followed by one TotalRow.

    Raises:
        InvalidDimension: If the dimension is unknown.
    """
    grouping = DIMENSIONS[parse_dimension(dimension)]
    labels = {line.code: line.label for line in reference}

    groups: Dict[Optional[str], List[Decimal]] = {}
    for record in records:
        groups.setdefault(grouping.key(record), []).append(record.amount)

    keys = grouping.ordering([key for key in groups if key is not None], [line.code for line in reference])
    if None in groups:
        keys.append(None)

    rows: List[Row] = []
    for key in keys:
        amounts = groups[key]
        rows.append(CategoryRow(
            key=key,
            label=grouping.unassigned_label if key is None else labels.get(key, key),
            bold=key is not None and key in emphasized,
            **_row_values(sum(amounts, ZERO), len(amounts), budget, with_secondary_stats, with_forecasts)
        ))

    total_amount = sum((row.amount for row in rows), ZERO)
    total_count = sum(len(amounts) for amounts in groups.values())
    rows.append(TotalRow(
        label=TOTAL_LABEL,
        **_row_values(total_amount, total_count, budget, with_secondary_stats, with_forecasts)
    ))
    return rows
