"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Financial records consumed by the budgetary statistics
             engine and the ORM-backed source that supplies them.
-------------------------------------------------------------------------
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from functools import wraps
from typing import Any, List, Optional

from django.db import DatabaseError, models
from django.utils.translation import gettext_lazy as _

from apps.budget.models import BudgetAnnuel
from apps.core.exceptions import InvalidAmount, InvalidDimension, InvalidRecord, UpstreamFetchFailure
from apps.dossiers.models import Convention, Dossier, Paiement
from apps.referentiel.models import Pce


ZERO = Decimal('0.00')


class RecordKind(models.TextChoices):
    """
    Family of financial records a report is computed from.
    """
    ENGAGEMENT = 'engagements', _('Engagements (conventions, pre-tax)')
    PAIEMENT = 'paiements', _('Ordered payments (tax-inclusive)')


def parse_record_kind(raw: Optional[str], default: RecordKind) -> RecordKind:
    """Resolve the ``source`` query parameter, falling back to ``default``."""
    if raw in (None, ''):
        return default
    try:
        return RecordKind(raw)
    except ValueError:
        raise InvalidDimension(
            f"Unknown record source '{raw}'.",
            details={'source': raw, 'allowed': list(RecordKind.values)}
        ) from None


def validate_amount(value: Any, field: str = 'amount') -> Decimal:
    """
    Check that ``value`` is a finite, non-negative number.

    Integers are accepted and converted; floats and strings are not, as
    they cannot carry currency precision reliably.

    Raises:
        InvalidAmount: If the value is malformed or negative.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
        raise InvalidAmount(
            f"{field} must be a decimal amount.",
            details={'field': field, 'value': repr(value)}
        )
    value = Decimal(value)
    if not value.is_finite() or value < 0:
        raise InvalidAmount(
            f"{field} must be a finite non-negative amount.",
            details={'field': field, 'value': str(value)}
        )
    return value


def as_json_number(value: Optional[Decimal]) -> Optional[float]:
    """Convert a Decimal to a plain JSON number (None stays None)."""
    if value is None:
        return None
    return float(value)


@dataclass(frozen=True)
class PaymentRecord:
    """
    One engagement or payment, as seen by the statistics engine.

    Attributes:
        amount: Amount in currency precision (pre-tax for engagements,
                tax-inclusive for payments)
        date: Date the record is attributed to (month and year)
        payer: Name of the paying SGAMI, if any
        budget_line: PCE numeric code, if any
        dossier: Primary key of the dossier
        pre_tax_amount: Pre-tax amount of a payment, when recorded
    """

    amount: Decimal
    date: date
    payer: Optional[str] = None
    budget_line: Optional[str] = None
    dossier: Optional[int] = None
    pre_tax_amount: Optional[Decimal] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'amount', validate_amount(self.amount))
        if self.pre_tax_amount is not None:
            object.__setattr__(self, 'pre_tax_amount', validate_amount(self.pre_tax_amount, 'pre_tax_amount'))
        if not isinstance(self.date, date):
            raise InvalidRecord(
                "Record date must be a date.",
                details={'value': repr(self.date)}
            )

    @property
    def month(self) -> int:
        return self.date.month


@dataclass(frozen=True)
class BudgetLine:
    """PCE master data entry, in its configured display sequence."""

    code: str
    label: str
    ordre: int


@dataclass(frozen=True)
class ConventionRecord:
    """
    A fee agreement or one of its amendments.

    Attributes:
        type: ``ConventionType`` value (convention or avenant)
        created: Creation date
        signed: Date the signed copy came back from the lawyer, if any
        amount: Pre-tax amount, None while not valued yet
    """

    type: str
    created: date
    signed: Optional[date] = None
    amount: Optional[Decimal] = None

    def __post_init__(self) -> None:
        if self.amount is not None:
            object.__setattr__(self, 'amount', validate_amount(self.amount))
        if not isinstance(self.created, date):
            raise InvalidRecord(
                "Convention creation date must be a date.",
                details={'value': repr(self.created)}
            )

    def created_in(self, year: int) -> bool:
        return self.created.year == year

    def signed_in(self, year: int) -> bool:
        return self.signed is not None and self.signed.year == year


@dataclass(frozen=True)
class DossierCounts:
    """Number of dossiers ever opened and opened during the requested year."""

    all_years: int
    year: int


def _wraps_database_errors(operation: str):
    """Turn database errors raised by a fetch into UpstreamFetchFailure."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DatabaseError as exc:
                raise UpstreamFetchFailure(
                    f"Could not fetch {operation}.",
                    details={'operation': operation}
                ) from exc
        return wrapper
    return decorator


class OrmRecordSource:
    """
    Record source reading dossiers, conventions, payments and budgets
    through the Django ORM.

    Every call returns a fresh snapshot; nothing is cached between
    requests.
    """

    @_wraps_database_errors('payment records')
    def fetch_payment_records(self, year: int, kind: RecordKind = RecordKind.PAIEMENT) -> List[PaymentRecord]:
        """
        Get the records of a calendar year.

        Engagements are the conventions and amendments created during the
        year (pre-tax amount, payer taken from the dossier). Conventions
        without an amount have not committed anything yet and are skipped.
        Payments are those issued during the year (tax-inclusive amount).
        """
        if kind == RecordKind.ENGAGEMENT:
            rows = Convention.objects.filter(
                date_creation__year=year,
                montant_ht__isnull=False
            ).order_by('date_creation', 'pk').values_list(
                'montant_ht', 'date_creation', 'dossier__sgami__nom', 'dossier_id'
            )
            return [
                PaymentRecord(amount=amount, date=day, payer=payer, dossier=dossier)
                for amount, day, payer, dossier in rows
            ]

        rows = Paiement.objects.filter(
            date_emission__year=year
        ).order_by('date_emission', 'pk').values_list(
            'montant_ttc', 'date_emission', 'sgami__nom', 'pce__pce_numerique', 'dossier_id', 'montant_ht'
        )
        return [
            PaymentRecord(
                amount=amount, date=day, payer=payer, budget_line=code,
                dossier=dossier, pre_tax_amount=pre_tax
            )
            for amount, day, payer, code, dossier, pre_tax in rows
        ]

    @_wraps_database_errors('annual budget')
    def fetch_annual_budget(self, year: int) -> Optional[Decimal]:
        return BudgetAnnuel.total_for_year(year)

    @_wraps_database_errors('budget line order')
    def fetch_budget_line_order(self) -> List[BudgetLine]:
        return [
            BudgetLine(code=pce.pce_numerique, label=pce.libelle, ordre=pce.ordre)
            for pce in Pce.objects.order_by('ordre')
        ]

    @_wraps_database_errors('conventions')
    def fetch_convention_records(self, year: int) -> List[ConventionRecord]:
        """Conventions and amendments created or signed during the year."""
        rows = Convention.objects.filter(
            models.Q(date_creation__year=year) | models.Q(date_retour_signe__year=year)
        ).order_by('date_creation', 'pk').values_list(
            'type', 'date_creation', 'date_retour_signe', 'montant_ht'
        )
        return [
            ConventionRecord(type=kind, created=created, signed=signed, amount=amount)
            for kind, created, signed, amount in rows
        ]

    @_wraps_database_errors('dossier counts')
    def fetch_dossier_counts(self, year: int) -> DossierCounts:
        return DossierCounts(
            all_years=Dossier.objects.count(),
            year=Dossier.created_in_year(year).count(),
        )

    @_wraps_database_errors('available years')
    def fetch_available_years(self) -> List[int]:
        """Years holding at least one engagement or payment, most recent first."""
        years = {d.year for d in Convention.objects.dates('date_creation', 'year')}
        years.update(d.year for d in Paiement.objects.dates('date_emission', 'year'))
        return sorted(years, reverse=True)
