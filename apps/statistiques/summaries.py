"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Headline panels of the budget dashboard.

    - engagement summary: dossier and convention counts, average amounts
      and the committed pre-tax amounts with their forecasts
    - payment summary: ordered payments count, averages and totals

    Both panels reuse the row types of ``categories``: counts are
    ``number`` rows, averages ``currency`` rows, and amounts compared to
    the budget follow ``amount_kind``. Each panel ends with a TotalRow.
-------------------------------------------------------------------------
"""
from decimal import Decimal
from typing import Iterable, List, Optional

from apps.dossiers.models import ConventionType
from apps.statistiques.categories import CategoryRow, Row, RowKind, TotalRow, amount_kind, average
from apps.statistiques.ratios import percentage, project
from apps.statistiques.records import ZERO, ConventionRecord, DossierCounts, PaymentRecord


def _count_row(key: str, label: str, count: int) -> CategoryRow:
    return CategoryRow(key=key, label=label, amount=Decimal(count), percentage=ZERO, kind=RowKind.NUMBER)


def _average_row(key: str, label: str, amounts: List[Decimal]) -> CategoryRow:
    return CategoryRow(
        key=key,
        label=label,
        amount=average(sum(amounts, ZERO), len(amounts)),
        percentage=ZERO,
        kind=RowKind.CURRENCY,
    )


def _valued(conventions: Iterable[ConventionRecord]) -> List[Decimal]:
    return [convention.amount for convention in conventions if convention.amount is not None]


def build_engagement_summary(
    conventions: Iterable[ConventionRecord],
    dossiers: DossierCounts,
    year: int,
    budget: Optional[Decimal] = None,
) -> List[Row]:
    """
    Build the engagement panel of a year.

    Conventions are counted on their creation date and again on their
    signature date. Unvalued conventions count as created or signed but
    do not weigh on the averages and amounts.

    Args:
        conventions: Conventions and amendments created or signed in ``year``.
        dossiers: Dossier counts.
        year: The requested year.
        budget: Total annual budget, or None when not configured.

    Returns:
        Count rows, average rows, the signed amount and, last, the total
        committed amount as a bold TotalRow.
    """
    conventions = list(conventions)
    created = [c for c in conventions if c.created_in(year)]
    signed = [c for c in conventions if c.signed_in(year)]

    def of_type(items, kind):
        return [c for c in items if c.type == kind]

    signed_amount = sum(_valued(signed), ZERO)
    total_amount = sum(_valued(created), ZERO)

    return [
        _count_row('dossiers_total', 'Dossiers toutes années', dossiers.all_years),
        _count_row('dossiers_annee', f'Dossiers {year}', dossiers.year),
        _count_row('conventions_creees', 'Conventions créées', len(of_type(created, ConventionType.CONVENTION))),
        _count_row('conventions_signees', 'Convention signées (avocat)', len(of_type(signed, ConventionType.CONVENTION))),
        _count_row('avenants_crees', 'Avenants créés', len(of_type(created, ConventionType.AVENANT))),
        _count_row('avenants_signes', 'Avenants signés (avocat)', len(of_type(signed, ConventionType.AVENANT))),
        _average_row(
            'moyenne_convention', 'Montant moyen gagé par convention',
            _valued(of_type(created, ConventionType.CONVENTION))
        ),
        _average_row(
            'moyenne_avenant', 'Montant moyen gagé par avenant',
            _valued(of_type(created, ConventionType.AVENANT))
        ),
        CategoryRow(
            key='montant_signe',
            label='Montant HT gagé (signés)',
            amount=signed_amount,
            percentage=percentage(signed_amount, budget),
            kind=amount_kind(budget),
            forecast=project(signed_amount, budget),
        ),
        TotalRow(
            label='Montant HT gagé total',
            amount=total_amount,
            percentage=percentage(total_amount, budget),
            kind=amount_kind(budget),
            bold=True,
            forecast=project(total_amount, budget),
        ),
    ]


def build_payment_summary(payments: Iterable[PaymentRecord], budget: Optional[Decimal] = None) -> List[Row]:
    """
    Build the ordered-payments panel of a year.

    The per-dossier average divides the tax-inclusive total by the number
    of distinct dossiers paid. The pre-tax total is indicative: payments
    recorded without a pre-tax amount are left out of it.
    """
    payments = list(payments)
    amounts = [payment.amount for payment in payments]
    total_ttc = sum(amounts, ZERO)
    total_ht = sum((p.pre_tax_amount for p in payments if p.pre_tax_amount is not None), ZERO)
    dossiers = {payment.dossier for payment in payments}

    return [
        _count_row('paiements_emis', 'Nombre de paiements émis', len(payments)),
        _average_row('moyenne_paiement', 'Montant moyen TTC par paiement', amounts),
        CategoryRow(
            key='moyenne_dossier',
            label='Montant moyen TTC par dossier',
            amount=average(total_ttc, len(dossiers)),
            percentage=ZERO,
            kind=RowKind.CURRENCY,
        ),
        CategoryRow(
            key='depense_ht',
            label='Dépense totale HT (indicatif)',
            amount=total_ht,
            percentage=percentage(total_ht, budget),
            kind=amount_kind(budget),
        ),
        TotalRow(
            label='Dépense totale TTC',
            amount=total_ttc,
            percentage=percentage(total_ttc, budget),
            kind=amount_kind(budget),
        ),
    ]
