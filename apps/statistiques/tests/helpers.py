"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: In-memory record source used by the statistics tests.
-------------------------------------------------------------------------
"""
from datetime import date
from decimal import Decimal

from apps.statistiques.records import DossierCounts, PaymentRecord, RecordKind


def record(amount, year, month, day=15, payer=None, budget_line=None):
    """Shortcut building a PaymentRecord from a string amount."""
    return PaymentRecord(
        amount=Decimal(amount),
        date=date(year, month, day),
        payer=payer,
        budget_line=budget_line,
    )


class FakeRecordSource:
    """
    Record source serving a fixed snapshot.

    ``calls`` keeps every (method, args) received so tests can assert on
    what the service asked for.
    """

    def __init__(self, records=None, budget=None, budget_lines=(), years=(), kind_records=None,
                 conventions=(), dossier_counts=None):
        self.records = list(records or [])
        self.kind_records = kind_records or {}
        self.budget = budget
        self.budget_lines = list(budget_lines)
        self.years = list(years)
        self.conventions = list(conventions)
        self.dossier_counts = dossier_counts or DossierCounts(all_years=0, year=0)
        self.calls = []

    def fetch_payment_records(self, year, kind=RecordKind.PAIEMENT):
        self.calls.append(('fetch_payment_records', year, kind))
        return list(self.kind_records.get(kind, self.records))

    def fetch_annual_budget(self, year):
        self.calls.append(('fetch_annual_budget', year))
        return self.budget

    def fetch_budget_line_order(self):
        self.calls.append(('fetch_budget_line_order',))
        return list(self.budget_lines)

    def fetch_convention_records(self, year):
        self.calls.append(('fetch_convention_records', year))
        return list(self.conventions)

    def fetch_dossier_counts(self, year):
        self.calls.append(('fetch_dossier_counts', year))
        return self.dossier_counts

    def fetch_available_years(self):
        self.calls.append(('fetch_available_years',))
        return list(self.years)
