"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: JSON endpoints for the budgetary statistics panels.
-------------------------------------------------------------------------
"""
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import JsonResponse
from django.views import View

from apps.core.exceptions import GestAJException, UpstreamFetchFailure
from apps.statistiques.logging import StatistiquesLogger
from apps.statistiques.records import RecordKind, parse_record_kind
from apps.statistiques.services import StatistiquesBudgetairesService


TRUTHY = ('1', 'true', 'oui', 'yes')


class StatistiquesApiView(LoginRequiredMixin, View):
    """
    Base JSON view: runs ``compute`` and maps engine errors to responses.

    Validation errors become 4xx responses; record store failures become
    a 500 response and are logged here, once.
    """

    operation = 'statistiques'

    def compute(self, request, service):
        raise NotImplementedError

    def flag(self, name: str) -> bool:
        return self.request.GET.get(name, '').strip().lower() in TRUTHY

    def get(self, request):
        service = StatistiquesBudgetairesService()
        context = {'path': request.path, 'params': request.GET.dict()}
        try:
            payload = self.compute(request, service)
        except UpstreamFetchFailure as exc:
            StatistiquesLogger.log_upstream_failure(self.operation, exc, context)
            return JsonResponse(exc.to_dict(), status=exc.http_status)
        except GestAJException as exc:
            StatistiquesLogger.log_validation_error(self.operation, exc, context)
            return JsonResponse(exc.to_dict(), status=exc.http_status)
        return JsonResponse(payload, safe=False)


class MonthlyBudgetReportView(StatistiquesApiView):
    """
    Monthly engagements of a year with cumulative amounts, budget ratios
    and forecasts.

    Query parameters: ``annee`` (defaults to the current year) and
    ``source`` (``engagements`` or ``paiements``).
    """

    operation = 'monthly_report'

    def compute(self, request, service):
        kind = parse_record_kind(request.GET.get('source'), RecordKind.ENGAGEMENT)
        return service.compute_monthly_report(request.GET.get('annee'), kind)


class CategoryBudgetReportView(StatistiquesApiView):
    """
    Breakdown of a year's records by payer or budget line.

    Query parameters: ``annee``, ``dimension`` (``payer`` or
    ``budgetLine``), ``details`` (count and average per row),
    ``previsions`` (forecasts per row) and ``source``.
    """

    operation = 'category_report'

    def compute(self, request, service):
        kind = parse_record_kind(request.GET.get('source'), RecordKind.PAIEMENT)
        return service.compute_category_report(
            request.GET.get('annee'),
            request.GET.get('dimension'),
            with_secondary_stats=self.flag('details'),
            with_forecasts=self.flag('previsions'),
            kind=kind,
        )


class AvailableYearsView(StatistiquesApiView):
    """Years for which statistics can be shown, most recent first."""

    operation = 'available_years'

    def compute(self, request, service):
        return service.available_years()


class EngagementSummaryView(StatistiquesApiView):
    """
    Engagement panel of a year: dossier and convention counts, averages,
    signed and total pre-tax amounts with forecasts.

    Query parameter: ``annee``.
    """

    operation = 'engagement_summary'

    def compute(self, request, service):
        return service.compute_engagement_summary(request.GET.get('annee'))


class PaymentSummaryView(StatistiquesApiView):
    """
    Ordered-payments panel of a year: count, averages and totals.

    Query parameter: ``annee``.
    """

    operation = 'payment_summary'

    def compute(self, request, service):
        return service.compute_payment_summary(request.GET.get('annee'))
