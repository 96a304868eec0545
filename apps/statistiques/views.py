"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Printable budgetary statistics table for a year.
-------------------------------------------------------------------------
"""
from typing import Any, Dict

from django.contrib.auth.mixins import LoginRequiredMixin
from django.views.generic import TemplateView

from apps.core.exceptions import GestAJException, UpstreamFetchFailure
from apps.statistiques.logging import StatistiquesLogger
from apps.statistiques.services import StatistiquesBudgetairesService


class BudgetTableauView(LoginRequiredMixin, TemplateView):
    """
    HTML rendering of every budget panel of a year, from one snapshot.

    Amounts and percentages go through the ``statistiques_tags`` filters.
    On an engine error the page is rendered with the error message and
    the matching HTTP status, without any partial table.
    """

    template_name = 'statistiques/budget_tableau.html'

    def get(self, request, *args, **kwargs):
        service = StatistiquesBudgetairesService()
        try:
            context = self.get_context_data(tableau=service.compute_dashboard(request.GET.get('annee')))
        except GestAJException as exc:
            log_context = {'path': request.path, 'params': request.GET.dict()}
            if isinstance(exc, UpstreamFetchFailure):
                StatistiquesLogger.log_upstream_failure('budget_tableau', exc, log_context)
            else:
                StatistiquesLogger.log_validation_error('budget_tableau', exc, log_context)
            return self.render_to_response(self.get_context_data(erreur=exc.to_dict()), status=exc.http_status)
        return self.render_to_response(context)

    def get_context_data(self, **kwargs) -> Dict[str, Any]:
        context = super().get_context_data(**kwargs)
        tableau = kwargs.get('tableau')
        if tableau:
            context['annee'] = tableau['annee']
        return context
