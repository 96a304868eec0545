"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: URL routing for the budgetary statistics endpoints.
-------------------------------------------------------------------------
"""
from django.urls import path

from apps.statistiques.views import BudgetTableauView
from apps.statistiques.views_api import (
    AvailableYearsView,
    CategoryBudgetReportView,
    EngagementSummaryView,
    MonthlyBudgetReportView,
    PaymentSummaryView,
)

app_name = 'statistiques'

urlpatterns = [
    # API Endpoints
    path('budget/', MonthlyBudgetReportView.as_view(), name='budget_mensuel'),
    path('budget/categories/', CategoryBudgetReportView.as_view(), name='budget_categories'),
    path('budget/synthese/', EngagementSummaryView.as_view(), name='budget_synthese'),
    path('budget/depenses/', PaymentSummaryView.as_view(), name='budget_depenses'),
    path('annees/', AvailableYearsView.as_view(), name='annees'),

    # Printable table
    path('budget/tableau/', BudgetTableauView.as_view(), name='budget_tableau'),
]
