"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Budget app configuration.
-------------------------------------------------------------------------
"""
from django.apps import AppConfig


class BudgetConfig(AppConfig):
    """Configuration for the annual budget application."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.budget'
    verbose_name = 'Annual Budget'
