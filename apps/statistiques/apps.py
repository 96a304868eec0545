"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Statistiques app configuration.
-------------------------------------------------------------------------
"""
from django.apps import AppConfig


class StatistiquesConfig(AppConfig):
    """Budgetary statistics app configuration."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.statistiques'
    verbose_name = 'Budgetary Statistics'
