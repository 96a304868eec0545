"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Dossiers app configuration.
-------------------------------------------------------------------------
"""
from django.apps import AppConfig


class DossiersConfig(AppConfig):
    """Configuration for the case files application."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.dossiers'
    verbose_name = 'Case Files'
