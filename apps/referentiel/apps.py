"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Referentiel app configuration.
-------------------------------------------------------------------------
"""
from django.apps import AppConfig


class ReferentielConfig(AppConfig):
    """Configuration for the master data application."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.referentiel'
    verbose_name = 'Master Data'
