"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Root URL configuration.
-------------------------------------------------------------------------
"""
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('accounts/', include('django.contrib.auth.urls')),
    path('statistiques/', include('apps.statistiques.urls')),
    path('', RedirectView.as_view(url='/statistiques/budget/tableau/', permanent=False), name='home'),
]
