"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Annual budget configuration.
-------------------------------------------------------------------------
"""
