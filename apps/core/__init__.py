"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Core app initialization. Contains shared mixins and exceptions.
-------------------------------------------------------------------------
"""
