"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Master data for paying authorities and budget lines.
-------------------------------------------------------------------------
"""
