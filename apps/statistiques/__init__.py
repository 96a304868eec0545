"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Budgetary statistics engine: monthly cumulative series,
             budget ratios, forecasts and category breakdowns.
-------------------------------------------------------------------------
"""
