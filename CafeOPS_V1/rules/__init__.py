"""
Règles de calcul : score qualité d'une boisson et tarification des commandes.

Fonctions pures, sans état ; les tables viennent de ``CafeOPS_V1.data``.
"""
