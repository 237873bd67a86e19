"""
Paramètres de la mémoire client (relations et appréciations).
"""

from CafeOPS_V1.domain.types import RelationshipLevel

# Nombre de visites minimum pour atteindre chaque palier (du plus haut au plus bas).
# Points de passage : 1 stranger, 2 newcomer, 4 familiar, 9 regular, 16 favorite.
RELATIONSHIP_THRESHOLDS = (
    (RelationshipLevel.FAVORITE, 15),
    (RelationshipLevel.REGULAR, 8),
    (RelationshipLevel.FAMILIAR, 3),
    (RelationshipLevel.NEWCOMER, 2),
    (RelationshipLevel.STRANGER, 0),
)

# Seuils de satisfaction pour le résumé client
VERY_SATISFIED_THRESHOLD = 90
SATISFIED_THRESHOLD = 75
UNSATISFIED_THRESHOLD = 60

# Fenêtre (visites récentes) pour l'attente de qualité
QUALITY_EXPECTATION_WINDOW = 5
