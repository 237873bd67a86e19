"""
Paramètres du moteur de scoring (qualité d'une boisson, échelle 0..100).
"""

from CafeOPS_V1.domain.types import GrindSize

SCORING = {
    "PERFECT": 100,
    # Seuils du feedback
    "EXCELLENT_THRESHOLD": 95,
    "GOOD_THRESHOLD": 85,
    "ACCEPTABLE_THRESHOLD": 75,
    "DECENT_THRESHOLD": 60,
    "POOR_THRESHOLD": 40,
    # Score à tolérance : 75..100 dans la bande, puis pente raide
    "MIN_TOLERANCE_SCORE": 75,
    "MAX_TOLERANCE_BONUS": 25,
    "PENALTY_MULTIPLIER": 15,
    "MAX_PENALTY": 75,
    # Mouture (catégoriel, strictement décroissant)
    "GRIND_PERFECT": 100,
    "GRIND_ONE_OFF": 70,
    "GRIND_TWO_OFF": 40,
    "GRIND_WAY_OFF": 10,
}

# Échelle ordinale des moutures (grossière -> fine)
GRIND_VALUES = {
    GrindSize.COARSE: 1,
    GrindSize.MEDIUM_COARSE: 2,
    GrindSize.MEDIUM: 3,
    GrindSize.MEDIUM_FINE: 4,
    GrindSize.FINE: 5,
}

# --- Plages de validité des mesures ---
TEMP_RANGE = (77.0, 100.0)  # °C
MILK_TEMP_RANGE = (49.0, 82.0)  # °C
FOAM_RANGE = (0.0, 100.0)  # %

# Valeurs par défaut proposées au joueur avant réglage
DEFAULT_TEMPERATURE = 91.0
DEFAULT_ESPRESSO_TIME = 25.0
DEFAULT_BREW_TIME = 90.0
DEFAULT_BLOOM_TIME = 30.0
DEFAULT_MILK_TEMP = 66.0
DEFAULT_FOAM_AMOUNT = 30.0
