"""
Tarifs de la carte (USD, hors taxe) et suppléments.
"""

from CafeOPS_V1.domain.types import DrinkType, FoodType, MilkType, OrderSize

DRINK_BASE_PRICES = {
    DrinkType.ESPRESSO: 3.0,
    DrinkType.LATTE: 4.5,
    DrinkType.CAPPUCCINO: 4.5,
    DrinkType.POUROVER: 5.0,
    DrinkType.AEROPRESS: 4.0,
    DrinkType.MOCHA: 5.0,
    DrinkType.AMERICANO: 3.5,
    DrinkType.MATCHA: 5.5,
}

FOOD_BASE_PRICES = {
    FoodType.CROISSANT: 3.5,
    FoodType.BANANA_BREAD: 3.0,
    FoodType.BAGEL: 2.5,
    FoodType.MUFFIN: 3.0,
}

# Multiplicateur appliqué au prix de base (avant les suppléments)
SIZE_MULTIPLIERS = {
    OrderSize.SMALL: 0.8,  # -20%
    OrderSize.MEDIUM: 1.0,
    OrderSize.LARGE: 1.3,  # +30%
}

# Suppléments forfaitaires
EXTRA_SHOT_PRICE = 1.0
WHIPPED_CREAM_PRICE = 0.5
SYRUP_PRICE = 0.75
DECAF_PRICE = 0.0
ICED_PRICE = 0.0
WARMING_PRICE = 0.0

# Lait entier / écrémé offert, laits végétaux facturés
MILK_UPGRADE_PRICES = {
    MilkType.NONE: 0.0,
    MilkType.WHOLE: 0.0,
    MilkType.SKIM: 0.0,
    MilkType.OAT: 0.75,
    MilkType.ALMOND: 0.75,
}

TAX_RATE = 0.08  # 8%
