# cafeops/domain/types.py
from enum import Enum


class DrinkType(str, Enum):
    # Values aligned with JSON keys and the price table SKUs
    ESPRESSO = "espresso"
    LATTE = "latte"
    CAPPUCCINO = "cappuccino"
    POUROVER = "pourover"
    AEROPRESS = "aeropress"
    MOCHA = "mocha"
    AMERICANO = "americano"
    MATCHA = "matcha"


class DrinkCategory(str, Enum):
    ESPRESSO_BASED = "espresso-based"
    POUR_OVER = "pour-over"
    IMMERSION = "immersion"


class GrindSize(str, Enum):
    COARSE = "coarse"
    MEDIUM_COARSE = "medium-coarse"
    MEDIUM = "medium"
    MEDIUM_FINE = "medium-fine"
    FINE = "fine"


class MilkType(str, Enum):
    NONE = "none"
    WHOLE = "whole"
    SKIM = "skim"
    OAT = "oat"
    ALMOND = "almond"


class FoodType(str, Enum):
    CROISSANT = "croissant"
    BANANA_BREAD = "banana_bread"
    BAGEL = "bagel"
    MUFFIN = "muffin"


class OrderSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class OrderTemp(str, Enum):
    HOT = "hot"
    ICED = "iced"


class RelationshipLevel(str, Enum):
    """Palier de fidélité, dérivé uniquement du nombre de visites."""

    STRANGER = "stranger"
    NEWCOMER = "newcomer"
    FAMILIAR = "familiar"
    REGULAR = "regular"
    FAVORITE = "favorite"


class EquipmentCategory(str, Enum):
    ESPRESSO_MACHINE = "espresso_machine"
    GRINDER = "grinder"
    MILK_STEAMER = "milk_steamer"
    BREWING_STATION = "brewing_station"
