"""
Domain objects for CafeOps.

The domain layer holds the plain records exchanged with the rest of the
game: brew parameters and quality results, drink recipes, orders and
price quotes, customer profiles, equipment and the game session.  These are pydantic
models without behaviour so they serialize verbatim and are easy to
unit test.
"""

from .brew import BrewParameters, QualityResult
from .customer import CustomerProfile, MemoryState, MemoryStats, Visit, VisitData
from .equipment import Equipment, EquipmentEffects, EquipmentItem, PurchaseResult
from .order import DrinkOrderItem, FoodOrderItem, OrderModifiers, PriceQuote
from .recipe import DrinkRecipe
from .session import Customer, GameSession
from .types import (
    DrinkCategory,
    DrinkType,
    EquipmentCategory,
    FoodType,
    GrindSize,
    MilkType,
    OrderSize,
    OrderTemp,
    RelationshipLevel,
)

__all__ = [
    "BrewParameters",
    "QualityResult",
    "CustomerProfile",
    "MemoryState",
    "MemoryStats",
    "Visit",
    "VisitData",
    "Equipment",
    "EquipmentEffects",
    "EquipmentItem",
    "PurchaseResult",
    "DrinkOrderItem",
    "FoodOrderItem",
    "OrderModifiers",
    "PriceQuote",
    "DrinkRecipe",
    "Customer",
    "GameSession",
    "DrinkCategory",
    "DrinkType",
    "EquipmentCategory",
    "FoodType",
    "GrindSize",
    "MilkType",
    "OrderSize",
    "OrderTemp",
    "RelationshipLevel",
]
