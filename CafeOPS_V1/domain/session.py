"""
État explicite d'une partie, possédé et versionné par la boucle de jeu.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from CafeOPS_V1.domain.customer import MemoryState
from CafeOPS_V1.domain.equipment import Equipment
from CafeOPS_V1.domain.order import DrinkOrderItem, OrderItem, OrderModifiers
from CafeOPS_V1.domain.types import DrinkType, MilkType


class Customer(BaseModel):
    """Client au comptoir (nom et commande fournis par la couche dialogue)."""

    name: str
    drink_type: DrinkType
    items: List[OrderItem] = Field(default_factory=list)
    tip: Optional[float] = Field(default=None, ge=0)
    allergens: List[str] = Field(default_factory=list)

    def order_items(self, milk: Optional[MilkType] = None) -> List[OrderItem]:
        # sans détail de commande : une boisson moyenne du type demandé, avec le lait servi
        if self.items:
            return self.items
        return [DrinkOrderItem(sku=self.drink_type, modifiers=OrderModifiers(milk=milk))]


class GameSession(BaseModel):
    money: float = 0.0
    drinks_served: int = 0
    day: int = 1
    equipment: Equipment = Field(default_factory=Equipment)
    memory: MemoryState = Field(default_factory=MemoryState)
