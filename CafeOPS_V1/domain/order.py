"""
Commande client (boissons / viennoiseries) et devis associé.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from CafeOPS_V1.domain.types import DrinkType, FoodType, MilkType, OrderSize, OrderTemp


class OrderModifiers(BaseModel):
    """Personnalisations d'une boisson, chacune activable indépendamment."""

    size: OrderSize = OrderSize.MEDIUM
    temp: OrderTemp = OrderTemp.HOT
    milk: Optional[MilkType] = None
    syrup: Optional[str] = None  # nom du parfum
    extra_shot: bool = False
    whipped_cream: bool = False
    decaf: bool = False


class DrinkOrderItem(BaseModel):
    type: Literal["drink"] = "drink"
    sku: DrinkType
    quantity: int = Field(default=1, ge=1)
    modifiers: OrderModifiers = Field(default_factory=OrderModifiers)


class FoodOrderItem(BaseModel):
    type: Literal["food"] = "food"
    sku: FoodType
    quantity: int = Field(default=1, ge=1)
    warm: bool = False


OrderItem = Annotated[Union[DrinkOrderItem, FoodOrderItem], Field(discriminator="type")]


class ItemPrice(BaseModel):
    """Prix unitaire d'un article (non arrondi)."""

    base_price: float
    modifier_price: float
    total_price: float


class PriceBreakdown(BaseModel):
    sku: str
    description: str
    quantity: int
    base_price: float
    modifier_price: float
    unit_price: float  # base + suppléments
    total_price: float  # unit_price x quantity


class PriceQuote(BaseModel):
    subtotal: float
    tax: float
    total: float
    breakdown: List[PriceBreakdown] = Field(default_factory=list)
