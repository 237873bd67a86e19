"""
Mémoire client : visites, préférences et relation avec le café.

Les dictionnaires conservent l'ordre d'insertion ; les départages
(boisson favorite, lait préféré) se font au premier vu.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from CafeOPS_V1.domain.types import DrinkType, MilkType, RelationshipLevel


class VisitData(BaseModel):
    """Ce que la boucle de jeu transmet pour enregistrer une visite."""

    drink_ordered: DrinkType
    milk_type: Optional[MilkType] = None
    quality: float = Field(ge=0, le=100)
    satisfaction: float = Field(ge=0, le=100)
    payment: float = Field(ge=0)
    tip: Optional[float] = Field(default=None, ge=0)
    allergens: List[str] = Field(default_factory=list)
    day: int = 0  # jour de jeu fourni par l'appelant


class Visit(BaseModel):
    day: int
    drink_ordered: DrinkType
    milk_type: Optional[MilkType] = None
    quality: float
    satisfaction: float
    payment: float
    tip: Optional[float] = None


class CustomerPreferences(BaseModel):
    favorite_drinks: Dict[DrinkType, int] = Field(default_factory=dict)
    preferred_milk: Optional[MilkType] = None
    average_quality_expectation: float = 0.0
    allergens: List[str] = Field(default_factory=list)


class CustomerProfile(BaseModel):
    name: str
    first_visit_day: int
    last_visit_day: int
    visit_count: int = 0
    relationship_level: RelationshipLevel = RelationshipLevel.STRANGER
    visits: List[Visit] = Field(default_factory=list)
    preferences: CustomerPreferences = Field(default_factory=CustomerPreferences)
    total_spent: float = 0.0
    average_satisfaction: float = 0.0
    notes: List[str] = Field(default_factory=list)


class MemoryState(BaseModel):
    customers: Dict[str, CustomerProfile] = Field(default_factory=dict)
    total_customers_served: int = 0
    returning_customer_rate: float = 0.0


class MemoryStats(BaseModel):
    total_customers: int
    returning_customers: int
    regular_customers: int
    favorite_customers: int
    average_satisfaction: float
    total_revenue: float
    returning_rate: float
