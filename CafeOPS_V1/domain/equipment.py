"""
Équipement du café : catalogue (4 catégories x 3 paliers), parc possédé
et résultat d'un achat.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from CafeOPS_V1.domain.types import EquipmentCategory

MAX_TIER = 3


class EquipmentEffects(BaseModel):
    quality_bonus: float = 0.0  # ajouté à chaque composante du score
    brew_time_reduction: float = 0.0  # secondes gagnées (affichage)
    grind_bonus: float = 0.0
    milk_bonus: float = 0.0
    temperature_bonus: float = 0.0
    consistency: float = Field(default=0.0, ge=0, le=100)
    enable_dual_brewing: bool = False
    enable_triple_brewing: bool = False


class EquipmentItem(BaseModel):
    id: str
    name: str
    description: str
    price: float = Field(ge=0)
    tier: int = Field(ge=1, le=MAX_TIER)
    category: EquipmentCategory
    effects: EquipmentEffects = Field(default_factory=EquipmentEffects)


class EquipmentCatalog(RootModel[List[EquipmentItem]]):
    """Catalogue complet ; exactement un article par (catégorie, palier)."""

    @model_validator(mode="after")
    def _one_item_per_tier(self) -> "EquipmentCatalog":
        seen = {(item.category, item.tier) for item in self.root}
        expected = {(c, t) for c in EquipmentCategory for t in range(1, MAX_TIER + 1)}
        if seen != expected or len(self.root) != len(expected):
            raise ValueError("Equipment catalog must hold one item per category and tier")
        return self

    def __iter__(self):
        return iter(self.root)

    def by_id(self) -> Dict[str, EquipmentItem]:
        return {item.id: item for item in self.root}

    def by_tier(self) -> Dict[Tuple[EquipmentCategory, int], EquipmentItem]:
        return {(item.category, item.tier): item for item in self.root}


class Equipment(BaseModel):
    """Palier possédé par catégorie (1 = matériel de départ)."""

    model_config = ConfigDict(frozen=True)

    espresso_machine: int = Field(default=1, ge=1, le=MAX_TIER)
    grinder: int = Field(default=1, ge=1, le=MAX_TIER)
    milk_steamer: int = Field(default=1, ge=1, le=MAX_TIER)
    brewing_station: int = Field(default=1, ge=1, le=MAX_TIER)

    def tier_of(self, category: EquipmentCategory) -> int:
        return getattr(self, EquipmentCategory(category).value)


class PurchaseFailure(str, Enum):
    UNKNOWN_ITEM = "unknown_item"
    INVALID_UPGRADE = "invalid_upgrade"
    INSUFFICIENT_FUNDS = "insufficient_funds"


class PurchaseResult(BaseModel):
    success: bool
    message: str
    reason: Optional[PurchaseFailure] = None
    item: Optional[EquipmentItem] = None
    new_equipment: Optional[Equipment] = None
    new_money: Optional[float] = None
