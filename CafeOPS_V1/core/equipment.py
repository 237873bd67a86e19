"""
Parc d'équipement et progression : paliers possédés, améliorations
disponibles, bonus de qualité et achats (transition pure).
"""

import logging
from typing import List, Optional

from CafeOPS_V1.data import get_EQUIPMENT_CATALOG
from CafeOPS_V1.domain.equipment import (
    MAX_TIER,
    Equipment,
    EquipmentEffects,
    EquipmentItem,
    PurchaseFailure,
    PurchaseResult,
)
from CafeOPS_V1.domain.types import DrinkCategory, EquipmentCategory
from CafeOPS_V1.utils import round2

logger = logging.getLogger(__name__)

EQUIPMENT_CATALOG = get_EQUIPMENT_CATALOG()
_ITEMS_BY_ID = EQUIPMENT_CATALOG.by_id()
_ITEMS_BY_TIER = EQUIPMENT_CATALOG.by_tier()

# Bonus renforcés selon la famille de boisson
ESPRESSO_QUALITY_MULT = 1.2
POUR_OVER_GRIND_MULT = 1.3


def create_default_equipment() -> Equipment:
    """Matériel de départ : palier 1 partout (gratuit)."""
    return Equipment()


def find_equipment_item(item_id: str) -> Optional[EquipmentItem]:
    return _ITEMS_BY_ID.get(item_id)


def get_current_equipment(equipment: Equipment) -> List[EquipmentItem]:
    """Un article par catégorie, celui du palier possédé."""
    return [
        _ITEMS_BY_TIER[(category, equipment.tier_of(category))]
        for category in EquipmentCategory
    ]


def get_available_upgrades(equipment: Equipment) -> List[EquipmentItem]:
    """Palier suivant de chaque catégorie non encore au maximum."""
    return [
        _ITEMS_BY_TIER[(category, equipment.tier_of(category) + 1)]
        for category in EquipmentCategory
        if equipment.tier_of(category) < MAX_TIER
    ]


def get_equipment_value(equipment: Equipment) -> float:
    return sum(item.price for item in get_current_equipment(equipment))


def calculate_equipment_bonus(
    equipment: Equipment, drink_category: DrinkCategory
) -> EquipmentEffects:
    """Cumule les effets du parc possédé pour une famille de boisson.

    Formule
    -------
    - bonus numériques : somme sur les articles possédés
    - consistency : maximum des articles
    - espresso-based : quality_bonus x 1.2
    - pour-over : grind_bonus x 1.3

    Exemple
    -------
    >>> full = Equipment(espresso_machine=3, grinder=3, milk_steamer=3, brewing_station=3)
    >>> bonus = calculate_equipment_bonus(full, DrinkCategory.ESPRESSO_BASED)
    >>> (bonus.quality_bonus, bonus.temperature_bonus, bonus.consistency)
    (12.0, 16.0, 80.0)
    """
    totals = {
        "quality_bonus": 0.0,
        "brew_time_reduction": 0.0,
        "grind_bonus": 0.0,
        "milk_bonus": 0.0,
        "temperature_bonus": 0.0,
    }
    consistency = 0.0
    dual = triple = False

    for item in get_current_equipment(equipment):
        effects = item.effects
        for key in totals:
            totals[key] += getattr(effects, key)
        consistency = max(consistency, effects.consistency)
        dual = dual or effects.enable_dual_brewing
        triple = triple or effects.enable_triple_brewing

    category = DrinkCategory(drink_category)
    if category == DrinkCategory.ESPRESSO_BASED:
        totals["quality_bonus"] *= ESPRESSO_QUALITY_MULT
    elif category == DrinkCategory.POUR_OVER:
        totals["grind_bonus"] *= POUR_OVER_GRIND_MULT

    return EquipmentEffects(
        **totals,
        consistency=consistency,
        enable_dual_brewing=dual,
        enable_triple_brewing=triple,
    )


def get_brewing_capacity(equipment: Equipment) -> int:
    """Nombre de boissons préparables simultanément (1 à 3)."""
    effects = [item.effects for item in get_current_equipment(equipment)]
    if any(e.enable_triple_brewing for e in effects):
        return 3
    if any(e.enable_dual_brewing for e in effects):
        return 2
    return 1


def purchase_equipment(
    equipment: Equipment, money: float, item_id: str
) -> PurchaseResult:
    """Tente l'achat d'une amélioration.

    Ne lève jamais : un refus est un PurchaseResult(success=False) avec sa
    raison (article inconnu, palier non séquentiel, fonds insuffisants).
    Le parc et l'argent ne changent qu'en cas de succès.
    """
    item = find_equipment_item(item_id)
    if item is None:
        logger.warning("Purchase refused: unknown item %s", item_id)
        return PurchaseResult(
            success=False,
            reason=PurchaseFailure.UNKNOWN_ITEM,
            message="Equipment not found",
        )

    if item not in get_available_upgrades(equipment):
        logger.warning("Purchase refused: %s is not the next tier", item_id)
        return PurchaseResult(
            success=False,
            reason=PurchaseFailure.INVALID_UPGRADE,
            item=item,
            message="This equipment is not available for purchase",
        )

    if money < item.price:
        logger.warning("Purchase refused: %s costs %.2f, have %.2f", item_id, item.price, money)
        return PurchaseResult(
            success=False,
            reason=PurchaseFailure.INSUFFICIENT_FUNDS,
            item=item,
            message=f"Not enough money. Need ${item.price:.2f}, have ${money:.2f}",
        )

    new_equipment = equipment.model_copy(update={item.category.value: item.tier})
    logger.info("Purchased %s for %.2f", item.name, item.price)
    return PurchaseResult(
        success=True,
        item=item,
        message=f"Purchased {item.name}!",
        new_equipment=new_equipment,
        new_money=round2(money - item.price),
    )


def can_afford_any_upgrade(equipment: Equipment, money: float) -> bool:
    return any(money >= item.price for item in get_available_upgrades(equipment))


def get_cheapest_upgrade(equipment: Equipment) -> Optional[EquipmentItem]:
    upgrades = get_available_upgrades(equipment)
    if not upgrades:
        return None
    return min(upgrades, key=lambda item: item.price)
