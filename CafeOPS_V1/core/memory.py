"""
Mémoire client : registre des visites par client et relations.

Toutes les opérations sont des transitions pures : elles retournent un
nouvel état et ne modifient jamais celui reçu.
"""

import logging
from typing import Dict, List, Optional, Union

import numpy as np

from CafeOPS_V1.data.memory_params import (
    QUALITY_EXPECTATION_WINDOW,
    RELATIONSHIP_THRESHOLDS,
    SATISFIED_THRESHOLD,
    UNSATISFIED_THRESHOLD,
    VERY_SATISFIED_THRESHOLD,
)
from CafeOPS_V1.domain.customer import (
    CustomerPreferences,
    CustomerProfile,
    MemoryState,
    MemoryStats,
    Visit,
    VisitData,
)
from CafeOPS_V1.domain.types import DrinkType, MilkType, RelationshipLevel
from CafeOPS_V1.utils import round_half_up

logger = logging.getLogger(__name__)

_LOYAL_LEVELS = (RelationshipLevel.REGULAR, RelationshipLevel.FAVORITE)


def create_memory_state() -> MemoryState:
    return MemoryState()


def reset_memory(state: MemoryState) -> MemoryState:
    """Efface toute la mémoire (seul moyen de supprimer un client)."""
    logger.info("Customer memory reset (%d customers dropped)", len(state.customers))
    return create_memory_state()


def calculate_relationship_level(visit_count: int) -> RelationshipLevel:
    """
    Palier de relation à partir du nombre de visites.

    Exemple
    -------
    >>> [calculate_relationship_level(n).value for n in (1, 2, 4, 9, 16)]
    ['stranger', 'newcomer', 'familiar', 'regular', 'favorite']
    """
    for level, threshold in RELATIONSHIP_THRESHOLDS:
        if visit_count >= threshold:
            return level
    return RelationshipLevel.STRANGER


def get_customer(state: MemoryState, name: str) -> Optional[CustomerProfile]:
    return state.customers.get(name)


def is_returning_customer(state: MemoryState, name: str) -> bool:
    return name in state.customers


def _preferred_milk(visits: List[Visit]) -> Optional[MilkType]:
    # comptage dans l'ordre des visites : max() garde le premier vu en cas d'égalité
    counts: Dict[MilkType, int] = {}
    for visit in visits:
        if visit.milk_type is not None:
            counts[visit.milk_type] = counts.get(visit.milk_type, 0) + 1
    if not counts:
        return None
    return max(counts, key=counts.get)


def _merge_allergens(known: List[str], reported: List[str]) -> List[str]:
    merged = list(known)
    for allergen in reported:
        if allergen not in merged:
            merged.append(allergen)
    return merged


def record_visit(
    state: MemoryState, name: str, visit_data: Union[VisitData, dict]
) -> MemoryState:
    """Enregistre une visite et retourne le nouvel état de la mémoire.

    Le profil est créé à la première visite. Ensuite :
    - visit_count et total_customers_served +1, palier recalculé
    - favorite_drinks[boisson] +1
    - preferred_milk = lait le plus fréquent (premier vu si égalité)
    - average_satisfaction = moyenne de toutes les visites
    - total_spent += payment + tip
    - allergies : union, jamais oubliées
    """
    data = VisitData.model_validate(visit_data)
    visit = Visit(
        day=data.day,
        drink_ordered=data.drink_ordered,
        milk_type=data.milk_type,
        quality=data.quality,
        satisfaction=data.satisfaction,
        payment=data.payment,
        tip=data.tip,
    )

    existing = state.customers.get(name)
    if existing is None:
        existing = CustomerProfile(
            name=name, first_visit_day=data.day, last_visit_day=data.day
        )

    visits = [*existing.visits, visit]
    visit_count = len(visits)

    favorite_drinks = dict(existing.preferences.favorite_drinks)
    favorite_drinks[data.drink_ordered] = favorite_drinks.get(data.drink_ordered, 0) + 1

    recent = visits[-QUALITY_EXPECTATION_WINDOW:]
    preferences = CustomerPreferences(
        favorite_drinks=favorite_drinks,
        preferred_milk=_preferred_milk(visits),
        average_quality_expectation=float(np.mean([v.quality for v in recent])),
        allergens=_merge_allergens(existing.preferences.allergens, data.allergens),
    )

    level = calculate_relationship_level(visit_count)
    if existing.visits and level != existing.relationship_level:
        logger.info("%s is now a %s customer", name, level.value)

    profile = existing.model_copy(
        update={
            "last_visit_day": data.day,
            "visit_count": visit_count,
            "relationship_level": level,
            "visits": visits,
            "preferences": preferences,
            "total_spent": existing.total_spent + data.payment + (data.tip or 0.0),
            "average_satisfaction": float(np.mean([v.satisfaction for v in visits])),
            "notes": list(existing.notes),
        }
    )

    customers = dict(state.customers)
    customers[name] = profile
    returning = sum(1 for c in customers.values() if c.visit_count > 1)
    new_state = MemoryState(
        customers=customers,
        total_customers_served=state.total_customers_served + 1,
        returning_customer_rate=returning / len(customers) * 100,
    )

    logger.debug("Visit #%d recorded for %s (%s)", visit_count, name, level.value)
    return new_state


def add_note(state: MemoryState, name: str, note: str) -> MemoryState:
    """Ajoute une note au profil ; client inconnu -> le même état est retourné."""
    customer = state.customers.get(name)
    if customer is None:
        return state

    customers = dict(state.customers)
    customers[name] = customer.model_copy(update={"notes": [*customer.notes, note]})
    return state.model_copy(update={"customers": customers})


def get_favorite_drink(profile: CustomerProfile) -> Optional[DrinkType]:
    drinks = profile.preferences.favorite_drinks
    if not drinks:
        return None
    return max(drinks, key=drinks.get)


def get_regular_customers(state: MemoryState) -> List[CustomerProfile]:
    """Clients regular ou favorite, du plus assidu au moins assidu."""
    loyal = [c for c in state.customers.values() if c.relationship_level in _LOYAL_LEVELS]
    return sorted(loyal, key=lambda c: c.visit_count, reverse=True)


def get_customer_insights(profile: CustomerProfile) -> str:
    """Résumé en langage naturel, destiné au contexte du générateur de dialogues.

    Exemple
    -------
    'regular (9 visits) • usually orders latte • prefers oat milk • very satisfied customer'
    """
    visit_text = (
        "first visit" if profile.visit_count == 1 else f"{profile.visit_count} visits"
    )
    parts = [f"{profile.relationship_level.value} ({visit_text})"]

    favorite = get_favorite_drink(profile)
    if favorite is not None and profile.preferences.favorite_drinks[favorite] > 1:
        parts.append(f"usually orders {favorite.value}")

    if profile.preferences.preferred_milk is not None:
        parts.append(f"prefers {profile.preferences.preferred_milk.value} milk")

    if profile.average_satisfaction >= VERY_SATISFIED_THRESHOLD:
        parts.append("very satisfied customer")
    elif profile.average_satisfaction >= SATISFIED_THRESHOLD:
        parts.append("satisfied customer")
    elif profile.average_satisfaction < UNSATISFIED_THRESHOLD:
        parts.append("needs better service")

    if profile.preferences.allergens:
        parts.append(f"allergic to: {', '.join(profile.preferences.allergens)}")

    return " • ".join(parts)


def calculate_returning_rate(state: MemoryState) -> float:
    """Pourcentage (0..100) de clients distincts venus plus d'une fois."""
    if not state.customers:
        return 0.0
    returning = sum(1 for c in state.customers.values() if c.visit_count > 1)
    return returning / len(state.customers) * 100


def get_memory_stats(state: MemoryState) -> MemoryStats:
    customers = list(state.customers.values())
    satisfaction = (
        float(np.mean([c.average_satisfaction for c in customers])) if customers else 0.0
    )
    return MemoryStats(
        total_customers=len(customers),
        returning_customers=sum(1 for c in customers if c.visit_count > 1),
        regular_customers=sum(
            1 for c in customers if c.relationship_level == RelationshipLevel.REGULAR
        ),
        favorite_customers=sum(
            1 for c in customers if c.relationship_level == RelationshipLevel.FAVORITE
        ),
        average_satisfaction=round_half_up(satisfaction),
        total_revenue=sum(c.total_spent for c in customers),
        returning_rate=calculate_returning_rate(state),
    )
