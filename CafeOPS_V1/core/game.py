"""
Session de jeu : état explicite (argent, parc, mémoire client) transmis
d'un appel à l'autre, et transitions de la boucle de service.
"""

import logging
from typing import Tuple, Union

from CafeOPS_V1.core.equipment import calculate_equipment_bonus, purchase_equipment
from CafeOPS_V1.core.memory import record_visit
from CafeOPS_V1.core.results import ServiceResult
from CafeOPS_V1.domain.brew import BrewParameters
from CafeOPS_V1.domain.customer import VisitData
from CafeOPS_V1.domain.equipment import PurchaseResult
from CafeOPS_V1.domain.session import Customer, GameSession
from CafeOPS_V1.domain.types import MilkType
from CafeOPS_V1.rules.pricing import calculate_price_quote
from CafeOPS_V1.rules.scoring import brew_drink, get_recipe
from CafeOPS_V1.utils import dump_model, load_model, round2

logger = logging.getLogger(__name__)


def new_session(money: float = 0.0) -> GameSession:
    return GameSession(money=money)


def serve_customer(
    session: GameSession, customer: Customer, params: BrewParameters
) -> ServiceResult:
    """Sert un client : score la boisson, établit le devis, mémorise la visite.

    Étapes:
    1. Bonus d'équipement pour la famille de la boisson
    2. Score qualité (brew_drink)
    3. Devis de la commande (par défaut la boisson préparée, avec son lait)
    4. Visite enregistrée (satisfaction = qualité, paiement = total du devis)
    5. Nouvelle session : argent + total + pourboire, boissons servies + 1

    Retourne un ServiceResult ; la session reçue n'est pas modifiée.
    """
    recipe = get_recipe(customer.drink_type)
    bonuses = calculate_equipment_bonus(session.equipment, recipe.category)
    quality = brew_drink(customer.drink_type, params, bonuses)
    quote = calculate_price_quote(customer.order_items(params.milk_type))

    memory = record_visit(
        session.memory,
        customer.name,
        VisitData(
            drink_ordered=customer.drink_type,
            milk_type=params.milk_type if params.milk_type != MilkType.NONE else None,
            quality=quality.quality,
            satisfaction=quality.quality,
            payment=quote.total,
            tip=customer.tip,
            allergens=customer.allergens,
            day=session.day,
        ),
    )

    earned = round2(quote.total + (customer.tip or 0.0))
    new_session = session.model_copy(
        update={
            "money": round2(session.money + earned),
            "drinks_served": session.drinks_served + 1,
            "memory": memory,
        }
    )
    logger.debug("Served %s: quality %d, earned %.2f", customer.name, quality.quality, earned)
    return ServiceResult(
        session=new_session,
        drink_type=customer.drink_type,
        quality=quality,
        quote=quote,
        profile=memory.customers[customer.name],
        earned=earned,
    )


def buy_equipment(
    session: GameSession, item_id: str
) -> Tuple[GameSession, PurchaseResult]:
    """Achat d'équipement sur la session ; inchangée si l'achat est refusé."""
    result = purchase_equipment(session.equipment, session.money, item_id)
    if not result.success:
        return session, result
    new_session = session.model_copy(
        update={"equipment": result.new_equipment, "money": result.new_money}
    )
    return new_session, result


def next_day(session: GameSession) -> GameSession:
    return session.model_copy(update={"day": session.day + 1})


def dump_session(session: GameSession) -> str:
    return dump_model(session)


def load_session(text: Union[str, bytes]) -> GameSession:
    return load_model(text, GameSession)
