import logging

import numpy as np

from CafeOPS_V1.core.game import buy_equipment, new_session, next_day, serve_customer
from CafeOPS_V1.core.memory import get_memory_stats
from CafeOPS_V1.domain.brew import BrewParameters
from CafeOPS_V1.domain.order import DrinkOrderItem, FoodOrderItem, OrderModifiers
from CafeOPS_V1.domain.session import Customer
from CafeOPS_V1.domain.types import (
    DrinkType,
    FoodType,
    GrindSize,
    MilkType,
    OrderSize,
)
from CafeOPS_V1.rules.scoring import get_default_parameters
from CafeOPS_V1.ui.affichage import (
    print_memory_stats,
    print_purchase_result,
    print_service_result,
    print_shop,
)


def run():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    session = new_session(money=100.0)

    # Journée type : deux habitués et un nouveau client
    day_plan = [
        (
            Customer(name="Maya", drink_type=DrinkType.LATTE, tip=1.5),
            BrewParameters(
                grind_size=GrindSize.FINE,
                temperature=93,
                brew_time=27,
                milk_type=MilkType.OAT,
                milk_temp=65,
                foam_amount=20,
            ),
        ),
        (
            Customer(
                name="Theo",
                drink_type=DrinkType.POUROVER,
                items=[
                    DrinkOrderItem(
                        sku=DrinkType.POUROVER,
                        modifiers=OrderModifiers(size=OrderSize.LARGE),
                    ),
                    FoodOrderItem(sku=FoodType.CROISSANT, warm=True),
                ],
            ),
            BrewParameters(
                grind_size=GrindSize.MEDIUM_COARSE,
                temperature=94,
                brew_time=200,
                bloom_time=35,
            ),
        ),
        (
            Customer(name="Sam", drink_type=DrinkType.ESPRESSO, allergens=["nuts"]),
            get_default_parameters(DrinkType.ESPRESSO),
        ),
    ]

    for day in range(3):
        print(f"\n{'─' * 76}\n📅 Jour {session.day}\n{'─' * 76}")
        for customer, params in day_plan[: day + 2]:
            result = serve_customer(session, customer, params)
            print_service_result(result)
            session = result.session

        tickets = [
            visit.payment
            for profile in session.memory.customers.values()
            for visit in profile.visits
            if visit.day == session.day
        ]
        print(f"\nTicket médian du jour : ${np.median(tickets):.2f}")

        print_shop(session.equipment, session.money)
        session, purchase = buy_equipment(session, "grinder_burr")
        print_purchase_result(purchase)
        session = next_day(session)

    print_memory_stats(get_memory_stats(session.memory))


if __name__ == "__main__":
    run()
