# smoke_test.py
"""
Smoke test minimal, sans boucle de jeu.
Valide :
- chargement des recettes et du catalogue d'équipement,
- score d'un espresso parfait (100),
- devis d'une commande simple (taxe 8%),
- mémorisation de deux visites d'un même client.
"""

from CafeOPS_V1.core.equipment import EQUIPMENT_CATALOG, get_available_upgrades
from CafeOPS_V1.core.memory import create_memory_state, get_customer_insights, record_visit
from CafeOPS_V1.domain.brew import BrewParameters
from CafeOPS_V1.domain.equipment import Equipment
from CafeOPS_V1.rules.pricing import calculate_price_quote, format_price_quote
from CafeOPS_V1.rules.scoring import DRINK_RECIPES, brew_drink


def main():
    # 1) Tables de données
    print(f"✔ Recettes chargées : {len(DRINK_RECIPES.root)}")
    print(f"✔ Équipements au catalogue : {len(list(EQUIPMENT_CATALOG))}")
    upgrades = get_available_upgrades(Equipment())
    print(f"✔ Améliorations disponibles au départ : {[u.id for u in upgrades]}")

    # 2) Espresso parfait
    params = BrewParameters(grind_size="fine", temperature=93, brew_time=25)
    result = brew_drink("espresso", params)
    print(f"✔ Espresso : {result.quality}/100 ({result.feedback})")

    # 3) Devis
    quote = calculate_price_quote(
        [
            {"type": "drink", "sku": "latte", "modifiers": {"size": "large", "milk": "oat"}},
            {"type": "food", "sku": "croissant", "warm": True},
        ]
    )
    print(format_price_quote(quote))

    # 4) Mémoire client
    memory = create_memory_state()
    for day in (1, 2):
        memory = record_visit(
            memory,
            "Maya",
            {
                "drink_ordered": "latte",
                "milk_type": "oat",
                "quality": 92,
                "satisfaction": 92,
                "payment": quote.total,
                "day": day,
            },
        )
    print(f"✔ Mémoire : {get_customer_insights(memory.customers['Maya'])}")


if __name__ == "__main__":
    main()
