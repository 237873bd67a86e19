"""
Core package for CafeOps.

This package provides the stateful-looking but pure engines of the game:
the customer memory store, the equipment ledger and the service loop
that ties scoring, pricing and memory together.  It exposes only the
public API; every function returns a new state and never mutates the
one it receives.
"""

from .equipment import (
    calculate_equipment_bonus,
    can_afford_any_upgrade,
    create_default_equipment,
    find_equipment_item,
    get_available_upgrades,
    get_brewing_capacity,
    get_cheapest_upgrade,
    get_current_equipment,
    get_equipment_value,
    purchase_equipment,
)
from .game import (
    buy_equipment,
    dump_session,
    load_session,
    new_session,
    next_day,
    serve_customer,
)
from .memory import (
    add_note,
    calculate_relationship_level,
    calculate_returning_rate,
    create_memory_state,
    get_customer,
    get_customer_insights,
    get_favorite_drink,
    get_memory_stats,
    get_regular_customers,
    is_returning_customer,
    record_visit,
    reset_memory,
)
from .results import ServiceResult

__all__ = [
    "calculate_equipment_bonus",
    "can_afford_any_upgrade",
    "create_default_equipment",
    "find_equipment_item",
    "get_available_upgrades",
    "get_brewing_capacity",
    "get_cheapest_upgrade",
    "get_current_equipment",
    "get_equipment_value",
    "purchase_equipment",
    "buy_equipment",
    "dump_session",
    "load_session",
    "new_session",
    "next_day",
    "serve_customer",
    "add_note",
    "calculate_relationship_level",
    "calculate_returning_rate",
    "create_memory_state",
    "get_customer",
    "get_customer_insights",
    "get_favorite_drink",
    "get_memory_stats",
    "get_regular_customers",
    "is_returning_customer",
    "record_visit",
    "reset_memory",
    "ServiceResult",
]
