import pytest

from CafeOPS_V1.core.game import (
    buy_equipment,
    dump_session,
    load_session,
    new_session,
    next_day,
    serve_customer,
)
from CafeOPS_V1.domain.brew import BrewParameters
from CafeOPS_V1.domain.equipment import Equipment, PurchaseFailure
from CafeOPS_V1.domain.order import FoodOrderItem
from CafeOPS_V1.domain.session import Customer
from CafeOPS_V1.domain.types import MilkType, RelationshipLevel


def test_serve_customer_updates_session(ideal_espresso):
    session = new_session()
    customer = Customer(name="Sam", drink_type="espresso", tip=1.0)

    result = serve_customer(session, customer, ideal_espresso)

    assert result.quality.quality == 100
    assert result.quote.total == 3.24
    assert result.earned == 4.24
    assert result.session.money == 4.24
    assert result.session.drinks_served == 1
    assert session.money == 0.0
    assert session.memory.customers == {}


def test_serve_customer_records_visit(ideal_espresso):
    session = new_session()
    customer = Customer(name="Sam", drink_type="espresso", allergens=["nuts"])

    result = serve_customer(session, customer, ideal_espresso)
    visit = result.profile.visits[0]

    assert result.profile.visit_count == 1
    assert visit.satisfaction == 100
    assert visit.payment == 3.24
    assert visit.day == 1
    assert result.profile.preferences.allergens == ["nuts"]


def test_serve_customer_with_full_order(ideal_espresso):
    customer = Customer(
        name="Theo",
        drink_type="espresso",
        items=[
            {"type": "drink", "sku": "espresso", "quantity": 2},
            FoodOrderItem(sku="croissant"),
        ],
    )
    result = serve_customer(new_session(), customer, ideal_espresso)

    assert result.quote.subtotal == 9.5
    assert len(result.quote.breakdown) == 2


def test_no_milk_is_not_a_milk_preference():
    params = BrewParameters(
        grind_size="fine", temperature=93, brew_time=25, milk_type=MilkType.NONE
    )
    customer = Customer(name="Maya", drink_type="latte")

    result = serve_customer(new_session(), customer, params)
    assert result.profile.preferences.preferred_milk is None


def test_equipment_improves_served_quality():
    params = BrewParameters(grind_size="medium-fine", temperature=95, brew_time=27)
    customer = Customer(name="Sam", drink_type="espresso")
    equipped = new_session().model_copy(
        update={"equipment": Equipment(espresso_machine=3, grinder=3)}
    )

    plain = serve_customer(new_session(), customer, params).quality.quality
    boosted = serve_customer(equipped, customer, params).quality.quality

    assert plain == 78
    assert boosted > plain


def test_repeat_customer_relationship_grows(ideal_espresso):
    session = new_session()
    customer = Customer(name="Sam", drink_type="espresso")
    for _ in range(4):
        session = serve_customer(session, customer, ideal_espresso).session

    profile = session.memory.customers["Sam"]
    assert profile.relationship_level == RelationshipLevel.FAMILIAR
    assert session.drinks_served == 4


def test_serve_customer_propagates_invalid_brew():
    params = BrewParameters(grind_size="fine", temperature=120, brew_time=25)
    with pytest.raises(ValueError):
        serve_customer(new_session(), Customer(name="Sam", drink_type="espresso"), params)


# --- Achats ---


def test_buy_equipment_deducts_money():
    session, result = buy_equipment(new_session(money=500.0), "grinder_burr")

    assert result.success
    assert session.money == 350.0
    assert session.equipment.grinder == 2


def test_refused_purchase_keeps_session():
    session = new_session(money=10.0)
    after, result = buy_equipment(session, "grinder_burr")

    assert result.reason == PurchaseFailure.INSUFFICIENT_FUNDS
    assert after is session


def test_next_day():
    assert next_day(new_session()).day == 2


# --- Sauvegarde ---


def test_session_round_trip_preserves_order(ideal_espresso):
    session = new_session(money=200.0)
    for name in ("Zoe", "Adam", "Maya"):
        session = serve_customer(
            session, Customer(name=name, drink_type="espresso", tip=0.5), ideal_espresso
        ).session
    session, _ = buy_equipment(session, "grinder_burr")
    session = next_day(session)

    restored = load_session(dump_session(session))

    assert restored == session
    assert list(restored.memory.customers) == ["Zoe", "Adam", "Maya"]
    assert restored.equipment.grinder == 2
    assert restored.day == 2


def test_default_order_charges_the_milk_served():
    params = BrewParameters(
        grind_size="fine",
        temperature=93,
        brew_time=25,
        milk_type=MilkType.OAT,
        milk_temp=66,
        foam_amount=20,
    )
    result = serve_customer(new_session(), Customer(name="Maya", drink_type="latte"), params)
    line = result.quote.breakdown[0]

    assert line.description == "Latte w/ oat milk"
    assert line.modifier_price == 0.75
    assert result.quote.subtotal == 5.25
    assert result.drink_type == "latte"


def test_explicit_items_are_not_changed_by_the_brew(ideal_espresso):
    customer = Customer(name="Theo", drink_type="espresso", items=[{"type": "food", "sku": "bagel"}])
    result = serve_customer(new_session(), customer, ideal_espresso)

    assert [line.sku for line in result.quote.breakdown] == ["bagel"]
