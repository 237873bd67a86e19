import pytest
from pydantic import ValidationError

from CafeOPS_V1.domain.order import DrinkOrderItem, FoodOrderItem, OrderModifiers
from CafeOPS_V1.rules.pricing import (
    calculate_drink_price,
    calculate_food_price,
    calculate_price_quote,
    describe_order_item,
    format_price_quote,
)


# --- Prix unitaires ---


def test_plain_drink_costs_base_price():
    price = calculate_drink_price("espresso")
    assert price.base_price == 3.0
    assert price.modifier_price == 0.0
    assert price.total_price == 3.0


def test_size_multiplies_the_base_price():
    large = calculate_drink_price("latte", OrderModifiers(size="large"))
    small = calculate_drink_price("espresso", OrderModifiers(size="small"))

    assert large.total_price == pytest.approx(5.85)
    assert large.modifier_price == pytest.approx(1.35)
    assert small.total_price == pytest.approx(2.4)


def test_all_modifiers_stack():
    mods = OrderModifiers(
        size="large", extra_shot=True, whipped_cream=True, syrup="vanilla", milk="oat"
    )
    # 5.00 x 1.3 + 1.00 + 0.50 + 0.75 + 0.75
    assert calculate_drink_price("mocha", mods).total_price == pytest.approx(9.5)


@pytest.mark.parametrize("milk", ["none", "whole", "skim"])
def test_dairy_milk_is_free(milk):
    assert calculate_drink_price("latte", OrderModifiers(milk=milk)).total_price == 4.5


@pytest.mark.parametrize("milk", ["oat", "almond"])
def test_plant_milk_is_charged(milk):
    assert calculate_drink_price("latte", OrderModifiers(milk=milk)).total_price == 5.25


def test_decaf_and_iced_are_free():
    mods = OrderModifiers(decaf=True, temp="iced")
    assert calculate_drink_price("americano", mods).total_price == 3.5


def test_food_price_and_free_warming():
    assert calculate_food_price("croissant").total_price == 3.5
    assert calculate_food_price("croissant", warm=True).total_price == 3.5


def test_unknown_sku_raises():
    with pytest.raises(ValueError):
        calculate_drink_price("frappe")
    with pytest.raises(ValueError):
        calculate_food_price("donut")


# --- Libellés ---


@pytest.mark.parametrize(
    "item, expected",
    [
        (DrinkOrderItem(sku="latte"), "Latte"),
        (DrinkOrderItem(sku="latte", modifiers=OrderModifiers(milk="whole")), "Latte"),
        (
            DrinkOrderItem(sku="americano", modifiers=OrderModifiers(temp="iced", decaf=True)),
            "iced decaf Americano",
        ),
        (
            DrinkOrderItem(sku="espresso", modifiers=OrderModifiers(size="small", extra_shot=True)),
            "small Espresso + extra shot",
        ),
        (
            DrinkOrderItem(
                sku="mocha",
                modifiers=OrderModifiers(syrup="vanilla", whipped_cream=True),
            ),
            "Mocha w/ vanilla syrup + whipped cream",
        ),
        (FoodOrderItem(sku="bagel"), "Bagel"),
        (FoodOrderItem(sku="banana_bread", warm=True), "Banana bread (warmed)"),
    ],
)
def test_describe_order_item(item, expected):
    assert describe_order_item(item) == expected


# --- Devis ---


def test_quote_for_mixed_order():
    quote = calculate_price_quote(
        [DrinkOrderItem(sku="latte"), FoodOrderItem(sku="croissant")]
    )

    assert quote.subtotal == 8.0
    assert quote.tax == 0.64
    assert quote.total == 8.64
    assert [line.sku for line in quote.breakdown] == ["latte", "croissant"]


def test_quote_accepts_plain_dicts():
    quote = calculate_price_quote(
        [
            {"type": "drink", "sku": "latte", "quantity": 2},
            {"type": "food", "sku": "muffin", "warm": True},
        ]
    )
    assert quote.subtotal == 12.0
    assert quote.breakdown[1].description == "Muffin (warmed)"


def test_breakdown_line_total_includes_quantity():
    quote = calculate_price_quote([{"type": "drink", "sku": "latte", "quantity": 2}])
    line = quote.breakdown[0]

    assert line.quantity == 2
    assert line.unit_price == 4.5
    assert line.total_price == 9.0
    assert quote.total == 9.72


def test_quote_amounts_have_two_decimals():
    quote = calculate_price_quote(
        [DrinkOrderItem(sku="latte", modifiers=OrderModifiers(size="large"))]
    )

    assert quote.subtotal == 5.85
    assert quote.tax == 0.47
    assert quote.total == 6.32
    assert quote.breakdown[0].modifier_price == 1.35


def test_quote_total_is_subtotal_plus_tax():
    quote = calculate_price_quote(
        [
            DrinkOrderItem(sku="cappuccino", quantity=3),
            DrinkOrderItem(sku="matcha", modifiers=OrderModifiers(size="small")),
            FoodOrderItem(sku="banana_bread", quantity=2),
        ]
    )
    assert quote.total == pytest.approx(quote.subtotal + quote.tax, abs=0.01)


def test_empty_order_costs_nothing():
    quote = calculate_price_quote([])
    assert (quote.subtotal, quote.tax, quote.total) == (0.0, 0.0, 0.0)
    assert quote.breakdown == []


def test_invalid_items_are_rejected():
    with pytest.raises(ValidationError):
        calculate_price_quote([{"type": "drink", "sku": "latte", "quantity": 0}])
    with pytest.raises(ValidationError):
        calculate_price_quote([{"type": "souvenir", "sku": "mug"}])


def test_format_price_quote():
    quote = calculate_price_quote([{"type": "drink", "sku": "latte", "quantity": 2}])
    text = format_price_quote(quote)

    assert text.startswith("=== PRICE QUOTE ===")
    assert "$9.00" in text
    assert "Tax (8%):" in text
    assert text.splitlines()[-1].endswith("$9.72")


def test_drink_price_accepts_plain_modifiers():
    assert calculate_drink_price("latte", {}).total_price == 4.5
    assert calculate_drink_price("latte", {"size": "large"}).total_price == pytest.approx(5.85)
    combined = {"size": "large", "extra_shot": True, "milk": "oat", "whipped_cream": True}
    assert calculate_drink_price("latte", combined).total_price == pytest.approx(
        4.5 * 1.3 + 1.0 + 0.75 + 0.5
    )


def test_drink_price_rejects_invalid_modifiers():
    with pytest.raises(ValidationError):
        calculate_drink_price("latte", {"size": "huge"})
