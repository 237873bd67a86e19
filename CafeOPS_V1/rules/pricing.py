"""
Prix de la carte, suppléments et devis (taxe 8%).
"""

import logging
from typing import Iterable, List, Optional, Union

from pydantic import TypeAdapter

from CafeOPS_V1.data.pricing_params import (
    DECAF_PRICE,
    DRINK_BASE_PRICES,
    EXTRA_SHOT_PRICE,
    FOOD_BASE_PRICES,
    ICED_PRICE,
    MILK_UPGRADE_PRICES,
    SIZE_MULTIPLIERS,
    SYRUP_PRICE,
    TAX_RATE,
    WARMING_PRICE,
    WHIPPED_CREAM_PRICE,
)
from CafeOPS_V1.domain.order import (
    DrinkOrderItem,
    FoodOrderItem,
    ItemPrice,
    OrderItem,
    OrderModifiers,
    PriceBreakdown,
    PriceQuote,
)
from CafeOPS_V1.domain.types import DrinkType, FoodType, MilkType, OrderSize, OrderTemp
from CafeOPS_V1.utils import round2

logger = logging.getLogger(__name__)

_ORDER_ITEM = TypeAdapter(OrderItem)


def calculate_drink_price(
    sku: Union[DrinkType, str], modifiers: Optional[Union[OrderModifiers, dict]] = None
) -> ItemPrice:
    """Calcule le prix unitaire d'une boisson avec ses personnalisations.

    Formule
    -------
    sized = base x SIZE_MULTIPLIERS[size]           (multiplicatif, d'abord)
    modifier = (sized - base) + extra_shot + whipped_cream + syrup + lait végétal
    total = base + modifier

    Décaféiné et glacé ne coûtent rien ; lait entier / écrémé offerts.

    Exemple
    -------
    >>> calculate_drink_price("latte").total_price
    4.5
    >>> calculate_drink_price("latte", OrderModifiers(extra_shot=True)).total_price
    5.5
    """
    if modifiers is not None:
        modifiers = OrderModifiers.model_validate(modifiers)

    base_price = DRINK_BASE_PRICES[DrinkType(sku)]
    modifier_price = 0.0

    if modifiers is not None:
        sized_price = base_price * SIZE_MULTIPLIERS[modifiers.size]
        modifier_price = sized_price - base_price

        if modifiers.temp == OrderTemp.ICED:
            modifier_price += ICED_PRICE
        if modifiers.decaf:
            modifier_price += DECAF_PRICE
        if modifiers.extra_shot:
            modifier_price += EXTRA_SHOT_PRICE
        if modifiers.whipped_cream:
            modifier_price += WHIPPED_CREAM_PRICE
        if modifiers.syrup:
            modifier_price += SYRUP_PRICE
        if modifiers.milk is not None:
            modifier_price += MILK_UPGRADE_PRICES[modifiers.milk]

    return ItemPrice(
        base_price=base_price,
        modifier_price=modifier_price,
        total_price=base_price + modifier_price,
    )


def calculate_food_price(sku: Union[FoodType, str], warm: bool = False) -> ItemPrice:
    """Prix d'une viennoiserie ; la réchauffer est gratuit."""
    base_price = FOOD_BASE_PRICES[FoodType(sku)]
    modifier_price = WARMING_PRICE if warm else 0.0
    return ItemPrice(
        base_price=base_price,
        modifier_price=modifier_price,
        total_price=base_price + modifier_price,
    )


def describe_order_item(item: OrderItem) -> str:
    """Libellé lisible d'un article de commande.

    Ordre stable : taille, glacé, déca, nom, lait, sirop, extra shot, chantilly.

    Exemple
    -------
    >>> describe_order_item(DrinkOrderItem(sku="latte",
    ...     modifiers=OrderModifiers(size="large", milk="oat")))
    'large Latte w/ oat milk'
    >>> describe_order_item(FoodOrderItem(sku="banana_bread", warm=True))
    'Banana bread (warmed)'
    """
    if isinstance(item, FoodOrderItem):
        name = item.sku.value.replace("_", " ").capitalize()
        return f"{name} (warmed)" if item.warm else name

    mods = item.modifiers
    parts: List[str] = []
    if mods.size != OrderSize.MEDIUM:
        parts.append(mods.size.value)
    if mods.temp == OrderTemp.ICED:
        parts.append("iced")
    if mods.decaf:
        parts.append("decaf")

    parts.append(item.sku.value.capitalize())

    if mods.milk is not None and mods.milk not in (MilkType.NONE, MilkType.WHOLE):
        parts.append(f"w/ {mods.milk.value} milk")
    if mods.syrup:
        parts.append(f"w/ {mods.syrup} syrup")
    if mods.extra_shot:
        parts.append("+ extra shot")
    if mods.whipped_cream:
        parts.append("+ whipped cream")

    return " ".join(parts)


def _item_price(item: OrderItem) -> ItemPrice:
    if isinstance(item, DrinkOrderItem):
        return calculate_drink_price(item.sku, item.modifiers)
    return calculate_food_price(item.sku, item.warm)


def calculate_price_quote(items: Iterable[Union[OrderItem, dict]]) -> PriceQuote:
    """Devis d'une commande : sous-total, taxe et total.

    Les montants sont cumulés bruts puis arrondis (half up) une seule fois
    en sortie, pour ne pas cumuler d'erreurs d'arrondi entre articles.

    Formule
    -------
    subtotal = Σ unit_price x quantity
    tax = subtotal x TAX_RATE
    total = subtotal x (1 + TAX_RATE)

    Exemple
    -------
    >>> quote = calculate_price_quote([{"type": "drink", "sku": "latte", "quantity": 2}])
    >>> (quote.subtotal, quote.tax, quote.total)
    (9.0, 0.72, 9.72)
    """
    breakdown: List[PriceBreakdown] = []
    subtotal = 0.0

    for raw in items:
        item = _ORDER_ITEM.validate_python(raw)
        price = _item_price(item)
        line_total = price.total_price * item.quantity
        subtotal += line_total

        breakdown.append(
            PriceBreakdown(
                sku=item.sku.value,
                description=describe_order_item(item),
                quantity=item.quantity,
                base_price=round2(price.base_price),
                modifier_price=round2(price.modifier_price),
                unit_price=round2(price.total_price),
                total_price=round2(line_total),
            )
        )

    quote = PriceQuote(
        subtotal=round2(subtotal),
        tax=round2(subtotal * TAX_RATE),
        total=round2(subtotal * (1 + TAX_RATE)),
        breakdown=breakdown,
    )
    logger.debug("Quote for %d item(s): total %.2f", len(breakdown), quote.total)
    return quote


def format_price_quote(quote: PriceQuote) -> str:
    """Devis mis en forme pour l'affichage (montants à 2 décimales)."""
    lines = ["=== PRICE QUOTE ===", ""]
    for line in quote.breakdown:
        lines.append(f"{line.description:<40} ${line.total_price:.2f}")
    lines.append("")
    lines.append(f"{'Subtotal:':<40} ${quote.subtotal:.2f}")
    lines.append(f"{f'Tax ({TAX_RATE:.0%}):':<40} ${quote.tax:.2f}")
    lines.append(f"{'Total:':<40} ${quote.total:.2f}")
    return "\n".join(lines)
