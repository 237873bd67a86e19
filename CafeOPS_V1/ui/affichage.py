from CafeOPS_V1.console_style import bold, green, quality_color, red
from CafeOPS_V1.core.equipment import (
    get_available_upgrades,
    get_brewing_capacity,
    get_current_equipment,
    get_equipment_value,
)
from CafeOPS_V1.core.memory import get_customer_insights
from CafeOPS_V1.core.results import ServiceResult
from CafeOPS_V1.domain.brew import QualityResult
from CafeOPS_V1.domain.customer import MemoryStats
from CafeOPS_V1.domain.equipment import Equipment, PurchaseResult
from CafeOPS_V1.rules.pricing import format_price_quote
from CafeOPS_V1.rules.scoring import get_recipe


def format_to_dollar(x: float) -> str:
    """Format a float as a dollar string (two decimals, thin spaces)."""
    return f"${x:,.2f}".replace(",", " ")


def _bar(current: float, maxv: float, width: int = 24, fill_char: str = "█") -> str:
    """Barre de progression texte ; vide si maxv <= 0."""
    if maxv <= 0:
        return " " * width
    ratio = max(0.0, min(1.0, float(current) / float(maxv)))
    n = int(round(ratio * width))
    return fill_char * n + " " * (width - n)


def print_quality_result(drink_name: str, result: QualityResult) -> None:
    print(f"\n☕ {bold(drink_name)} : qualité {quality_color(str(result.quality), result.quality)}/100")
    print(f"[{_bar(result.quality, 100)}]")
    for rule_name, score in result.breakdown.items():
        print(f"  {rule_name:<28} {score:>3d}")
    print(f"  {result.feedback}")


def print_price_quote(quote) -> None:
    print()
    print(format_price_quote(quote))


def print_service_result(result: ServiceResult) -> None:
    """Impression d'un service : qualité, devis, gain et fiche client."""
    print(f"\n👤 {bold(result.profile.name)}")
    print_quality_result(get_recipe(result.drink_type).name, result.quality)
    print_price_quote(result.quote)
    print(f"\n💵 Encaissé : {green(format_to_dollar(result.earned))}")
    print(f"🧠 {get_customer_insights(result.profile)}")


def print_memory_stats(stats: MemoryStats) -> None:
    print("\n📇 Mémoire clients")
    print("=" * 40)
    print(f"Clients distincts   : {stats.total_customers:>6d}")
    print(f"Clients revenus     : {stats.returning_customers:>6d}")
    print(f"Habitués            : {stats.regular_customers:>6d}")
    print(f"Favoris             : {stats.favorite_customers:>6d}")
    print(f"Satisfaction moy.   : {stats.average_satisfaction:>6.0f}")
    print(f"Taux de retour      : {stats.returning_rate:>5.1f}%")
    print(f"Chiffre d'affaires  : {format_to_dollar(stats.total_revenue):>10}")
    print("=" * 40)


def print_shop(equipment: Equipment, money: float) -> None:
    """Parc possédé puis améliorations disponibles (rouge si hors budget)."""
    print("\n🛠  Équipement")
    print("═" * 52)
    for item in get_current_equipment(equipment):
        print(f"  {item.category.value:<18} T{item.tier}  {item.name}")
    print(f"  Valeur du parc : {format_to_dollar(get_equipment_value(equipment))}")
    print(f"  Capacité       : {get_brewing_capacity(equipment)} boisson(s) à la fois")

    upgrades = get_available_upgrades(equipment)
    if not upgrades:
        print("\n  Parc au maximum.")
        print("═" * 52)
        return
    print(f"\n  Améliorations (trésorerie {format_to_dollar(money)}) :")
    for item in upgrades:
        price = format_to_dollar(item.price)
        price = green(price) if money >= item.price else red(price)
        print(f"  - {item.id:<22} {item.name:<26} {price}")
    print("═" * 52)


def print_purchase_result(result: PurchaseResult) -> None:
    print(green(result.message) if result.success else red(result.message))
