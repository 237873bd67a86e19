"""
Qualité d'une boisson (score 0..100) à partir des paramètres de préparation.

Primitives pures (score à tolérance, mouture catégorielle) composées par
règles pondérées, définies par recette dans data/recipes.json.
"""

import logging
from typing import Dict, List, Optional, Union

from CafeOPS_V1.data import get_RECIPES
from CafeOPS_V1.data.scoring_params import (
    DEFAULT_BLOOM_TIME,
    DEFAULT_BREW_TIME,
    DEFAULT_ESPRESSO_TIME,
    DEFAULT_FOAM_AMOUNT,
    DEFAULT_MILK_TEMP,
    DEFAULT_TEMPERATURE,
    FOAM_RANGE,
    GRIND_VALUES,
    MILK_TEMP_RANGE,
    SCORING,
    TEMP_RANGE,
)
from CafeOPS_V1.domain.brew import BrewParameters, QualityResult
from CafeOPS_V1.domain.equipment import EquipmentEffects
from CafeOPS_V1.domain.recipe import DrinkRecipe, ScoringRule
from CafeOPS_V1.domain.types import DrinkCategory, DrinkType, GrindSize, MilkType
from CafeOPS_V1.utils import round_half_up

logger = logging.getLogger(__name__)

DRINK_RECIPES = get_RECIPES()


# =====================================================
# Primitives de notation
# =====================================================


def calculate_tolerance_score(actual: float, ideal: float, tolerance: float) -> float:
    """Note un paramètre continu (température, temps, ratio) autour de sa valeur idéale.

    Formule
    -------
    diff = |actual - ideal|
    - diff <= tolerance : 75 + 25 x (tolerance - diff) / tolerance   (75..100)
    - diff >  tolerance : 75 - min(75, 15 x (diff - tolerance))       (0..75)

    L'écart est symétrique : dépasser ou manquer la cible coûte autant.

    Exemple
    -------
    >>> calculate_tolerance_score(93, 93, 3)
    100.0
    >>> calculate_tolerance_score(96, 93, 3)
    75.0
    >>> calculate_tolerance_score(97, 93, 3)
    60.0
    """
    if tolerance < 0:
        raise ValueError(f"Tolerance must be non-negative, got {tolerance}")

    diff = abs(actual - ideal)
    if diff == 0:
        return float(SCORING["PERFECT"])

    if diff <= tolerance:
        ratio = (tolerance - diff) / tolerance
        return SCORING["MIN_TOLERANCE_SCORE"] + SCORING["MAX_TOLERANCE_BONUS"] * ratio

    excess = diff - tolerance
    penalty = min(SCORING["MAX_PENALTY"], excess * SCORING["PENALTY_MULTIPLIER"])
    return float(max(0, SCORING["MIN_TOLERANCE_SCORE"] - penalty))


def score_grind_size(
    actual: Union[GrindSize, str], ideal: Union[GrindSize, str]
) -> float:
    """Note la mouture selon la distance ordinale (coarse=1 ... fine=5).

    Exemple
    -------
    >>> score_grind_size("medium", "medium-fine")
    70.0
    >>> score_grind_size("fine", "coarse")
    10.0
    """
    steps = abs(GRIND_VALUES[GrindSize(actual)] - GRIND_VALUES[GrindSize(ideal)])
    if steps == 0:
        return float(SCORING["GRIND_PERFECT"])
    if steps == 1:
        return float(SCORING["GRIND_ONE_OFF"])
    if steps == 2:
        return float(SCORING["GRIND_TWO_OFF"])
    return float(SCORING["GRIND_WAY_OFF"])


# =====================================================
# Validation des mesures
# =====================================================


def _check_range(label: str, value: float, bounds, unit: str) -> None:
    low, high = bounds
    if value < low or value > high:
        raise ValueError(f"{label} {value}{unit} out of range [{low:g}-{high:g}]")


def validate_brew_parameters(params: BrewParameters) -> None:
    """Lève ValueError si une mesure sort de sa plage physique."""
    _check_range("Temperature", params.temperature, TEMP_RANGE, "°C")
    if params.brew_time < 0:
        raise ValueError(f"Brew time cannot be negative: {params.brew_time}s")
    if params.bloom_time is not None and params.bloom_time < 0:
        raise ValueError(f"Bloom time cannot be negative: {params.bloom_time}s")
    if params.milk_temp is not None:
        _check_range("Milk temperature", params.milk_temp, MILK_TEMP_RANGE, "°C")
    if params.foam_amount is not None:
        _check_range("Foam amount", params.foam_amount, FOAM_RANGE, "%")


# =====================================================
# Règles
# =====================================================


def _uses_milk(params: BrewParameters) -> bool:
    return params.milk_type is not None and params.milk_type != MilkType.NONE


def _rule_applies(rule: ScoringRule, params: BrewParameters) -> bool:
    if rule.dimension == "milk":
        return _uses_milk(params)
    if rule.parameter == "bloom_time":
        return bool(params.bloom_time) and params.bloom_time > 0
    return True


def _raw_rule_score(
    rule: ScoringRule, params: BrewParameters, recipe: DrinkRecipe
) -> float:
    tol = recipe.tolerances
    if rule.parameter == "grind_size":
        return score_grind_size(params.grind_size, recipe.ideal_grind)
    if rule.parameter == "temperature":
        return calculate_tolerance_score(params.temperature, recipe.ideal_temp, tol.temp)
    if rule.parameter == "brew_time":
        return calculate_tolerance_score(
            params.brew_time, recipe.ideal_brew_time, tol.time
        )
    if rule.parameter == "bloom_time":
        if recipe.ideal_bloom_time is None:
            return 0.0
        return calculate_tolerance_score(
            params.bloom_time, recipe.ideal_bloom_time, tol.bloom
        )
    if rule.parameter == "milk_temp":
        # mesure absente sur une boisson lactée : composante ratée
        if not params.milk_temp or recipe.ideal_milk_temp is None:
            return 0.0
        return calculate_tolerance_score(
            params.milk_temp, recipe.ideal_milk_temp, tol.milk_temp
        )
    if params.foam_amount is None or recipe.ideal_foam_amount is None:
        return 0.0
    return calculate_tolerance_score(
        params.foam_amount, recipe.ideal_foam_amount, tol.foam
    )


def apply_component_bonus(
    score: float, rule: ScoringRule, bonuses: Optional[EquipmentEffects]
) -> float:
    """Ajoute les bonus d'équipement pertinents à une composante (plafond 100).

    - quality_bonus : toutes les composantes
    - grind_bonus : mouture
    - temperature_bonus : températures (eau et lait)
    - milk_bonus : composantes lait (température du lait, mousse)
    Puis `consistency` comble consistency/200 de l'écart restant à 100.

    Exemple
    -------
    >>> rule = ScoringRule(id="g", name="Grind Size", parameter="grind_size",
    ...                    dimension="grind", weight=1.0)
    >>> apply_component_bonus(70.0, rule, EquipmentEffects(grind_bonus=8))
    78.0
    >>> apply_component_bonus(98.0, rule, EquipmentEffects(grind_bonus=8))
    100.0
    """
    if bonuses is None:
        return score

    boosted = score + bonuses.quality_bonus
    if rule.dimension == "grind":
        boosted += bonuses.grind_bonus
    if rule.parameter in ("temperature", "milk_temp"):
        boosted += bonuses.temperature_bonus
    if rule.dimension == "milk":
        boosted += bonuses.milk_bonus

    if bonuses.consistency > 0 and boosted < SCORING["PERFECT"]:
        boosted += (SCORING["PERFECT"] - boosted) * (bonuses.consistency / 200)

    return max(0.0, min(float(SCORING["PERFECT"]), boosted))


# =====================================================
# Moteur de préparation
# =====================================================


def get_recipe(drink_type: Union[DrinkType, str]) -> DrinkRecipe:
    return DRINK_RECIPES[DrinkType(drink_type)]


def brew_drink(
    drink_type: Union[DrinkType, str],
    params: BrewParameters,
    bonuses: Optional[EquipmentEffects] = None,
) -> QualityResult:
    """Évalue une préparation et retourne un QualityResult.

    Étapes:
    1. Valide la boisson et les plages de mesure (ValueError sinon)
    2. Sélectionne les règles applicables (lait seulement si un lait est utilisé,
       bloom seulement si bloom_time > 0)
    3. Note chaque règle puis applique les bonus d'équipement par composante
    4. Agrège en moyenne pondérée sur les règles appliquées, arrondie et bornée 0..100
    """
    drink = DrinkType(drink_type)
    validate_brew_parameters(params)
    recipe = DRINK_RECIPES[drink]

    breakdown: Dict[str, int] = {}
    applied: List[str] = []
    weighted_sum = 0.0
    total_weight = 0.0

    for rule in recipe.rules:
        if not _rule_applies(rule, params):
            continue
        score = apply_component_bonus(_raw_rule_score(rule, params, recipe), rule, bonuses)
        breakdown[rule.name] = int(round_half_up(score))
        applied.append(rule.id)
        weighted_sum += score * rule.weight
        total_weight += rule.weight

    quality = round_half_up(weighted_sum / total_weight) if total_weight > 0 else 0
    quality = int(max(0, min(SCORING["PERFECT"], quality)))

    logger.debug(
        "Brew %s scored %d (%s)", drink.value, quality, ", ".join(applied) or "no rule"
    )
    return QualityResult(
        quality=quality,
        breakdown=breakdown,
        feedback=generate_feedback(quality, drink),
        applied_rules=applied,
    )


def generate_feedback(quality: float, drink_type: Union[DrinkType, str]) -> str:
    name = get_recipe(drink_type).name

    if quality >= SCORING["EXCELLENT_THRESHOLD"]:
        return f"Perfect {name}. Your customer is delighted."
    if quality >= SCORING["GOOD_THRESHOLD"]:
        return f"Well-crafted {name}. Very close to ideal."
    if quality >= SCORING["ACCEPTABLE_THRESHOLD"]:
        return f"Good {name}. Solid technique with minor issues."
    if quality >= SCORING["DECENT_THRESHOLD"]:
        return f"Acceptable {name}, but could use improvement."
    if quality >= SCORING["POOR_THRESHOLD"]:
        return f"Below average {name}. Check your parameters."
    return f"Poor {name}. Way off the mark."


def get_default_parameters(drink_type: Union[DrinkType, str]) -> BrewParameters:
    """Réglages proposés au joueur avant ajustement, selon la boisson."""
    recipe = get_recipe(drink_type)
    espresso_based = recipe.category == DrinkCategory.ESPRESSO_BASED
    values = {
        "grind_size": GrindSize.MEDIUM,
        "temperature": DEFAULT_TEMPERATURE,
        "brew_time": DEFAULT_ESPRESSO_TIME if espresso_based else DEFAULT_BREW_TIME,
    }
    if recipe.uses_milk:
        values.update(
            milk_type=MilkType.WHOLE,
            milk_temp=DEFAULT_MILK_TEMP,
            foam_amount=DEFAULT_FOAM_AMOUNT,
        )
    if recipe.category == DrinkCategory.POUR_OVER:
        values["bloom_time"] = DEFAULT_BLOOM_TIME
    return BrewParameters(**values)


def get_required_parameters(drink_type: Union[DrinkType, str]) -> List[str]:
    """Liste des champs de BrewParameters que le joueur doit régler.

    Exemple
    -------
    >>> get_required_parameters("pourover")
    ['grind_size', 'temperature', 'brew_time', 'bloom_time']
    """
    recipe = get_recipe(drink_type)
    required = ["grind_size", "temperature", "brew_time"]
    if recipe.uses_milk:
        required += ["milk_type", "milk_temp", "foam_amount"]
    if recipe.category == DrinkCategory.POUR_OVER:
        required.append("bloom_time")
    return required
