"""
Recettes de boissons : valeurs idéales, tolérances et règles pondérées.

Les recettes sont des données (voir data/recipes.json) ; le moteur de
scoring ne connaît que les primitives de notation.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, RootModel, model_validator

from CafeOPS_V1.domain.types import DrinkCategory, DrinkType, GrindSize

# Paramètre mesuré par une règle
BrewParameter = Literal[
    "grind_size", "temperature", "brew_time", "bloom_time", "milk_temp", "foam_amount"
]

# Tolérance sur la somme des poids (flottants)
WEIGHT_EPSILON = 0.001


class Tolerances(BaseModel):
    temp: float = Field(gt=0)
    time: float = Field(gt=0)
    bloom: float = Field(default=10, gt=0)
    milk_temp: float = Field(default=10, gt=0)
    foam: float = Field(default=15, gt=0)


class ScoringRule(BaseModel):
    id: str
    name: str  # libellé affiché dans le détail du score
    parameter: BrewParameter
    dimension: Literal["grind", "temperature", "timing", "milk"]
    weight: float = Field(gt=0, le=1)


class DrinkRecipe(BaseModel):
    name: str
    category: DrinkCategory
    description: str

    ideal_grind: GrindSize
    ideal_temp: float
    ideal_brew_time: float
    ideal_bloom_time: Optional[float] = None
    ideal_milk_temp: Optional[float] = None
    ideal_foam_amount: Optional[float] = None

    tolerances: Tolerances
    rules: List[ScoringRule]

    @model_validator(mode="after")
    def _weights_sum_to_one(self) -> "DrinkRecipe":
        total = sum(rule.weight for rule in self.rules)
        if abs(total - 1.0) > WEIGHT_EPSILON:
            detail = ", ".join(f"{r.id}={r.weight}" for r in self.rules)
            raise ValueError(
                f"Recipe '{self.name}' rule weights sum to {total:.3f}, must be 1.0. "
                f"Rules: {detail}"
            )
        return self

    @property
    def uses_milk(self) -> bool:
        return self.ideal_milk_temp is not None


class RecipeBook(RootModel[Dict[DrinkType, DrinkRecipe]]):
    def __getitem__(self, key: DrinkType) -> DrinkRecipe:
        return self.root[DrinkType(key)]

    def __iter__(self):
        return iter(self.root)

    @model_validator(mode="after")
    def _all_drinks_present(self) -> "RecipeBook":
        missing = [d.value for d in DrinkType if d not in self.root]
        if missing:
            raise ValueError(f"Missing recipes for: {', '.join(missing)}")
        return self
