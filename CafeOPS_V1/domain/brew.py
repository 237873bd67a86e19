"""
Faits d'un essai de préparation (paramètres saisis par le joueur) et
résultat de leur évaluation par le moteur de scoring.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from CafeOPS_V1.domain.types import GrindSize, MilkType


class BrewParameters(BaseModel):
    """Paramètres effectivement obtenus lors d'une préparation (immutables)."""

    model_config = ConfigDict(frozen=True)

    grind_size: GrindSize
    temperature: float  # °C de l'eau / de l'extraction
    brew_time: float  # secondes
    bloom_time: Optional[float] = None  # pour-over uniquement
    milk_type: Optional[MilkType] = None
    milk_temp: Optional[float] = None
    foam_amount: Optional[float] = None  # % de mousse


class QualityResult(BaseModel):
    """Score qualité 0..100 et son détail par règle appliquée."""

    quality: int = Field(ge=0, le=100)
    breakdown: Dict[str, int] = Field(default_factory=dict)
    feedback: str = ""
    applied_rules: List[str] = Field(default_factory=list)
