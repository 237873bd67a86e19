import json
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Type, TypeVar, Union

from pydantic import BaseModel, RootModel

M = TypeVar("M", bound=BaseModel)


def load_and_validate(
    data_path: Path, model: Union[Type[RootModel], Type[BaseModel]]
) -> BaseModel:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        return model.model_validate(raw_data)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Arrondi commercial (0.5 -> 1), contrairement au `round` natif.

    Exemple
    -------
    >>> round_half_up(2.5)
    3.0
    >>> round_half_up(0.125, 2)
    0.13
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round2(value: float) -> float:
    """Montant arrondi au centime (half up)."""
    return round_half_up(value, 2)


def dump_model(model: BaseModel) -> str:
    """Sérialise un état en JSON (l'ordre des dicts est conservé)."""
    return model.model_dump_json()


def load_model(text: Union[str, bytes], model: Type[M]) -> M:
    """Restaure un état sérialisé par `dump_model`."""
    return model.model_validate_json(text)
