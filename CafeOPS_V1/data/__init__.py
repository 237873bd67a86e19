"""
Point d'entrée data avec imports retardés pour éviter les boucles.
Expose des getters plutôt que des objets globaux calculés au chargement.
"""

from pathlib import Path

DATA_DIR = Path(__file__).parent


def get_RECIPES():
    from CafeOPS_V1.domain.recipe import RecipeBook
    from CafeOPS_V1.utils import load_and_validate

    return load_and_validate(DATA_DIR / "recipes.json", RecipeBook)


def get_EQUIPMENT_CATALOG():
    from CafeOPS_V1.domain.equipment import EquipmentCatalog
    from CafeOPS_V1.utils import load_and_validate

    return load_and_validate(DATA_DIR / "equipment.json", EquipmentCatalog)
