import pytest

from CafeOPS_V1.domain.brew import BrewParameters
from CafeOPS_V1.domain.customer import VisitData
from CafeOPS_V1.domain.types import GrindSize


@pytest.fixture
def ideal_espresso():
    """Paramètres parfaits pour un espresso."""
    return BrewParameters(grind_size=GrindSize.FINE, temperature=93, brew_time=25)


@pytest.fixture
def make_visit():
    """Fabrique de VisitData avec des valeurs par défaut raisonnables."""

    def _make(**overrides):
        values = {
            "drink_ordered": "latte",
            "quality": 80,
            "satisfaction": 80,
            "payment": 4.5,
        }
        values.update(overrides)
        return VisitData(**values)

    return _make
