from pydantic import BaseModel

from CafeOPS_V1.domain.brew import QualityResult
from CafeOPS_V1.domain.customer import CustomerProfile
from CafeOPS_V1.domain.order import PriceQuote
from CafeOPS_V1.domain.session import GameSession
from CafeOPS_V1.domain.types import DrinkType


class ServiceResult(BaseModel):
    """Snapshot d'un service client : nouvel état de session et ce qui l'a produit."""

    session: GameSession
    drink_type: DrinkType
    quality: QualityResult
    quote: PriceQuote
    profile: CustomerProfile
    earned: float  # total du devis + pourboire
