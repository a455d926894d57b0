"""
Événements de marché : modificateurs globaux temporaires (1 à 2 trimestres).

Ce module définit le modèle `MarketEvent` et charge le pool fixe
d'événements depuis `data/market_events.json`.
"""

from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from CEOSim_V1.data.params import CONSTANTS
from CEOSim_V1.domain.types import ScenarioCategory
from CEOSim_V1.utils import load_and_validate


class MarketEventModifier(BaseModel):
    """Effet appliqué une fois par trimestre tant que l'événement est actif.

    `budget_drain` est signé : négatif = ponction, positif = rentrée.
    """

    model_config = ConfigDict(frozen=True)

    budget_drain: float = 0.0
    performance_change: float = 0.0
    morale_change: float = 0.0
    reputation_change: float = 0.0


class MarketEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    duration: int
    modifier: MarketEventModifier
    category_weight_adjustments: Dict[ScenarioCategory, float] = Field(
        default_factory=dict
    )
    icon: str

    @model_validator(mode="after")
    def _duration_in_bounds(self) -> "MarketEvent":
        low, high = CONSTANTS.market.min_duration, CONSTANTS.market.max_duration
        if not low <= self.duration <= high:
            raise ValueError(
                f"{self.name}: duration {self.duration} outside [{low}, {high}]"
            )
        return self


class MarketEventPoolModel(RootModel[List[MarketEvent]]):
    pass


data_path = Path(__file__).parent.parent / "data" / "market_events.json"
MARKET_EVENTS: List[MarketEvent] = load_and_validate(
    data_path, MarketEventPoolModel
).root
