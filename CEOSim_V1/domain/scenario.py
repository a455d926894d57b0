"""
Scénarios de décision soumis au joueur (un scénario = une décision).

Un scénario est immuable une fois créé : les options, leurs coûts et
leurs impacts déclarés ne changent plus.  La variance aléatoire n'est
appliquée qu'au moment de la décision (voir `core.decision`).
"""

from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from CEOSim_V1.domain.types import DepartmentType, RiskLevel, ScenarioCategory


class DecisionImpact(BaseModel):
    """
    Quatre deltas signés + un département cible optionnel.

    Sans cible, l'impact s'applique intégralement à **chacun** des cinq
    départements (et non à un cinquième chacun).
    """

    model_config = ConfigDict(frozen=True)

    performance_change: float = 0.0
    morale_change: float = 0.0
    budget_change: float = 0.0
    reputation_change: float = 0.0
    department_specific: Optional[DepartmentType] = None

    @property
    def is_neutral(self) -> bool:
        return not any(
            (
                self.performance_change,
                self.morale_change,
                self.budget_change,
                self.reputation_change,
            )
        )


class DecisionOption(BaseModel):
    """Une option de décision.

    `cost` est informatif : il n'est pas débité automatiquement, c'est au
    template d'encoder le coût en `budget_change` négatif.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    cost: float = Field(default=0.0, ge=0)
    impact: DecisionImpact = Field(default_factory=DecisionImpact)
    risk_level: RiskLevel = RiskLevel.MEDIUM
    impact_variance: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="before")
    @classmethod
    def _default_variance_from_risk(cls, data):
        if isinstance(data, dict) and data.get("impact_variance") is None:
            risk = RiskLevel(data.get("risk_level", RiskLevel.MEDIUM))
            data = {**data, "impact_variance": risk.default_variance}
        return data


class Scenario(BaseModel):
    """
    Un point de décision : 2 à 4 options, généré pour un trimestre donné.

    L'égalité est fondée sur l'identité (`id`), pas sur le contenu : deux
    tirages du même template sont deux scénarios distincts.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    category: ScenarioCategory
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    options: List[DecisionOption] = Field(min_length=2, max_length=4)
    quarter: int = Field(ge=1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scenario):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


# ---------- Indices qualitatifs ----------


class ImpactDirection(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class ImpactHint(BaseModel):
    model_config = ConfigDict(frozen=True)

    metric: str
    direction: ImpactDirection
    description: str


_HINT_TEXTS = {
    "Performance": ("Likely boosts performance", "May hurt performance"),
    "Morale": ("Likely improves morale", "May lower morale"),
    "Reputation": ("Likely boosts reputation", "May damage reputation"),
}


def hints_from_impact(impact: DecisionImpact) -> List[ImpactHint]:
    """Aperçu qualitatif d'un impact (sans révéler les chiffres).

    Exemple
    -------
    >>> [h.description for h in hints_from_impact(DecisionImpact(morale_change=-3))]
    ['May lower morale']
    """
    values = {
        "Performance": impact.performance_change,
        "Morale": impact.morale_change,
        "Reputation": impact.reputation_change,
    }
    hints: List[ImpactHint] = []
    for metric, value in values.items():
        if value == 0:
            continue
        positive_text, negative_text = _HINT_TEXTS[metric]
        if value > 0:
            hints.append(
                ImpactHint(
                    metric=metric,
                    direction=ImpactDirection.POSITIVE,
                    description=positive_text,
                )
            )
        else:
            hints.append(
                ImpactHint(
                    metric=metric,
                    direction=ImpactDirection.NEGATIVE,
                    description=negative_text,
                )
            )
    return hints
