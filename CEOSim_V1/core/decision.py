"""
Application d'une décision du joueur sur l'entreprise.

C'est le seul endroit où les impacts annoncés deviennent aléatoires :
chaque champ non nul est multiplié par `1 + U(-v, +v)`, avec
`v = variance de l'option x multiplicateur de variance du palier`.
"""

import logging
from datetime import datetime
from typing import Dict, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from CEOSim_V1.domain.company import Company
from CEOSim_V1.domain.scenario import DecisionImpact, DecisionOption
from CEOSim_V1.domain.types import DepartmentType, DifficultyPhase, RiskLevel

logger = logging.getLogger(__name__)


class CompanySnapshot(BaseModel):
    """État de l'entreprise juste avant une décision."""

    model_config = ConfigDict(frozen=True)

    budget: float
    reputation: float
    overall_performance: float
    department_performances: Dict[DepartmentType, float]

    @classmethod
    def of(cls, company: Company) -> "CompanySnapshot":
        return cls(
            budget=company.budget,
            reputation=company.reputation,
            overall_performance=company.overall_performance,
            department_performances={d.type: d.performance for d in company.departments},
        )


class ScoredDecision(BaseModel):
    """Trace immuable d'une décision prise (historique en ajout seul)."""

    model_config = ConfigDict(frozen=True)

    option: DecisionOption
    quarter: int
    company_state_before: CompanySnapshot
    timestamp: datetime = Field(default_factory=datetime.now)
    risk_level: RiskLevel
    actual_impact: DecisionImpact


def vary(value: float, variance: float, rng: np.random.Generator) -> float:
    """Perturbe `value` de ±variance (relatif) ; 0 reste exactement 0."""
    if variance <= 0 or value == 0:
        return value
    return value * (1.0 + rng.uniform(-variance, variance))


def apply_variance(
    impact: DecisionImpact, variance: float, rng: np.random.Generator
) -> DecisionImpact:
    return impact.model_copy(
        update={
            "performance_change": vary(impact.performance_change, variance, rng),
            "morale_change": vary(impact.morale_change, variance, rng),
            "budget_change": vary(impact.budget_change, variance, rng),
            "reputation_change": vary(impact.reputation_change, variance, rng),
        }
    )


def effective_variance(option: DecisionOption, quarter: int) -> float:
    return option.impact_variance * DifficultyPhase.for_quarter(quarter).variance_multiplier


def apply_decision(
    company: Company, option: DecisionOption, rng: np.random.Generator
) -> Tuple[Company, DecisionImpact]:
    """
    Applique une option choisie à l'entreprise (mutation en place).

    - budget et réputation au niveau entreprise (réputation bornée)
    - performance / moral / budget au département ciblé, ou à **chacun**
      des cinq départements si l'impact n'a pas de cible
    - recalcul de `overall_performance`

    Returns:
        (company, actual_impact) : l'impact effectivement appliqué, après variance
    """
    variance = effective_variance(option, company.quarter)
    actual = apply_variance(option.impact, variance, rng)
    logger.debug(
        "Decision '%s' (variance=%.3f): perf %+.2f, morale %+.2f, budget %+.0f, rep %+.2f",
        option.title,
        variance,
        actual.performance_change,
        actual.morale_change,
        actual.budget_change,
        actual.reputation_change,
    )

    company.budget += actual.budget_change
    company.adjust_reputation(actual.reputation_change)

    if actual.department_specific is not None:
        targets = [company.department(actual.department_specific)]
    else:
        targets = company.departments
    for department in targets:
        department.apply_decision_impact(actual)

    company.update_metrics()
    return company, actual
