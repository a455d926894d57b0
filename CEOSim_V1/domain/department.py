"""Départements de l'entreprise (un par `DepartmentType`)."""

import logging
from typing import List

from pydantic import BaseModel, Field

from CEOSim_V1.data.params import CONSTANTS
from CEOSim_V1.domain.types import DepartmentType
from CEOSim_V1.utils import clamp, make_rng

logger = logging.getLogger(__name__)


class Department(BaseModel):
    """
    Un département : performance et moral (0..100), budget propre, et un
    compteur de trimestres depuis le dernier "investissement" (décision
    qui a amélioré au moins une de ses métriques).
    """

    type: DepartmentType = Field(frozen=True)
    performance: float = Field(ge=0, le=100)
    morale: float = Field(ge=0, le=100)
    budget: float = CONSTANTS.initial.department_budget
    quarters_since_last_investment: int = Field(default=0, ge=0)
    quarterly_reports: List[str] = Field(default_factory=list)

    @classmethod
    def create(cls, dept_type: DepartmentType, rng=None) -> "Department":
        """Département neuf, performance et moral tirés dans leurs plages initiales."""
        rng = make_rng(rng)
        perf_low, perf_high = CONSTANTS.initial.department_performance_range
        morale_low, morale_high = CONSTANTS.initial.department_morale_range
        return cls(
            type=dept_type,
            performance=float(rng.uniform(perf_low, perf_high)),
            morale=float(rng.uniform(morale_low, morale_high)),
        )

    @property
    def is_neglected(self) -> bool:
        return self.quarters_since_last_investment >= CONSTANTS.neglect.threshold_quarters

    def apply_metric_delta(self, performance: float = 0.0, morale: float = 0.0) -> None:
        low, high = CONSTANTS.metrics.min, CONSTANTS.metrics.max
        self.performance = clamp(self.performance + performance, low, high)
        self.morale = clamp(self.morale + morale, low, high)

    def apply_decision_impact(self, impact) -> None:
        """Applique les deltas performance / moral / budget d'un `DecisionImpact`.

        Une amélioration (un des trois deltas > 0) remet le compteur de
        négligence à zéro ; un delta nul ou purement négatif ne le touche pas.
        """
        self.apply_metric_delta(impact.performance_change, impact.morale_change)
        self.budget += impact.budget_change

        if (
            impact.performance_change > 0
            or impact.morale_change > 0
            or impact.budget_change > 0
        ):
            self.record_investment()

    def record_investment(self) -> None:
        self.quarters_since_last_investment = 0

    def apply_neglect_decay(self) -> None:
        """Pénalité de négligence, proportionnelle aux trimestres en excès.

        No-op si le département n'est pas négligé. Performance et moral sont
        bornés au plancher des métriques.
        """
        if not self.is_neglected:
            return
        excess_quarters = (
            self.quarters_since_last_investment - CONSTANTS.neglect.threshold_quarters + 1
        )
        perf_decay = CONSTANTS.neglect.performance_decay * excess_quarters
        morale_decay = CONSTANTS.neglect.morale_decay * excess_quarters
        self.performance = max(CONSTANTS.metrics.min, self.performance + perf_decay)
        self.morale = max(CONSTANTS.metrics.min, self.morale + morale_decay)
        logger.debug(
            "Neglect decay on %s: perf %+.1f, morale %+.1f (excess=%d)",
            self.type.label,
            perf_decay,
            morale_decay,
            excess_quarters,
        )

    def generate_quarterly_report(self) -> str:
        self.quarters_since_last_investment += 1
        report = (
            f"{self.type.label} Q{len(self.quarterly_reports) + 1}: "
            f"Performance {int(self.performance)}%, Morale {int(self.morale)}%"
        )
        self.quarterly_reports.append(report)
        return report
