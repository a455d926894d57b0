"""
Projections en lecture seule de l'état d'une partie (fin de partie,
historique trimestriel, succès).
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from CEOSim_V1.domain.types import DepartmentType

IN_PROGRESS_REASON = "Game in progress"

# (score minimal, note) du plus exigeant au moins exigeant
_GRADES = [
    (800, "A+"),
    (700, "A"),
    (600, "B+"),
    (500, "B"),
    (400, "C+"),
    (300, "C"),
    (200, "D"),
]


class QuarterSnapshot(BaseModel):
    """Photo de fin de trimestre (pour les courbes de tendance)."""

    model_config = ConfigDict(frozen=True)

    quarter: int
    budget: float
    department_performance: Dict[DepartmentType, float]


class GameSummary(BaseModel):
    """Résumé de partie, calculé à la demande par le contrôleur.

    Les propriétés dérivées (`performance_grade`, `summary_message`...)
    ne dépendent que des champs : le résumé est sans état caché.
    """

    model_config = ConfigDict(frozen=True)

    quarters_survived: int
    final_score: int
    final_budget: float
    final_reputation: float
    final_performance: float
    strongest_department: DepartmentType
    end_reason: str = IN_PROGRESS_REASON
    high_risk_decisions_taken: int = 0
    high_risk_successes: int = 0
    neglected_departments: List[DepartmentType] = Field(default_factory=list)
    scenarios_completed: int = 0

    @property
    def is_successful_run(self) -> bool:
        return (
            self.quarters_survived >= 8
            and self.final_budget > 25_000
            and self.final_reputation > 30
        )

    @property
    def performance_grade(self) -> str:
        for threshold, grade in _GRADES:
            if self.final_score >= threshold:
                return grade
        return "F"

    @property
    def summary_message(self) -> str:
        if self.is_successful_run:
            return (
                "Congratulations! You successfully led the company through "
                "challenging times and demonstrated strong leadership skills."
            )
        if self.quarters_survived >= 4:
            return (
                "Good effort! You managed to keep the company running for several "
                "quarters. With more experience, you'll achieve even better results."
            )
        return (
            "Every great CEO learns from experience. Use the insights from this "
            "run to make better strategic decisions next time!"
        )


class Achievement(BaseModel):
    """Succès évalué en fin de partie ; `percent_complete` dans [0, 100]."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    percent_complete: float = Field(ge=0, le=100)

    @property
    def is_unlocked(self) -> bool:
        return self.percent_complete >= 100
