from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from CEOSim_V1.data.params import CONSTANTS
from CEOSim_V1.domain.department import Department
from CEOSim_V1.domain.types import DepartmentType
from CEOSim_V1.utils import clamp, mean


class Company(BaseModel):
    """
    L'entreprise pilotée par le joueur.

    Invariants maintenus après chaque mutation :
    - exactement un département par `DepartmentType` ;
    - `overall_performance` == moyenne des performances des départements ;
    - réputation bornée dans [0, 100] ; budget non borné (peut passer
      sous zéro avant le contrôle de fin de partie).
    """

    budget: float = CONSTANTS.initial.budget
    reputation: float = Field(default=CONSTANTS.initial.reputation, ge=0, le=100)
    overall_performance: float = 0.0
    quarter: int = Field(default=1, ge=1)
    departments: List[Department]

    @model_validator(mode="after")
    def _one_department_per_type(self) -> "Company":
        types = [d.type for d in self.departments]
        if sorted(types) != sorted(DepartmentType):
            raise ValueError(
                f"a company needs exactly one department per type, got {types}"
            )
        return self

    def model_post_init(self, __context) -> None:
        self.update_metrics()

    @classmethod
    def create(cls, rng=None) -> "Company":
        """Entreprise aux valeurs initiales, départements dans l'ordre canonique."""
        return cls(departments=[Department.create(t, rng) for t in DepartmentType])

    def department(self, dept_type: DepartmentType) -> Optional[Department]:
        return next((d for d in self.departments if d.type == dept_type), None)

    def update_metrics(self) -> None:
        self.overall_performance = mean(d.performance for d in self.departments)

    def adjust_reputation(self, delta: float) -> None:
        self.reputation = clamp(
            self.reputation + delta, CONSTANTS.metrics.min, CONSTANTS.metrics.max
        )

    def advance_quarter(self) -> List[str]:
        """Passe au trimestre suivant ; chaque département publie son rapport."""
        self.quarter += 1
        return [d.generate_quarterly_report() for d in self.departments]

    @property
    def strongest_department(self) -> Department:
        return max(self.departments, key=lambda d: d.performance)

    @property
    def weakest_department(self) -> Department:
        return min(self.departments, key=lambda d: d.performance)

    @property
    def neglected_departments(self) -> List[DepartmentType]:
        return [d.type for d in self.departments if d.is_neglected]
