# CEOSim_V1/domain/types.py
from enum import Enum


class DepartmentType(str, Enum):
    # Valeurs alignées avec les clés JSON et le reste du code
    SALES = "sales"
    MARKETING = "marketing"
    ENGINEERING = "engineering"
    HR = "hr"
    FINANCE = "finance"

    @property
    def label(self) -> str:
        return _DEPARTMENT_LABELS[self]


_DEPARTMENT_LABELS = {
    DepartmentType.SALES: "Sales",
    DepartmentType.MARKETING: "Marketing",
    DepartmentType.ENGINEERING: "Engineering",
    DepartmentType.HR: "Human Resources",
    DepartmentType.FINANCE: "Finance",
}


class ScenarioCategory(str, Enum):
    """Catégories de scénarios (pilote le tirage du pool de templates)."""

    BUDGET = "budget"
    TECHNICAL = "technical"
    MARKETING = "marketing"
    HR = "hr"
    OPPORTUNITY = "opportunity"
    ETHICAL = "ethical"
    COMPETITIVE = "competitive"
    INNOVATION = "innovation"
    REGULATORY = "regulatory"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    ScenarioCategory.BUDGET: "Budget Crisis",
    ScenarioCategory.TECHNICAL: "Technical Challenge",
    ScenarioCategory.MARKETING: "Marketing Crisis",
    ScenarioCategory.HR: "HR Issue",
    ScenarioCategory.OPPORTUNITY: "Market Opportunity",
    ScenarioCategory.ETHICAL: "Ethical Dilemma",
    ScenarioCategory.COMPETITIVE: "Competitive Threat",
    ScenarioCategory.INNOVATION: "Innovation",
    ScenarioCategory.REGULATORY: "Regulatory",
}


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Risk"

    @property
    def default_variance(self) -> float:
        """Borne de variance canonique du niveau de risque (0.08 / 0.22 / 0.40)."""
        # import retardé : data.params importe ce module
        from CEOSim_V1.data.params import CONSTANTS

        return CONSTANTS.risk_variance[self]


class DifficultyPhase(str, Enum):
    """
    Palier de difficulté dérivé uniquement du trimestre.

    - STARTUP    : T1 à T4
    - GROWTH     : T5 à T8
    - ENTERPRISE : T9 à T12 (et au-delà)

    Chaque palier porte des multiplicateurs impact / coût / variance,
    croissants d'un palier à l'autre.
    """

    STARTUP = "startup"
    GROWTH = "growth"
    ENTERPRISE = "enterprise"

    @classmethod
    def for_quarter(cls, quarter: int) -> "DifficultyPhase":
        from CEOSim_V1.data.params import CONSTANTS

        for phase in (cls.STARTUP, cls.GROWTH):
            if quarter <= CONSTANTS.difficulty[phase].last_quarter:
                return phase
        return cls.ENTERPRISE

    @property
    def impact_multiplier(self) -> float:
        from CEOSim_V1.data.params import CONSTANTS

        return CONSTANTS.difficulty[self].impact

    @property
    def cost_multiplier(self) -> float:
        from CEOSim_V1.data.params import CONSTANTS

        return CONSTANTS.difficulty[self].cost

    @property
    def variance_multiplier(self) -> float:
        from CEOSim_V1.data.params import CONSTANTS

        return CONSTANTS.difficulty[self].variance


class GameState(str, Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"
    GAME_OVER = "game_over"
