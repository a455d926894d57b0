# Paramètres de jeu (seuils, multiplicateurs, pondérations)
"""
Chargement et validation des constantes de jeu.

Toutes les valeurs numériques vivent dans `game_constants.json` et sont
validées au chargement via Pydantic : une clé manquante ou mal typée
lève une `ValidationError` dès l'import.
"""

from pathlib import Path
from typing import Dict, Tuple

from pydantic import BaseModel, Field, model_validator

from CEOSim_V1.domain.types import DifficultyPhase, RiskLevel, ScenarioCategory
from CEOSim_V1.utils import load_and_validate

CategoryWeights = Dict[ScenarioCategory, float]


class InitialParams(BaseModel):
    budget: float
    reputation: float = Field(ge=0, le=100)
    department_budget: float
    department_performance_range: Tuple[float, float]
    department_morale_range: Tuple[float, float]


class MechanicsParams(BaseModel):
    scenarios_per_quarter: int = Field(ge=1)
    max_quarters: int = Field(ge=1)


class GameOverParams(BaseModel):
    min_budget: float
    min_reputation: float
    min_performance: float


class MetricBounds(BaseModel):
    min: float
    max: float


class ScoreParams(BaseModel):
    budget_divisor: float = Field(gt=0)
    reputation_multiplier: float
    performance_multiplier: float
    longevity_per_quarter: int
    consistency_min_decisions: int
    consistency_recent_count: int
    consistency_performance_threshold: float
    consistency_reputation_threshold: float
    consistency_bonus_per_decision: int
    efficiency_cost_threshold: float
    efficiency_performance_threshold: float
    efficiency_reputation_threshold: float
    efficiency_bonus_per_decision: int
    high_risk_success_bonus: int
    medium_risk_success_bonus: int
    department_balance_bonus: int
    department_balance_threshold: float


class WeightParams(BaseModel):
    """Pondérations du tirage de catégorie (voir `core.scenario_generator`)."""

    low_budget_threshold: float
    low_reputation_threshold: float
    low_performance_threshold: float
    low_budget_bump: CategoryWeights
    healthy_budget_bump: CategoryWeights
    low_reputation_bump: CategoryWeights
    low_performance_bump: CategoryWeights
    baseline: CategoryWeights
    enterprise_bonus: CategoryWeights

    @model_validator(mode="after")
    def _every_category_has_a_baseline(self) -> "WeightParams":
        missing = [c for c in ScenarioCategory if self.baseline.get(c, 0.0) <= 0.0]
        if missing:
            raise ValueError(f"baseline weight must be > 0 for {missing}")
        return self


class AnalysisParams(BaseModel):
    strong_budget: float
    strong_reputation: float
    strong_performance: float
    strong_morale: float
    weak_budget: float
    weak_reputation: float
    weak_performance: float
    weak_morale: float
    aggressive_cost: float
    style_ratio: float
    expensive_decision: float
    expensive_lookback: int
    expensive_count: int
    consistency_strength: int


class PhaseParams(BaseModel):
    last_quarter: int
    impact: float = Field(gt=0)
    cost: float = Field(gt=0)
    variance: float = Field(ge=0)


class MarketParams(BaseModel):
    event_chance: float = Field(ge=0, le=1)
    min_duration: int = Field(ge=1)
    max_duration: int = Field(ge=1)


class NeglectParams(BaseModel):
    threshold_quarters: int = Field(ge=1)
    performance_decay: float = Field(le=0)
    morale_decay: float = Field(le=0)


class GameConstants(BaseModel):
    initial: InitialParams
    mechanics: MechanicsParams
    game_over: GameOverParams
    metrics: MetricBounds
    score: ScoreParams
    weights: WeightParams
    analysis: AnalysisParams
    risk_variance: Dict[RiskLevel, float]
    difficulty: Dict[DifficultyPhase, PhaseParams]
    market: MarketParams
    neglect: NeglectParams

    @model_validator(mode="after")
    def _phases_are_monotonic(self) -> "GameConstants":
        phases = [self.difficulty[p] for p in DifficultyPhase]
        for lower, upper in zip(phases, phases[1:]):
            if (
                lower.impact > upper.impact
                or lower.cost > upper.cost
                or lower.variance > upper.variance
            ):
                raise ValueError("difficulty multipliers must not decrease by phase")
        return self


data_path = Path(__file__).parent / "game_constants.json"
CONSTANTS: GameConstants = load_and_validate(data_path, GameConstants)
