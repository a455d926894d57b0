"""
Moteur de score : six composantes indépendantes + analyse qualitative.

Tout est recalculé à partir de l'entreprise courante et de l'historique
complet des décisions ; aucun score n'est conservé entre deux appels.

Les composantes « consistency » et « efficiency » lisent l'impact
*déclaré* de l'option ; « risk_reward » lit l'impact *réel* (après variance).
"""

from enum import Enum
from typing import List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, computed_field

from CEOSim_V1.core.decision import ScoredDecision
from CEOSim_V1.data.params import CONSTANTS
from CEOSim_V1.domain.company import Company
from CEOSim_V1.domain.types import DepartmentType, RiskLevel
from CEOSim_V1.utils import clamp


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_score: int
    longevity_bonus: int
    consistency_bonus: int
    efficiency_bonus: int
    risk_reward_bonus: int
    department_balance_bonus: int

    @computed_field
    @property
    def total_score(self) -> int:
        return max(
            0,
            self.base_score
            + self.longevity_bonus
            + self.consistency_bonus
            + self.efficiency_bonus
            + self.risk_reward_bonus
            + self.department_balance_bonus,
        )


class LeadershipStyle(str, Enum):
    AGGRESSIVE = "Aggressive Growth"
    CONSERVATIVE = "Conservative Steward"
    BALANCED = "Balanced Strategic"

    @property
    def description(self) -> str:
        return _STYLE_DESCRIPTIONS[self]


_STYLE_DESCRIPTIONS = {
    LeadershipStyle.AGGRESSIVE: (
        "You make bold, high-investment decisions focused on rapid growth "
        "and market capture."
    ),
    LeadershipStyle.CONSERVATIVE: (
        "You prefer measured, low-risk approaches that prioritize stability "
        "and gradual improvement."
    ),
    LeadershipStyle.BALANCED: (
        "You balance risk and reward, making strategic decisions that "
        "consider multiple factors."
    ),
}


class PerformanceAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_score: int
    quarters_survived: int
    decisions_made: int
    average_decision_cost: float
    strongest_department: DepartmentType
    weakest_department: DepartmentType
    key_strengths: List[str]
    areas_for_improvement: List[str]
    leadership_style: LeadershipStyle


# ---------- Composantes ----------


def base_score(company: Company) -> int:
    params = CONSTANTS.score
    budget_points = int(clamp(company.budget / params.budget_divisor, 0, 100))
    department_points = sum(
        int(d.performance + d.morale) // 2 for d in company.departments
    )
    return (
        budget_points
        + int(company.reputation * params.reputation_multiplier)
        + int(company.overall_performance * params.performance_multiplier)
        + department_points
    )


def longevity_bonus(company: Company) -> int:
    return company.quarter * CONSTANTS.score.longevity_per_quarter


def consistency_bonus(history: Sequence[ScoredDecision]) -> int:
    """Décisions mesurées parmi les plus récentes (impacts déclarés modérés)."""
    params = CONSTANTS.score
    if len(history) < params.consistency_min_decisions:
        return 0
    recent = history[-params.consistency_recent_count :]
    consistent = [
        d
        for d in recent
        if abs(d.option.impact.performance_change)
        <= params.consistency_performance_threshold
        and abs(d.option.impact.reputation_change)
        <= params.consistency_reputation_threshold
    ]
    return len(consistent) * params.consistency_bonus_per_decision


def efficiency_bonus(history: Sequence[ScoredDecision]) -> int:
    """Décisions peu coûteuses à fort impact déclaré, sur tout l'historique."""
    params = CONSTANTS.score
    efficient = [
        d
        for d in history
        if d.option.cost <= params.efficiency_cost_threshold
        and (
            d.option.impact.performance_change > params.efficiency_performance_threshold
            or d.option.impact.reputation_change > params.efficiency_reputation_threshold
        )
    ]
    return len(efficient) * params.efficiency_bonus_per_decision


def _is_success(decision: ScoredDecision) -> bool:
    impact = decision.actual_impact
    return impact.performance_change >= 0 or impact.reputation_change >= 0


def risk_reward_bonus(history: Sequence[ScoredDecision]) -> int:
    params = CONSTANTS.score
    bonus = 0
    for decision in history:
        if not _is_success(decision):
            continue
        if decision.risk_level == RiskLevel.HIGH:
            bonus += params.high_risk_success_bonus
        elif decision.risk_level == RiskLevel.MEDIUM:
            bonus += params.medium_risk_success_bonus
    return bonus


def department_balance_bonus(company: Company) -> int:
    params = CONSTANTS.score
    if all(
        d.performance >= params.department_balance_threshold
        for d in company.departments
    ):
        return params.department_balance_bonus
    return 0


def get_score_breakdown(
    company: Company, history: Sequence[ScoredDecision]
) -> ScoreBreakdown:
    return ScoreBreakdown(
        base_score=base_score(company),
        longevity_bonus=longevity_bonus(company),
        consistency_bonus=consistency_bonus(history),
        efficiency_bonus=efficiency_bonus(history),
        risk_reward_bonus=risk_reward_bonus(history),
        department_balance_bonus=department_balance_bonus(company),
    )


def calculate_score(company: Company, history: Sequence[ScoredDecision]) -> int:
    return get_score_breakdown(company, history).total_score


# ---------- Analyse ----------


def leadership_style(history: Sequence[ScoredDecision]) -> LeadershipStyle:
    """Style de direction selon la part de décisions chères ou gratuites.

    Historique vide -> BALANCED.
    """
    if not history:
        return LeadershipStyle.BALANCED
    params = CONSTANTS.analysis
    total = len(history)
    expensive = sum(1 for d in history if d.option.cost > params.aggressive_cost)
    free = sum(1 for d in history if d.option.cost == 0)
    if expensive / total > params.style_ratio:
        return LeadershipStyle.AGGRESSIVE
    if free / total > params.style_ratio:
        return LeadershipStyle.CONSERVATIVE
    return LeadershipStyle.BALANCED


def key_strengths(company: Company, history: Sequence[ScoredDecision]) -> List[str]:
    params = CONSTANTS.analysis
    strengths: List[str] = []
    if company.budget > params.strong_budget:
        strengths.append("Strong Financial Management")
    if company.reputation > params.strong_reputation:
        strengths.append("Excellent Brand Reputation")
    if company.overall_performance > params.strong_performance:
        strengths.append("High-Performance Operations")
    if all(d.morale > params.strong_morale for d in company.departments):
        strengths.append("Great Team Morale")
    if consistency_bonus(history) > params.consistency_strength:
        strengths.append("Consistent Decision Making")
    return strengths or ["Resilience Under Pressure"]


def areas_for_improvement(
    company: Company, history: Sequence[ScoredDecision]
) -> List[str]:
    params = CONSTANTS.analysis
    weaknesses: List[str] = []
    if company.budget < params.weak_budget:
        weaknesses.append("Cash Flow Management")
    if company.reputation < params.weak_reputation:
        weaknesses.append("Brand Reputation Recovery")
    if company.overall_performance < params.weak_performance:
        weaknesses.append("Operational Efficiency")
    if sum(1 for d in company.departments if d.morale < params.weak_morale) > 1:
        weaknesses.append("Employee Satisfaction")
    if len(history) > params.expensive_lookback:
        recent = history[-params.expensive_lookback :]
        expensive = sum(1 for d in recent if d.option.cost > params.expensive_decision)
        if expensive > params.expensive_count:
            weaknesses.append("Budget Optimization")
    return weaknesses or ["Strategic Vision"]


def performance_analysis(
    company: Company, history: Sequence[ScoredDecision]
) -> PerformanceAnalysis:
    average_cost = (
        sum(d.option.cost for d in history) / len(history) if history else 0.0
    )
    return PerformanceAnalysis(
        total_score=calculate_score(company, history),
        quarters_survived=company.quarter,
        decisions_made=len(history),
        average_decision_cost=average_cost,
        strongest_department=company.strongest_department.type,
        weakest_department=company.weakest_department.type,
        key_strengths=key_strengths(company, history),
        areas_for_improvement=areas_for_improvement(company, history),
        leadership_style=leadership_style(history),
    )


def high_risk_stats(history: Sequence[ScoredDecision]) -> Tuple[int, int]:
    """(décisions à haut risque prises, dont réussies)."""
    high_risk = [d for d in history if d.risk_level == RiskLevel.HIGH]
    return len(high_risk), sum(1 for d in high_risk if _is_success(d))


def top_performing_decisions(
    history: Sequence[ScoredDecision], limit: int = 5
) -> List[ScoredDecision]:
    """Meilleures décisions selon l'impact performance déclaré (au plus `limit`)."""
    params = CONSTANTS.score
    good = [
        d
        for d in history
        if d.option.impact.performance_change > params.efficiency_performance_threshold
        or d.option.impact.reputation_change > params.efficiency_reputation_threshold
    ]
    good.sort(key=lambda d: d.option.impact.performance_change, reverse=True)
    return good[:limit]
