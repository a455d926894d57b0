"""Succès de fin de partie (règle pure, sans transport vers une plateforme)."""

from typing import List

from CEOSim_V1.domain.summary import Achievement, GameSummary
from CEOSim_V1.rules.scoring import ScoreBreakdown


def _progress(value: float, target: float) -> float:
    return min(100.0, value / target * 100.0)


def evaluate_achievements(
    summary: GameSummary, breakdown: ScoreBreakdown
) -> List[Achievement]:
    """Succès obtenus (ou en progression) pour une partie terminée.

    Seuls les succès au moins entamés sont retournés, dans un ordre fixe.
    """
    result: List[Achievement] = []
    if summary.quarters_survived >= 1:
        result.append(
            Achievement(id="first_quarter", title="First Quarter", percent_complete=100)
        )
        result.append(
            Achievement(
                id="survivor",
                title="Survivor",
                percent_complete=_progress(summary.quarters_survived, 8),
            )
        )
    if summary.quarters_survived >= 12:
        result.append(
            Achievement(id="perfect_run", title="Perfect Run", percent_complete=100)
        )
    if breakdown.total_score >= 900:
        result.append(Achievement(id="a_plus_ceo", title="A+ CEO", percent_complete=100))
    if summary.high_risk_decisions_taken >= 1:
        result.append(
            Achievement(
                id="risk_taker",
                title="Risk Taker",
                percent_complete=_progress(summary.high_risk_decisions_taken, 5),
            )
        )
    if not summary.neglected_departments and summary.final_performance > 50:
        result.append(
            Achievement(
                id="balanced_leader", title="Balanced Leader", percent_complete=100
            )
        )
    return result
