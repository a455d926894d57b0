"""
Contrôleur de partie : la machine à états exposée aux collaborateurs.

    INACTIVE --start_new_game--> ACTIVE --(condition de fin)--> GAME_OVER
        ^                                                          |
        +------------------- confirm_exit_game --------------------+

Les collaborateurs (UI, service de plateforme) ne modifient jamais l'état
directement : ils appellent les opérations ci-dessous et lisent les
accesseurs.  Toutes les transitions sont synchrones ; le seul délai
(rythme entre deux scénarios) passe par le `scheduler` injecté.
"""

import logging
from typing import Callable, Dict, List, Optional, Protocol

import numpy as np

from CEOSim_V1.core.decision import CompanySnapshot, ScoredDecision, apply_decision
from CEOSim_V1.core.market import MarketEventLifecycle, apply_neglect_decay
from CEOSim_V1.core.scenario_generator import ScenarioGenerator
from CEOSim_V1.data import get_CONSTANTS
from CEOSim_V1.domain.company import Company
from CEOSim_V1.domain.market import MarketEvent
from CEOSim_V1.domain.scenario import DecisionImpact, Scenario
from CEOSim_V1.domain.summary import (
    IN_PROGRESS_REASON,
    Achievement,
    GameSummary,
    QuarterSnapshot,
)
from CEOSim_V1.domain.types import GameState
from CEOSim_V1.rules.achievements import evaluate_achievements
from CEOSim_V1.rules.scoring import (
    PerformanceAnalysis,
    ScoreBreakdown,
    calculate_score,
    get_score_breakdown,
    high_risk_stats,
    performance_analysis,
    top_performing_decisions,
)
from CEOSim_V1.utils import make_rng

logger = logging.getLogger(__name__)

OUT_OF_MONEY = "Company ran out of money!"
REPUTATION_TOO_LOW = "Company reputation fell too low!"
PERFORMANCE_COLLAPSE = "Company performance declined beyond recovery!"
SUCCESSFUL_RUN = "Congratulations! You successfully managed the company for 3 years!"

Listener = Callable[[str], None]
Scheduler = Callable[[Callable[[], None]], None]


class PlatformService(Protocol):
    """Classement / succès d'une plateforme de jeu (transport hors moteur)."""

    def submit_score(self, summary: GameSummary, breakdown: ScoreBreakdown) -> None:
        ...

    def report_achievements(self, achievements: List[Achievement]) -> None:
        ...


def run_immediately(callback: Callable[[], None]) -> None:
    callback()


def game_over_reason(company: Company) -> Optional[str]:
    """Première condition de fin satisfaite, dans l'ordre ; None si la partie continue."""
    constants = get_CONSTANTS()
    limits = constants.game_over
    if company.budget < limits.min_budget:
        return OUT_OF_MONEY
    if company.reputation < limits.min_reputation:
        return REPUTATION_TOO_LOW
    if company.overall_performance < limits.min_performance:
        return PERFORMANCE_COLLAPSE
    if company.quarter > constants.mechanics.max_quarters:
        return SUCCESSFUL_RUN
    return None


class GameController:
    """
    Orchestration d'une partie : génération, décision, frontières de
    trimestre, détection de fin, score.

    Args:
        generator: générateur de scénarios (par défaut partage `rng`)
        rng: générateur numpy ; un générateur seedé rend la partie reproductible
        platform: service de plateforme notifié en fin de partie (optionnel)
        scheduler: reçoit le callback "scénario suivant" ; par défaut l'exécute
            immédiatement
    """

    def __init__(
        self,
        generator: Optional[ScenarioGenerator] = None,
        rng: Optional[np.random.Generator] = None,
        platform: Optional[PlatformService] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        self.rng = make_rng(rng)
        self.generator = generator or ScenarioGenerator(rng=self.rng)
        self.market = MarketEventLifecycle(rng=self.rng)
        self.platform = platform
        self.scheduler = scheduler or run_immediately

        self.state = GameState.INACTIVE
        self.company = Company.create(self.rng)
        self.current_scenario: Optional[Scenario] = None
        self.decision_history: List[ScoredDecision] = []
        self.scenario_history: List[Scenario] = []
        self.quarter_history: List[QuarterSnapshot] = []
        self.game_over_reason: Optional[str] = None
        self.exit_requested = False

        self._listeners: List[Listener] = []
        # incrémenté à chaque partie : invalide les callbacks différés périmés
        self._game_id = 0

    # ---------- Accesseurs ----------

    @property
    def is_game_active(self) -> bool:
        return self.state == GameState.ACTIVE

    @property
    def active_market_event(self) -> Optional[MarketEvent]:
        return self.market.active_event

    @property
    def market_event_quarters_remaining(self) -> int:
        return self.market.quarters_remaining

    # ---------- Notifications ----------

    def subscribe(self, listener: Listener) -> Listener:
        """Enregistre un écouteur appelé avec le nom de l'événement."""
        self._listeners.append(listener)
        return listener

    def _notify(self, event: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.warning("Listener failed on %r", event, exc_info=True)

    # ---------- Transitions ----------

    def start_new_game(self) -> None:
        self._game_id += 1
        self.company = Company.create(self.rng)
        self.current_scenario = None
        self.decision_history = []
        self.scenario_history = []
        self.quarter_history = []
        self.game_over_reason = None
        self.exit_requested = False
        self.market.reset()
        self.state = GameState.ACTIVE

        logger.info(
            "New game started: budget=%.0f, reputation=%.0f",
            self.company.budget,
            self.company.reputation,
        )
        self._notify("game_started")
        self._next_scenario()

    def make_decision(self, option_index: int) -> Optional[DecisionImpact]:
        """
        Applique l'option `option_index` du scénario courant.

        No-op (retourne None) hors partie active, sans scénario courant ou
        avec un indice hors bornes.

        Returns:
            L'impact réellement appliqué (après variance), ou None
        """
        scenario = self.current_scenario
        if not self.is_game_active or scenario is None:
            logger.debug("make_decision ignored: no scenario awaiting a decision")
            return None
        if not 0 <= option_index < len(scenario.options):
            logger.debug("make_decision ignored: invalid option index %d", option_index)
            return None

        option = scenario.options[option_index]
        before = CompanySnapshot.of(self.company)
        _, actual = apply_decision(self.company, option, self.rng)
        self.decision_history.append(
            ScoredDecision(
                option=option,
                quarter=self.company.quarter,
                company_state_before=before,
                risk_level=option.risk_level,
                actual_impact=actual,
            )
        )
        self.scenario_history.append(scenario)
        self.current_scenario = None
        self._notify("decision_made")

        if self._check_game_over():
            return actual

        game_id = self._game_id
        self.scheduler(lambda: self._advance(game_id))
        return actual

    def pause_game(self) -> None:
        """Sans effet : il suffit de ne plus appeler `make_decision`."""

    def request_exit_game(self) -> None:
        self.exit_requested = True

    def cancel_exit_game(self) -> None:
        self.exit_requested = False

    def confirm_exit_game(self) -> None:
        self.exit_requested = False
        self.state = GameState.INACTIVE
        self.current_scenario = None
        self.game_over_reason = None
        logger.info("Game exited")
        self._notify("exited")

    # ---------- Déroulement ----------

    def _advance(self, game_id: int) -> None:
        if game_id != self._game_id or not self.is_game_active:
            return
        if self.current_scenario is not None:
            return

        decisions = len(self.decision_history)
        per_quarter = get_CONSTANTS().mechanics.scenarios_per_quarter
        if decisions > 0 and decisions % per_quarter == 0:
            # pas de contrôle de fin ici : seul make_decision termine la partie
            self._run_quarter_boundary()
        self._next_scenario()

    def _run_quarter_boundary(self) -> None:
        """Négligence, effets de marché, photo, trimestre suivant, tirage d'événement."""
        apply_neglect_decay(self.company)
        self.market.apply_effects(self.company)

        self.quarter_history.append(
            QuarterSnapshot(
                quarter=self.company.quarter,
                budget=self.company.budget,
                department_performance={
                    d.type: d.performance for d in self.company.departments
                },
            )
        )
        self.company.advance_quarter()
        self.market.select_next()

        logger.info(
            "Quarter %d begins: budget=%.0f, reputation=%.1f, performance=%.1f",
            self.company.quarter,
            self.company.budget,
            self.company.reputation,
            self.company.overall_performance,
        )
        self._notify("quarter_advanced")

    def _next_scenario(self) -> None:
        self.current_scenario = self.generator.generate(
            self.company, self.market.active_event
        )
        self._notify("scenario_ready")

    def _check_game_over(self) -> bool:
        reason = game_over_reason(self.company)
        if reason is None:
            return False
        self.state = GameState.GAME_OVER
        self.game_over_reason = reason
        self.current_scenario = None
        logger.info("Game over at Q%d: %s", self.company.quarter, reason)
        self._notify("game_over")
        self._report_to_platform()
        return True

    def _report_to_platform(self) -> None:
        if self.platform is None:
            return
        summary = self.get_game_summary()
        breakdown = self.get_score_breakdown()
        try:
            self.platform.submit_score(summary, breakdown)
            self.platform.report_achievements(evaluate_achievements(summary, breakdown))
        except Exception:
            logger.warning("Platform service failed at game end", exc_info=True)

    # ---------- Score & résumé ----------

    def get_current_score(self) -> int:
        return calculate_score(self.company, self.decision_history)

    def get_score_breakdown(self) -> ScoreBreakdown:
        return get_score_breakdown(self.company, self.decision_history)

    def get_performance_analysis(self) -> PerformanceAnalysis:
        return performance_analysis(self.company, self.decision_history)

    def get_top_performing_decisions(self) -> List[ScoredDecision]:
        return top_performing_decisions(self.decision_history)

    def get_performance_metrics(self) -> Dict[str, float]:
        return {
            "Budget": self.company.budget,
            "Reputation": self.company.reputation,
            "Overall Performance": self.company.overall_performance,
            "Quarter": float(self.company.quarter),
        }

    def get_game_summary(self) -> GameSummary:
        taken, successes = high_risk_stats(self.decision_history)
        return GameSummary(
            quarters_survived=self.company.quarter,
            final_score=self.get_current_score(),
            final_budget=self.company.budget,
            final_reputation=self.company.reputation,
            final_performance=self.company.overall_performance,
            strongest_department=self.company.strongest_department.type,
            end_reason=self.game_over_reason or IN_PROGRESS_REASON,
            high_risk_decisions_taken=taken,
            high_risk_successes=successes,
            neglected_departments=self.company.neglected_departments,
            scenarios_completed=len(self.scenario_history),
        )
