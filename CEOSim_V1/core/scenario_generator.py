"""
Génération de scénarios.

Étapes de `ScenarioGenerator.generate` :
1. pondération des catégories selon l'état de l'entreprise, le palier de
   difficulté et l'événement de marché actif ;
2. tirage pondéré d'une catégorie (tirage cumulatif) ;
3. tirage uniforme d'un template dans le pool de la catégorie
   (repli sur le scénario de maintenance si le pool est vide) ;
4. instanciation du template sur l'entreprise ;
5. mise à l'échelle selon le palier de difficulté du trimestre.
"""

import logging
from typing import Dict, List, Optional

import numpy as np

from CEOSim_V1.data import get_CONSTANTS, get_SCENARIO_TEMPLATES
from CEOSim_V1.data.params import CategoryWeights
from CEOSim_V1.data.scenario_templates import ScenarioTemplate, fallback_scenario
from CEOSim_V1.domain.company import Company
from CEOSim_V1.domain.market import MarketEvent
from CEOSim_V1.domain.scenario import DecisionImpact, Scenario
from CEOSim_V1.domain.types import DifficultyPhase, ScenarioCategory
from CEOSim_V1.utils import make_rng

logger = logging.getLogger(__name__)


def _bump(weights: CategoryWeights, extra: CategoryWeights) -> None:
    for category, value in extra.items():
        weights[category] = weights.get(category, 0.0) + value


def category_weights(
    company: Company, market_event: Optional[MarketEvent] = None
) -> CategoryWeights:
    """
    Poids (non normalisés) de chaque catégorie pour le prochain tirage.

    Toutes les catégories reçoivent un poids de base > 0, aucune n'est
    donc jamais impossible.

    Args:
        company: état courant (budget, réputation, performance, trimestre)
        market_event: événement actif dont les bonus s'ajoutent, ou None

    Returns:
        Dictionnaire {catégorie: poids}
    """
    params = get_CONSTANTS().weights
    weights: CategoryWeights = {}

    if company.budget < params.low_budget_threshold:
        _bump(weights, params.low_budget_bump)
    else:
        _bump(weights, params.healthy_budget_bump)

    if company.reputation < params.low_reputation_threshold:
        _bump(weights, params.low_reputation_bump)

    if company.overall_performance < params.low_performance_threshold:
        _bump(weights, params.low_performance_bump)

    _bump(weights, params.baseline)

    if DifficultyPhase.for_quarter(company.quarter) == DifficultyPhase.ENTERPRISE:
        _bump(weights, params.enterprise_bonus)

    if market_event is not None:
        _bump(weights, market_event.category_weight_adjustments)

    return weights


def select_weighted_category(
    weights: CategoryWeights, rng: np.random.Generator
) -> ScenarioCategory:
    """Tirage cumulatif sur [0, total) ; première catégorie si rien ne matche."""
    categories = list(weights.keys())
    cumulative = np.cumsum([weights[c] for c in categories])
    draw = rng.uniform(0.0, cumulative[-1])
    for category, bound in zip(categories, cumulative):
        if draw < bound:
            return category
    return categories[0]


def _scale_impact(impact: DecisionImpact, phase: DifficultyPhase) -> DecisionImpact:
    return impact.model_copy(
        update={
            "performance_change": impact.performance_change * phase.impact_multiplier,
            "morale_change": impact.morale_change * phase.impact_multiplier,
            "reputation_change": impact.reputation_change * phase.impact_multiplier,
            "budget_change": impact.budget_change * phase.cost_multiplier,
        }
    )


def apply_difficulty_scaling(scenario: Scenario, quarter: int) -> Scenario:
    """
    Met à l'échelle les options d'un scénario neuf selon le palier.

    - coût et `budget_change` : multiplicateur de coût
    - performance / moral / réputation : multiplicateur d'impact
    - variance : inchangée ici (appliquée au moment de la décision)

    Le palier Growth (multiplicateurs à 1.0) retourne le scénario tel quel.
    """
    phase = DifficultyPhase.for_quarter(quarter)
    if phase == DifficultyPhase.GROWTH:
        return scenario

    options = [
        option.model_copy(
            update={
                "cost": option.cost * phase.cost_multiplier,
                "impact": _scale_impact(option.impact, phase),
            }
        )
        for option in scenario.options
    ]
    return scenario.model_copy(update={"options": options})


class ScenarioGenerator:
    """
    Service sans état mutable : le pool de templates est en lecture seule
    après construction, seul le générateur aléatoire avance.
    """

    def __init__(
        self,
        templates: Optional[Dict[ScenarioCategory, List[ScenarioTemplate]]] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.templates = templates if templates is not None else get_SCENARIO_TEMPLATES()
        self.rng = make_rng(rng)

    def generate(
        self, company: Company, market_event: Optional[MarketEvent] = None
    ) -> Scenario:
        weights = category_weights(company, market_event)
        category = select_weighted_category(weights, self.rng)
        logger.debug(
            "Selected category %s (Q%d, weights=%s)",
            category.value,
            company.quarter,
            {c.value: round(w, 3) for c, w in weights.items()},
        )

        pool = self.templates.get(category) or []
        if pool:
            template = pool[int(self.rng.integers(len(pool)))]
        else:
            logger.warning(
                "No template for category %s, using fallback scenario", category.value
            )
            template = fallback_scenario

        scenario = template(company)
        return apply_difficulty_scaling(scenario, company.quarter)
