"""
Cycle de vie des événements de marché et négligence des départements,
exécutés à chaque frontière de trimestre.
"""

import logging
from typing import List, Optional

import numpy as np

from CEOSim_V1.data import get_CONSTANTS, get_MARKET_EVENTS
from CEOSim_V1.domain.company import Company
from CEOSim_V1.domain.market import MarketEvent
from CEOSim_V1.utils import make_rng

logger = logging.getLogger(__name__)


def apply_neglect_decay(company: Company) -> None:
    """Pénalité de négligence sur chaque département, puis recalcul des métriques."""
    for department in company.departments:
        department.apply_neglect_decay()
    company.update_metrics()


class MarketEventLifecycle:
    """
    Au plus un événement actif à la fois.

    Un nouvel événement n'est tiré qu'une fois le précédent complètement
    expiré : le trimestre où l'événement expire, aucun tirage n'a lieu.
    """

    def __init__(
        self,
        events: Optional[List[MarketEvent]] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.events = events if events is not None else get_MARKET_EVENTS()
        self.rng = make_rng(rng)
        self.active_event: Optional[MarketEvent] = None
        self.quarters_remaining: int = 0

    def reset(self) -> None:
        self.active_event = None
        self.quarters_remaining = 0

    def apply_effects(self, company: Company) -> None:
        """Applique une fois le modificateur de l'événement actif (no-op sinon)."""
        if self.active_event is None:
            return
        modifier = self.active_event.modifier

        company.budget += modifier.budget_drain
        company.adjust_reputation(modifier.reputation_change)
        for department in company.departments:
            department.apply_metric_delta(
                modifier.performance_change, modifier.morale_change
            )
        company.update_metrics()

    def select_next(self) -> Optional[MarketEvent]:
        """Fait vieillir l'événement actif, ou tente d'en démarrer un nouveau."""
        if self.active_event is not None:
            self.quarters_remaining -= 1
            if self.quarters_remaining <= 0:
                logger.info("Market event expired: %s", self.active_event.name)
                self.reset()
            return self.active_event

        if self.events and self.rng.random() < get_CONSTANTS().market.event_chance:
            event = self.events[int(self.rng.integers(len(self.events)))]
            self.active_event = event
            self.quarters_remaining = event.duration
            logger.info(
                "Market event started: %s (%d quarter(s))", event.name, event.duration
            )
        return self.active_event
