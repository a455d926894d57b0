"""Shared fixtures for the CEOSim test suite."""

import numpy as np
import pytest

from CEOSim_V1.domain.company import Company
from CEOSim_V1.domain.scenario import DecisionImpact, DecisionOption, Scenario
from CEOSim_V1.domain.types import RiskLevel, ScenarioCategory


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so every test is reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def company(rng) -> Company:
    return Company.create(rng)


def make_option(
    perf=0.0,
    morale=0.0,
    budget=0.0,
    rep=0.0,
    cost=0.0,
    target=None,
    risk=RiskLevel.MEDIUM,
    variance=None,
) -> DecisionOption:
    return DecisionOption(
        title="Option",
        description="Test option",
        cost=cost,
        impact=DecisionImpact(
            performance_change=perf,
            morale_change=morale,
            budget_change=budget,
            reputation_change=rep,
            department_specific=target,
        ),
        risk_level=risk,
        impact_variance=variance,
    )


class ScriptedGenerator:
    """Generator stub that always serves the same options."""

    def __init__(self, *options: DecisionOption):
        self.options = list(options) or [make_option(), make_option()]
        self.calls = 0
        self.market_events = []

    def generate(self, company, market_event=None) -> Scenario:
        self.calls += 1
        self.market_events.append(market_event)
        return Scenario(
            category=ScenarioCategory.TECHNICAL,
            title="Scripted",
            description="Scripted scenario",
            options=self.options,
            quarter=company.quarter,
        )
