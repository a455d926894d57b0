"""Tests for neglect decay and the market event lifecycle."""

import numpy as np
import pytest

from CEOSim_V1.core.market import MarketEventLifecycle, apply_neglect_decay
from CEOSim_V1.domain.market import MarketEvent, MarketEventModifier
from CEOSim_V1.domain.types import DepartmentType, ScenarioCategory


def make_event(duration=2, **modifier) -> MarketEvent:
    return MarketEvent(
        name="Test Event",
        description="An event for tests",
        duration=duration,
        modifier=MarketEventModifier(**modifier),
        category_weight_adjustments={ScenarioCategory.HR: 0.2},
        icon="test",
    )


class AlwaysRng:
    """Stands in for a generator whose rolls always succeed."""

    def random(self):
        return 0.0

    def integers(self, high):
        return 0


class NeverRng:
    def random(self):
        return 0.99

    def integers(self, high):
        return 0


class TestNeglectDecay:
    def test_only_neglected_departments_decay(self, company):
        sales = company.department(DepartmentType.SALES)
        sales.quarters_since_last_investment = 2
        before = {d.type: (d.performance, d.morale) for d in company.departments}

        apply_neglect_decay(company)

        for dept in company.departments:
            perf, morale = before[dept.type]
            if dept.type == DepartmentType.SALES:
                assert dept.performance == pytest.approx(perf - 2)
                assert dept.morale == pytest.approx(morale - 3)
            else:
                assert (dept.performance, dept.morale) == (perf, morale)

    def test_overall_performance_updated(self, company):
        for dept in company.departments:
            dept.quarters_since_last_investment = 4
        apply_neglect_decay(company)
        expected = np.mean([d.performance for d in company.departments])
        assert company.overall_performance == pytest.approx(expected)


class TestMarketEventLifecycle:
    def test_starts_idle(self):
        lifecycle = MarketEventLifecycle(events=[make_event()], rng=NeverRng())
        assert lifecycle.active_event is None
        assert lifecycle.select_next() is None
        assert lifecycle.quarters_remaining == 0

    def test_roll_starts_event(self):
        event = make_event(duration=2)
        lifecycle = MarketEventLifecycle(events=[event], rng=AlwaysRng())
        assert lifecycle.select_next() is event
        assert lifecycle.quarters_remaining == 2

    def test_event_expires_before_next_roll(self):
        lifecycle = MarketEventLifecycle(events=[make_event(duration=2)], rng=AlwaysRng())
        lifecycle.select_next()
        lifecycle.select_next()
        assert lifecycle.quarters_remaining == 1
        # expiry quarter: cleared, no new roll in the same boundary
        assert lifecycle.select_next() is None
        assert lifecycle.select_next() is not None

    def test_apply_effects(self, company):
        lifecycle = MarketEventLifecycle(
            events=[
                make_event(
                    budget_drain=-3000,
                    performance_change=-2,
                    morale_change=-3,
                    reputation_change=1,
                )
            ],
            rng=AlwaysRng(),
        )
        lifecycle.select_next()
        perf = {d.type: d.performance for d in company.departments}
        morale = {d.type: d.morale for d in company.departments}

        lifecycle.apply_effects(company)

        assert company.budget == pytest.approx(97_000)
        assert company.reputation == pytest.approx(51)
        for dept in company.departments:
            assert dept.performance == pytest.approx(perf[dept.type] - 2)
            assert dept.morale == pytest.approx(morale[dept.type] - 3)

    def test_apply_effects_clamps_reputation(self, company):
        lifecycle = MarketEventLifecycle(
            events=[make_event(reputation_change=2)], rng=AlwaysRng()
        )
        lifecycle.select_next()
        company.reputation = 99.5
        lifecycle.apply_effects(company)
        assert company.reputation == 100

    def test_apply_effects_without_event_is_noop(self, company):
        lifecycle = MarketEventLifecycle(events=[], rng=AlwaysRng())
        lifecycle.apply_effects(company)
        assert company.budget == 100_000

    def test_reset(self):
        lifecycle = MarketEventLifecycle(events=[make_event()], rng=AlwaysRng())
        lifecycle.select_next()
        lifecycle.reset()
        assert lifecycle.active_event is None
        assert lifecycle.quarters_remaining == 0

    def test_default_pool_roll_rate(self):
        lifecycle = MarketEventLifecycle(rng=np.random.default_rng(11))
        started = 0
        for _ in range(500):
            lifecycle.reset()
            if lifecycle.select_next() is not None:
                started += 1
        assert 150 < started < 250
