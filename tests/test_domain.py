"""Tests for the domain objects: departments, company, scenarios, events."""

import numpy as np
import pytest
from pydantic import ValidationError

from CEOSim_V1.data import get_MARKET_EVENTS
from CEOSim_V1.domain.company import Company
from CEOSim_V1.domain.department import Department
from CEOSim_V1.domain.market import MarketEvent, MarketEventModifier
from CEOSim_V1.domain.scenario import (
    DecisionImpact,
    ImpactDirection,
    Scenario,
    hints_from_impact,
)
from CEOSim_V1.domain.summary import GameSummary
from CEOSim_V1.domain.types import DepartmentType, RiskLevel, ScenarioCategory
from tests.conftest import make_option


class TestDepartment:
    def test_create_draws_in_initial_range(self, rng):
        for _ in range(50):
            dept = Department.create(DepartmentType.SALES, rng)
            assert 40 <= dept.performance <= 60
            assert 40 <= dept.morale <= 60
            assert dept.budget == 20_000

    def test_type_is_immutable(self, rng):
        dept = Department.create(DepartmentType.SALES, rng)
        with pytest.raises(ValidationError):
            dept.type = DepartmentType.HR

    @pytest.mark.parametrize("counter", [0, 1, 2, 3, 5])
    def test_is_neglected_threshold(self, counter):
        dept = Department(
            type=DepartmentType.HR,
            performance=50,
            morale=50,
            quarters_since_last_investment=counter,
        )
        assert dept.is_neglected == (counter >= 2)

    def test_metric_delta_is_clamped(self):
        dept = Department(type=DepartmentType.HR, performance=95, morale=3)
        dept.apply_metric_delta(performance=20, morale=-10)
        assert dept.performance == 100
        assert dept.morale == 0

    def test_positive_impact_resets_counter(self):
        dept = Department(
            type=DepartmentType.FINANCE,
            performance=50,
            morale=50,
            quarters_since_last_investment=3,
        )
        dept.apply_decision_impact(DecisionImpact(budget_change=100))
        assert dept.quarters_since_last_investment == 0
        assert dept.budget == 20_100

    def test_negative_impact_keeps_counter(self):
        dept = Department(
            type=DepartmentType.FINANCE,
            performance=50,
            morale=50,
            quarters_since_last_investment=3,
        )
        dept.apply_decision_impact(DecisionImpact(performance_change=-4))
        assert dept.quarters_since_last_investment == 3

    def test_neglect_decay_scales_with_excess(self):
        dept = Department(
            type=DepartmentType.SALES,
            performance=50,
            morale=50,
            quarters_since_last_investment=3,
        )
        dept.apply_neglect_decay()
        # excess = 3 - 2 + 1 = 2
        assert dept.performance == pytest.approx(46)
        assert dept.morale == pytest.approx(44)

    def test_neglect_decay_noop_when_not_neglected(self):
        dept = Department(
            type=DepartmentType.SALES,
            performance=50,
            morale=50,
            quarters_since_last_investment=1,
        )
        dept.apply_neglect_decay()
        assert (dept.performance, dept.morale) == (50, 50)

    def test_neglect_decay_floors_at_zero(self):
        dept = Department(
            type=DepartmentType.SALES,
            performance=1,
            morale=2,
            quarters_since_last_investment=6,
        )
        dept.apply_neglect_decay()
        assert dept.performance == 0
        assert dept.morale == 0

    def test_quarterly_report(self):
        dept = Department(type=DepartmentType.HR, performance=61.7, morale=48.2)
        report = dept.generate_quarterly_report()
        assert report == "Human Resources Q1: Performance 61%, Morale 48%"
        assert dept.quarters_since_last_investment == 1
        assert dept.quarterly_reports == [report]


class TestCompany:
    def test_fresh_company(self, company):
        assert company.budget == 100_000
        assert company.reputation == 50
        assert company.quarter == 1
        assert {d.type for d in company.departments} == set(DepartmentType)

    def test_overall_performance_is_mean(self, company):
        expected = np.mean([d.performance for d in company.departments])
        assert company.overall_performance == pytest.approx(expected)

    def test_rejects_duplicate_departments(self):
        departments = [
            Department(type=DepartmentType.SALES, performance=50, morale=50)
            for _ in range(5)
        ]
        with pytest.raises(ValidationError):
            Company(departments=departments)

    def test_reputation_is_clamped(self, company):
        company.adjust_reputation(500)
        assert company.reputation == 100
        company.adjust_reputation(-500)
        assert company.reputation == 0

    def test_advance_quarter(self, company):
        reports = company.advance_quarter()
        assert company.quarter == 2
        assert len(reports) == 5
        assert all(d.quarters_since_last_investment == 1 for d in company.departments)

    def test_strongest_and_weakest(self, company):
        company.department(DepartmentType.ENGINEERING).performance = 99
        company.department(DepartmentType.HR).performance = 1
        assert company.strongest_department.type == DepartmentType.ENGINEERING
        assert company.weakest_department.type == DepartmentType.HR


class TestScenarioModels:
    def test_variance_defaults_from_risk(self):
        assert make_option(risk=RiskLevel.LOW).impact_variance == pytest.approx(0.08)
        assert make_option(risk=RiskLevel.HIGH).impact_variance == pytest.approx(0.40)

    def test_explicit_variance_kept(self):
        assert make_option(risk=RiskLevel.HIGH, variance=0.1).impact_variance == 0.1

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            make_option(cost=-1)

    @pytest.mark.parametrize("count", [1, 5])
    def test_option_count_bounds(self, count):
        with pytest.raises(ValidationError):
            Scenario(
                category=ScenarioCategory.HR,
                title="t",
                description="d",
                options=[make_option() for _ in range(count)],
                quarter=1,
            )

    def test_equality_is_identity_based(self):
        kwargs = dict(
            category=ScenarioCategory.HR,
            title="t",
            description="d",
            options=[make_option(), make_option()],
            quarter=1,
        )
        a, b = Scenario(**kwargs), Scenario(**kwargs)
        assert a != b
        assert a == a
        assert len({a, b}) == 2

    def test_neutral_impact(self):
        assert DecisionImpact().is_neutral
        assert not DecisionImpact(morale_change=1).is_neutral


class TestImpactHints:
    def test_zero_fields_have_no_hint(self):
        assert hints_from_impact(DecisionImpact(budget_change=-5000)) == []

    def test_directions(self):
        hints = hints_from_impact(
            DecisionImpact(performance_change=3, reputation_change=-2)
        )
        assert [(h.metric, h.direction) for h in hints] == [
            ("Performance", ImpactDirection.POSITIVE),
            ("Reputation", ImpactDirection.NEGATIVE),
        ]
        assert hints[1].description == "May damage reputation"


class TestMarketEvents:
    def test_pool_loaded(self):
        events = get_MARKET_EVENTS()
        assert len(events) == 10
        assert all(1 <= e.duration <= 2 for e in events)
        assert len({e.name for e in events}) == 10

    def test_duration_out_of_bounds_rejected(self):
        with pytest.raises(ValidationError):
            MarketEvent(
                name="Too long",
                description="d",
                duration=3,
                modifier=MarketEventModifier(),
                icon="x",
            )


class TestGameSummary:
    def _summary(self, **overrides):
        values = dict(
            quarters_survived=8,
            final_score=650,
            final_budget=30_000,
            final_reputation=40,
            final_performance=55,
            strongest_department=DepartmentType.SALES,
        )
        values.update(overrides)
        return GameSummary(**values)

    def test_successful_run(self):
        assert self._summary().is_successful_run
        assert not self._summary(final_budget=25_000).is_successful_run
        assert not self._summary(quarters_survived=7).is_successful_run

    @pytest.mark.parametrize(
        "score, grade",
        [(900, "A+"), (800, "A+"), (799, "A"), (650, "B+"), (500, "B"), (450, "C+"),
         (300, "C"), (250, "D"), (199, "F")],
    )
    def test_grades(self, score, grade):
        assert self._summary(final_score=score).performance_grade == grade

    def test_messages(self):
        assert self._summary().summary_message.startswith("Congratulations!")
        assert self._summary(
            quarters_survived=5, final_budget=0
        ).summary_message.startswith("Good effort!")
        assert self._summary(quarters_survived=2).summary_message.startswith(
            "Every great CEO"
        )

    def test_default_end_reason(self):
        assert self._summary().end_reason == "Game in progress"
