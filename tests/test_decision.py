"""Tests for decision application and impact variance."""

import numpy as np
import pytest

from CEOSim_V1.core.decision import (
    CompanySnapshot,
    apply_decision,
    apply_variance,
    effective_variance,
    vary,
)
from CEOSim_V1.domain.scenario import DecisionImpact
from CEOSim_V1.domain.types import DepartmentType, RiskLevel
from tests.conftest import make_option


class TestVariance:
    def test_zero_fields_stay_zero(self):
        impact = DecisionImpact(performance_change=10)
        for seed in range(100):
            varied = apply_variance(impact, 0.5, np.random.default_rng(seed))
            assert varied.morale_change == 0
            assert varied.budget_change == 0
            assert varied.reputation_change == 0

    def test_nonzero_fields_stay_in_band(self):
        rng = np.random.default_rng(0)
        for _ in range(200):
            value = vary(10.0, 0.4, rng)
            assert 6.0 <= value <= 14.0

    def test_no_variance_is_identity(self, rng):
        assert vary(-7.5, 0.0, rng) == -7.5

    def test_target_is_preserved(self, rng):
        impact = DecisionImpact(morale_change=5, department_specific=DepartmentType.HR)
        assert apply_variance(impact, 0.3, rng).department_specific == DepartmentType.HR

    @pytest.mark.parametrize(
        "quarter, expected", [(2, 0.22 * 0.7), (6, 0.22), (11, 0.22 * 1.3)]
    )
    def test_effective_variance_scales_with_phase(self, quarter, expected):
        option = make_option(risk=RiskLevel.MEDIUM)
        assert effective_variance(option, quarter) == pytest.approx(expected)


class TestApplyDecision:
    def test_neutral_option_changes_nothing(self, company, rng):
        before = CompanySnapshot.of(company)
        morale = [d.morale for d in company.departments]
        _, actual = apply_decision(company, make_option(), rng)
        assert actual.is_neutral
        assert CompanySnapshot.of(company) == before
        assert [d.morale for d in company.departments] == morale

    def test_untargeted_impact_fans_out(self, company, rng):
        perf_before = {d.type: d.performance for d in company.departments}
        budget_before = {d.type: d.budget for d in company.departments}
        _, actual = apply_decision(
            company, make_option(perf=5, budget=-1000, variance=0.0), rng
        )
        assert actual.performance_change == 5
        for dept in company.departments:
            assert dept.performance == pytest.approx(perf_before[dept.type] + 5)
            assert dept.budget == pytest.approx(budget_before[dept.type] - 1000)
        assert company.budget == pytest.approx(99_000)

    def test_targeted_impact_hits_one_department(self, company, rng):
        before = {d.type: d.performance for d in company.departments}
        apply_decision(
            company,
            make_option(perf=8, target=DepartmentType.ENGINEERING, variance=0.0),
            rng,
        )
        for dept in company.departments:
            delta = 8 if dept.type == DepartmentType.ENGINEERING else 0
            assert dept.performance == pytest.approx(before[dept.type] + delta)

    def test_overall_performance_recomputed(self, company, rng):
        apply_decision(company, make_option(perf=-12, risk=RiskLevel.HIGH), rng)
        expected = np.mean([d.performance for d in company.departments])
        assert company.overall_performance == pytest.approx(expected)

    def test_metrics_stay_in_bounds(self, company, rng):
        for _ in range(30):
            apply_decision(company, make_option(perf=40, morale=-40, rep=30), rng)
            assert 0 <= company.reputation <= 100
            for dept in company.departments:
                assert 0 <= dept.performance <= 100
                assert 0 <= dept.morale <= 100

    def test_budget_is_unclamped(self, company, rng):
        apply_decision(company, make_option(budget=-250_000, variance=0.0), rng)
        assert company.budget == pytest.approx(-150_000)

    def test_investment_resets_counter(self, company, rng):
        for dept in company.departments:
            dept.quarters_since_last_investment = 3
        apply_decision(
            company, make_option(morale=2, target=DepartmentType.SALES), rng
        )
        sales = company.department(DepartmentType.SALES)
        assert sales.quarters_since_last_investment == 0
        others = [d for d in company.departments if d is not sales]
        assert all(d.quarters_since_last_investment == 3 for d in others)

    def test_penalty_does_not_reset_counter(self, company, rng):
        for dept in company.departments:
            dept.quarters_since_last_investment = 2
        apply_decision(company, make_option(perf=-3, morale=-3), rng)
        assert all(d.quarters_since_last_investment == 2 for d in company.departments)
