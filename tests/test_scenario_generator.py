"""Tests for the template catalog and the scenario generator."""

import numpy as np
import pytest

from CEOSim_V1.core.scenario_generator import (
    ScenarioGenerator,
    apply_difficulty_scaling,
    category_weights,
    select_weighted_category,
)
from CEOSim_V1.data import get_MARKET_EVENTS, get_SCENARIO_TEMPLATES
from CEOSim_V1.data.scenario_templates import fallback_scenario
from CEOSim_V1.domain.types import ScenarioCategory


@pytest.fixture
def generator(rng) -> ScenarioGenerator:
    return ScenarioGenerator(rng=rng)


class TestTemplateCatalog:
    def test_every_category_has_templates(self):
        templates = get_SCENARIO_TEMPLATES()
        assert set(templates) == set(ScenarioCategory)
        assert all(templates[c] for c in ScenarioCategory)
        assert sum(len(pool) for pool in templates.values()) >= 30

    @pytest.mark.parametrize("budget", [100_000, 20_000, -5_000])
    def test_templates_are_well_formed(self, company, budget):
        company.budget = budget
        for category, pool in get_SCENARIO_TEMPLATES().items():
            for template in pool:
                scenario = template(company)
                assert scenario.category == category
                assert 2 <= len(scenario.options) <= 4
                assert scenario.quarter == company.quarter
                for option in scenario.options:
                    assert option.cost >= 0
                    assert option.title and option.description

    def test_fallback_scenario(self, company):
        scenario = fallback_scenario(company)
        assert scenario.title == "System Maintenance"
        assert [o.cost for o in scenario.options] == [5000, 2000, 0]


class TestCategoryWeights:
    def test_all_categories_weighted(self, company):
        weights = category_weights(company)
        assert set(weights) == set(ScenarioCategory)
        assert all(w > 0 for w in weights.values())

    def test_healthy_company_favours_opportunity(self, company):
        weights = category_weights(company)
        assert weights[ScenarioCategory.OPPORTUNITY] == pytest.approx(0.4)
        assert weights[ScenarioCategory.BUDGET] == pytest.approx(0.1)

    def test_struggling_company(self, company):
        company.budget = 10_000
        company.reputation = 20
        for dept in company.departments:
            dept.performance = 30
        company.update_metrics()
        weights = category_weights(company)
        assert weights[ScenarioCategory.BUDGET] == pytest.approx(0.5)
        assert weights[ScenarioCategory.OPPORTUNITY] == pytest.approx(0.1)
        assert weights[ScenarioCategory.MARKETING] == pytest.approx(0.4)
        assert weights[ScenarioCategory.TECHNICAL] == pytest.approx(0.5)
        assert weights[ScenarioCategory.HR] == pytest.approx(0.3)

    def test_enterprise_bonus(self, company):
        company.quarter = 9
        weights = category_weights(company)
        assert weights[ScenarioCategory.COMPETITIVE] == pytest.approx(0.2)
        assert weights[ScenarioCategory.INNOVATION] == pytest.approx(0.15)
        assert weights[ScenarioCategory.REGULATORY] == pytest.approx(0.15)

    def test_market_event_boosts(self, company):
        recession = next(
            e for e in get_MARKET_EVENTS() if e.name == "Economic Recession"
        )
        base = category_weights(company)
        boosted = category_weights(company, recession)
        assert boosted[ScenarioCategory.BUDGET] == pytest.approx(
            base[ScenarioCategory.BUDGET] + 0.3
        )

    def test_weighted_selection_follows_weights(self):
        rng = np.random.default_rng(7)
        weights = {ScenarioCategory.HR: 1.0, ScenarioCategory.ETHICAL: 0.0}
        picks = {select_weighted_category(weights, rng) for _ in range(100)}
        assert picks == {ScenarioCategory.HR}


class TestDifficultyScaling:
    def test_growth_is_untouched(self, company):
        scenario = fallback_scenario(company)
        assert apply_difficulty_scaling(scenario, 6) is scenario

    def test_startup_scaling(self, company):
        scenario = apply_difficulty_scaling(fallback_scenario(company), 1)
        full = scenario.options[0]
        assert full.cost == pytest.approx(3000)
        assert full.impact.budget_change == pytest.approx(-3000)
        assert full.impact.performance_change == pytest.approx(7)
        assert full.impact_variance == pytest.approx(0.08)

    def test_enterprise_scaling(self, company):
        scenario = apply_difficulty_scaling(fallback_scenario(company), 10)
        delay = scenario.options[2]
        assert delay.cost == 0
        assert delay.impact.performance_change == pytest.approx(-7)
        assert delay.impact.morale_change == 0


class TestGenerate:
    def test_generated_scenarios_are_valid(self, generator, company):
        for _ in range(50):
            scenario = generator.generate(company)
            assert 2 <= len(scenario.options) <= 4
            assert all(o.cost >= 0 for o in scenario.options)

    def test_200_scenarios_cover_many_categories(self, generator, company):
        categories = {generator.generate(company).category for _ in range(200)}
        assert len(categories) >= 5

    def test_empty_pool_falls_back(self, company, caplog):
        generator = ScenarioGenerator(templates={}, rng=np.random.default_rng(3))
        with caplog.at_level("WARNING"):
            scenario = generator.generate(company)
        assert scenario.title == "System Maintenance"
        assert "fallback" in caplog.text

    def test_scenario_uses_company_quarter(self, generator, company):
        company.quarter = 7
        assert generator.generate(company).quarter == 7
