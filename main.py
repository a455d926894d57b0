import logging

import numpy as np

from CEOSim_V1.core.game import GameController
from CEOSim_V1.domain.types import GameState


def choose_option(scenario) -> int:
    # politique naïve : l'option au meilleur rapport (perf + réputation) / coût
    def value(option):
        impact = option.impact
        gain = impact.performance_change + impact.reputation_change
        return gain / (1.0 + option.cost / 10_000)

    return max(range(len(scenario.options)), key=lambda i: value(scenario.options[i]))


def run(seed: int = 42):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    game = GameController(rng=np.random.default_rng(seed))
    game.start_new_game()

    while game.state == GameState.ACTIVE and game.current_scenario is not None:
        scenario = game.current_scenario
        index = choose_option(scenario)
        print(
            f"Q{game.company.quarter} [{scenario.category.label}] {scenario.title} "
            f"-> {scenario.options[index].title}"
        )
        game.make_decision(index)

    summary = game.get_game_summary()
    analysis = game.get_performance_analysis()
    print()
    print(f"Fin de partie : {summary.end_reason}")
    print(f"Trimestres : {summary.quarters_survived}  Score : {summary.final_score}")
    print(f"Note : {summary.performance_grade}  Style : {analysis.leadership_style.value}")
    print(f"Points forts : {', '.join(analysis.key_strengths)}")
    print(f"À améliorer : {', '.join(analysis.areas_for_improvement)}")
    print(summary.summary_message)


if __name__ == "__main__":
    run()
