"""Integration tests for the complete preference pipeline."""

from pathlib import Path

import pytest

from promethee.core.preference_pipeline import PreferencePipeline
from promethee.exceptions import NullThresholdError, PositiveNetBalanceError
from promethee.io.problem_loader import ProblemLoader
from promethee.types import Criterion, InteractionEffect

SAMPLE = Path(__file__).resolve().parents[2] / "problems" / "sample_interactions.yaml"


class TestPreferencePipeline:
    """End-to-end runs of PreferencePipeline."""

    def test_usual_scenario(self, usual_problem):
        results = PreferencePipeline(compute_discordance=False).run(usual_problem)

        assert dict(results.partial_preferences) == {
            ("A", "A", "g1"): 0.0,
            ("A", "B", "g1"): 1.0,
            ("B", "A", "g1"): 0.0,
            ("B", "B", "g1"): 0.0,
        }
        assert dict(results.preferences) == {
            ("A", "A"): 0.0,
            ("A", "B"): 1.0,
            ("B", "A"): 0.0,
            ("B", "B"): 0.0,
        }
        assert not results.has_discordance

    def test_v_shape_scenario(self, make_problem):
        problem = make_problem(
            criteria=[Criterion(id="g1", weight=1.0, function=3, thresholds={"preference": 4.0})],
            performances={"A": {"g1": 10.0}, "B": {"g1": 7.0}},
        )

        results = PreferencePipeline(compute_discordance=False).run(problem)

        assert results.partial_preferences[("A", "B", "g1")] == pytest.approx(0.75)

    def test_idempotent(self, two_criteria_problem):
        pipeline = PreferencePipeline(compute_discordance=True)

        first = pipeline.run(two_criteria_problem)
        second = pipeline.run(two_criteria_problem)

        assert list(first.preferences.items()) == list(second.preferences.items())
        assert list(first.partial_preferences.items()) == list(second.partial_preferences.items())
        assert list(first.discordances.items()) == list(second.discordances.items())

    def test_profiles_mode(self, profiles_problem):
        results = PreferencePipeline(compute_discordance=True).run(profiles_problem)

        assert len(results.preferences) == 12
        assert results.preferences[("a2", "p1")] == pytest.approx(1.0)
        assert results.preferences_with_discordance[("a1", "p1")] == pytest.approx(0.5)

    def test_net_balance_failure_produces_no_results(self, make_problem):
        problem = make_problem(
            criteria=[
                Criterion(id="g1", weight=1.0, function=1),
                Criterion(id="g2", weight=2.0, function=1),
            ],
            performances={"A": {"g1": 1.0, "g2": 1.0}, "B": {"g1": 0.0, "g2": 0.0}},
            interactions=[
                InteractionEffect(row="g1", column="g2", coefficient=1.2, kind="weakening"),
            ],
        )

        with pytest.raises(PositiveNetBalanceError, match="g1"):
            PreferencePipeline(compute_discordance=False).run(problem)

    def test_gaussian_zero_sigma(self, make_problem):
        problem = make_problem(
            criteria=[Criterion(id="g1", weight=1.0, function=6, thresholds={"sigma": 0.0})]
        )

        results = PreferencePipeline(compute_discordance=False).run(problem)

        assert results.preferences[("A", "B")] == 1.0
        assert results.preferences[("B", "A")] == 0.0

    def test_missing_threshold_fails_before_computation(self, make_problem):
        problem = make_problem(criteria=[Criterion(id="g1", weight=1.0, function=4)])

        with pytest.raises(NullThresholdError):
            PreferencePipeline(compute_discordance=False).run(problem)

    def test_sample_problem(self):
        problem = ProblemLoader().load(SAMPLE)

        results = PreferencePipeline(compute_discordance=True).run(problem)

        assert len(results.preferences) == 9
        for a in problem.alternatives:
            assert results.preferences[(a, a)] == 0.0
        # supplier_c is cheapest: full cost advantage over supplier_b (gap 50 > p)
        assert results.partial_preferences[("supplier_c", "supplier_b", "cost")] == 1.0
        for value in results.preferences_with_discordance.values():
            assert value <= 1.0

    def test_discordance_from_configuration(self, usual_problem, monkeypatch, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("engine:\n  compute_discordance: true\n")
        monkeypatch.setenv("PROMETHEE_CONFIG_PATH", str(config_file))

        results = PreferencePipeline().run(usual_problem)

        assert results.has_discordance
        assert results.preferences_with_discordance[("A", "B")] == pytest.approx(1.0)
