"""Unit tests for reinforced preference aggregation."""

import pytest

from promethee.processing.partial_preferences import build_partial_preferences
from promethee.processing.reinforcement import (
    ReinforcedPreferenceAggregator,
    reinforced_criteria,
)
from promethee.types import Criterion, PreferenceProblem


@pytest.fixture
def reinforced_problem() -> PreferenceProblem:
    """V-shape criterion with reinforcement beyond a gap of 6."""
    return PreferenceProblem(
        criteria=[
            Criterion(
                id="g1",
                weight=0.5,
                function=3,
                thresholds={"preference": 4.0, "reinforced_preference": 6.0},
                reinforcement_factor=3.0,
            ),
            Criterion(
                id="g2",
                weight=0.5,
                function=3,
                thresholds={"preference": 4.0, "reinforced_preference": 6.0},
                reinforcement_factor=2.0,
            ),
        ],
        alternatives=["a", "b", "c"],
        performances={
            "a": {"g1": 10.0, "g2": 0.0},
            "b": {"g1": 2.0, "g2": 2.0},
            "c": {"g1": 8.0, "g2": 1.0},
        },
        operating_mode="reinforced_preference",
    )


class TestReinforcedCriteria:
    """Tests for detecting reinforced criteria."""

    def test_gap_beyond_threshold(self, reinforced_problem):
        assert reinforced_criteria(reinforced_problem, "a", "b") == ["g1"]

    def test_gap_equal_to_threshold_not_reinforced(self, reinforced_problem):
        # g1: 8 - 2 = 6
        assert reinforced_criteria(reinforced_problem, "c", "b") == []

    def test_reverse_direction(self, reinforced_problem):
        assert reinforced_criteria(reinforced_problem, "b", "a") == []


class TestReinforcedAggregation:
    """Tests for ReinforcedPreferenceAggregator."""

    def test_reinforced_weight_amplified(self, reinforced_problem):
        partials = build_partial_preferences(reinforced_problem)
        preferences = ReinforcedPreferenceAggregator(reinforced_problem).aggregate(partials)

        # a over b: g1 reinforced (0.5 * 3), g2 degree 0
        assert preferences[("a", "b")] == pytest.approx(1.5 / 2.0)

    def test_without_reinforcement_matches_weighted_sum(self, reinforced_problem):
        partials = build_partial_preferences(reinforced_problem)
        preferences = ReinforcedPreferenceAggregator(reinforced_problem).aggregate(partials)

        # c over b: g1 d=6 -> 1.0, g2 d=-1 -> 0
        assert preferences[("c", "b")] == pytest.approx(0.5)

    def test_values_bounded(self, reinforced_problem):
        partials = build_partial_preferences(reinforced_problem)
        preferences = ReinforcedPreferenceAggregator(reinforced_problem).aggregate(partials)

        assert all(0.0 <= value <= 1.0 for value in preferences.values())
        assert preferences[("a", "a")] == 0.0
