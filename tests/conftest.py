"""Pytest configuration and shared fixtures."""

import pytest

from promethee.types import (
    Criterion,
    InteractionEffect,
    PreferenceProblem,
)


def _usual_problem(**overrides) -> PreferenceProblem:
    """Two alternatives on one usual MAX criterion, A=10 and B=6."""
    data = {
        "criteria": [Criterion(id="g1", direction="MAX", weight=1.0, function=1)],
        "alternatives": ["A", "B"],
        "performances": {"A": {"g1": 10.0}, "B": {"g1": 6.0}},
    }
    data.update(overrides)
    return PreferenceProblem(**data)


@pytest.fixture
def usual_problem() -> PreferenceProblem:
    """Provide the two-alternative usual criterion problem."""
    return _usual_problem()


@pytest.fixture
def make_problem():
    """Provide a factory overriding fields of the usual criterion problem."""
    return _usual_problem


@pytest.fixture
def two_criteria_problem() -> PreferenceProblem:
    """Three alternatives on a V-shape MAX and a usual MIN criterion."""
    return PreferenceProblem(
        criteria=[
            Criterion(id="price", direction="MIN", weight=0.4, function=1),
            Criterion(
                id="quality",
                direction="MAX",
                weight=0.6,
                function=3,
                thresholds={"preference": 4.0},
            ),
        ],
        alternatives=["c", "a", "b"],
        performances={
            "a": {"price": 100.0, "quality": 10.0},
            "b": {"price": 80.0, "quality": 7.0},
            "c": {"price": 120.0, "quality": 12.0},
        },
    )


@pytest.fixture
def profiles_problem() -> PreferenceProblem:
    """Two alternatives compared with two boundary profiles."""
    return PreferenceProblem(
        criteria=[
            Criterion(
                id="g1",
                direction="MAX",
                weight=1.0,
                function=3,
                thresholds={"preference": 10.0},
            ),
        ],
        alternatives=["a2", "a1"],
        profiles=["p2", "p1"],
        performances={"a1": {"g1": 15.0}, "a2": {"g1": 35.0}},
        profile_performances={"p1": {"g1": 10.0}, "p2": {"g1": 30.0}},
        comparison_mode="profiles",
    )


@pytest.fixture
def interaction_problem() -> PreferenceProblem:
    """Two criteria with a strengthening effect between them."""
    return PreferenceProblem(
        criteria=[
            Criterion(id="g1", weight=0.5, function=1),
            Criterion(id="g2", weight=0.5, function=1),
        ],
        alternatives=["a", "b"],
        performances={"a": {"g1": 5.0, "g2": 5.0}, "b": {"g1": 1.0, "g2": 1.0}},
        interactions=[
            InteractionEffect(row="g1", column="g2", coefficient=0.2, kind="strengthening"),
        ],
    )


@pytest.fixture(autouse=True)
def reset_config():
    """Reset config singleton after each test."""
    from promethee.config import reset_config
    yield
    reset_config()
