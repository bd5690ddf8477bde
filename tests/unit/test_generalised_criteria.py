"""Unit tests for the generalised criterion functions."""

import numpy as np
import pytest

from promethee.exceptions import NullThresholdError
from promethee.processing.generalised_criteria import (
    gaussian,
    level,
    preference_degree,
    u_shape,
    usual,
    v_shape,
    v_shape_indifference,
)
from promethee.types import GeneralisedCriterion

THRESHOLDS = {"p": 4.0, "q": 1.0, "s": 2.0}


class TestShapes:
    """Tests for the individual shapes."""

    def test_usual(self):
        assert usual(-1.0) == 0.0
        assert usual(0.0) == 0.0
        assert usual(0.001) == 1.0

    def test_u_shape(self):
        assert u_shape(1.0, q=1.0) == 0.0
        assert u_shape(1.5, q=1.0) == 1.0

    def test_v_shape(self):
        assert v_shape(0.0, p=4.0) == 0.0
        assert v_shape(3.0, p=4.0) == pytest.approx(0.75)
        assert v_shape(5.0, p=4.0) == 1.0

    def test_level(self):
        assert level(1.0, q=1.0, p=4.0) == 0.0
        assert level(2.0, q=1.0, p=4.0) == 0.5
        assert level(4.0, q=1.0, p=4.0) == 0.5
        assert level(4.5, q=1.0, p=4.0) == 1.0

    def test_v_shape_indifference(self):
        assert v_shape_indifference(1.0, q=1.0, p=4.0) == 0.0
        assert v_shape_indifference(2.5, q=1.0, p=4.0) == pytest.approx(0.5)
        assert v_shape_indifference(6.0, q=1.0, p=4.0) == 1.0

    def test_gaussian(self):
        assert gaussian(0.0, s=2.0) == 0.0
        assert gaussian(2.0, s=2.0) == pytest.approx(1 - np.exp(-0.5))

    def test_gaussian_zero_sigma(self):
        assert gaussian(0.0, s=0.0) == 0.0
        assert gaussian(4.0, s=0.0) == 1.0


class TestPreferenceDegree:
    """Tests for dispatch through preference_degree."""

    @pytest.mark.parametrize("function", list(GeneralisedCriterion))
    def test_equal_evaluations_give_zero(self, function):
        assert preference_degree(function, 0.0, **THRESHOLDS) == 0.0

    @pytest.mark.parametrize("function", list(GeneralisedCriterion))
    def test_degrees_within_unit_interval(self, function):
        for d in np.linspace(-10, 10, 81):
            degree = preference_degree(function, float(d), **THRESHOLDS)
            assert 0.0 <= degree <= 1.0

    @pytest.mark.parametrize(
        "function",
        [GeneralisedCriterion.V_SHAPE, GeneralisedCriterion.V_SHAPE_INDIFFERENCE],
    )
    def test_v_shapes_continuous_at_p(self, function):
        at_p = preference_degree(function, 4.0, **THRESHOLDS)
        just_above = preference_degree(function, 4.0 + 1e-9, **THRESHOLDS)
        assert at_p == pytest.approx(1.0)
        assert just_above == pytest.approx(at_p, abs=1e-6)

    def test_level_jumps_at_thresholds(self):
        below_q = preference_degree(GeneralisedCriterion.LEVEL, 1.0, **THRESHOLDS)
        above_q = preference_degree(GeneralisedCriterion.LEVEL, 1.0 + 1e-9, **THRESHOLDS)
        assert above_q - below_q == pytest.approx(0.5)

    def test_unrequired_thresholds_ignored(self):
        assert preference_degree(GeneralisedCriterion.USUAL, 2.0, p=None, q=100.0) == 1.0

    def test_integer_selector(self):
        assert preference_degree(3, 3.0, p=4.0) == pytest.approx(0.75)

    def test_missing_required_threshold(self):
        with pytest.raises(NullThresholdError, match="requires a p threshold"):
            preference_degree(GeneralisedCriterion.V_SHAPE, 1.0, q=1.0)

    def test_gaussian_requires_sigma(self):
        with pytest.raises(NullThresholdError):
            preference_degree(GeneralisedCriterion.GAUSSIAN, 1.0, p=1.0)
