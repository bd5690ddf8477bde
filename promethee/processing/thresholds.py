"""Signed evaluation differences and threshold resolution for an ordered pair."""

from typing import Optional

from promethee.exceptions import InvalidDirectionError
from promethee.types import PreferenceDirection, Threshold


def evaluation_difference(direction: PreferenceDirection, ga: float, gb: float) -> float:
    """Advantage of the favored evaluation ``ga`` over ``gb``.

    Args:
        direction: MAX if higher values are better, MIN otherwise
        ga: Evaluation of the entity being favored
        gb: Evaluation of the entity it is compared against

    Returns:
        ``ga - gb`` for MAX, ``gb - ga`` for MIN

    Raises:
        InvalidDirectionError: If direction is neither MAX nor MIN
    """
    if direction == PreferenceDirection.MAX:
        return ga - gb
    if direction == PreferenceDirection.MIN:
        return gb - ga
    raise InvalidDirectionError(direction)


def base_evaluation(direction: PreferenceDirection, ga: float, gb: float) -> float:
    """Worse of the two evaluations under the direction."""
    if direction == PreferenceDirection.MAX:
        return min(ga, gb)
    if direction == PreferenceDirection.MIN:
        return max(ga, gb)
    raise InvalidDirectionError(direction)


def resolve_threshold(
    direction: PreferenceDirection,
    ga: float,
    gb: float,
    threshold: Optional[Threshold],
) -> Optional[float]:
    """Resolve a threshold to a scalar for the pair (ga, gb).

    Args:
        direction: Preference direction of the criterion
        ga: Evaluation of the entity being favored
        gb: Evaluation of the entity it is compared against
        threshold: Constant or linear threshold, or None when absent

    Returns:
        The constant, ``slope * base + intercept`` for linear thresholds,
        or None if the threshold does not apply

    Raises:
        InvalidDirectionError: If a linear threshold meets an unknown direction
    """
    if threshold is None:
        return None
    if threshold.is_constant:
        return threshold.constant
    return threshold.slope * base_evaluation(direction, ga, gb) + threshold.intercept
