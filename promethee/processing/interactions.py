"""Interaction-aware aggregation of partial preferences into total preferences.

Strengthening and weakening effects add ``Z(P_i(a, b), P_j(a, b)) * coefficient``
to both numerator and denominator; antagonistic effects subtract
``Z(P_i(a, b), P_j(b, a)) * coefficient`` from both.
"""

from promethee.exceptions import (
    ComputationError,
    InvalidCombinationFunctionError,
    PositiveNetBalanceError,
)
from promethee.processing.partial_preferences import comparison_pairs
from promethee.types import (
    CombinationFunction,
    InteractionKind,
    PartialPreferenceMatrix,
    PreferenceMatrix,
    PreferenceProblem,
)
from promethee.utils.logging import get_logger

logger = get_logger(__name__)


def combine(function: CombinationFunction, x: float, y: float) -> float:
    """Z function fusing two partial preferences.

    Raises:
        InvalidCombinationFunctionError: If function is not multiplication or minimum
    """
    if function == CombinationFunction.MULTIPLICATION:
        return x * y
    if function == CombinationFunction.MINIMUM:
        return min(x, y)
    raise InvalidCombinationFunctionError(function)


def check_net_balance(problem: PreferenceProblem) -> None:
    """Reject interaction coefficients that outweigh a criterion's own weight.

    For every criterion touched by a weakening effect (either end) or an
    antagonistic effect (as row), its weight minus the sum of absolute
    coefficients must stay positive. Strengthening effects are not bounded.

    Raises:
        PositiveNetBalanceError: Naming the first infeasible criterion
    """
    exposure: dict[str, float] = {}
    weakening = problem.interaction_table(InteractionKind.WEAKENING)
    for (row, _), coefficient in weakening.items():
        exposure[row] = exposure.get(row, 0.0) + abs(coefficient)
    for (_, column), coefficient in weakening.items():
        exposure[column] = exposure.get(column, 0.0) + abs(coefficient)
    for (row, _), coefficient in problem.interaction_table(InteractionKind.ANTAGONISTIC).items():
        exposure[row] = exposure.get(row, 0.0) + abs(coefficient)

    for criterion_id, total in exposure.items():
        weight = problem.criterion(criterion_id).weight
        if weight - total <= 0:
            raise PositiveNetBalanceError(criterion_id, weight, total)


def interaction_terms(
    problem: PreferenceProblem,
    partials: PartialPreferenceMatrix,
    a: str,
    b: str,
) -> tuple[float, float]:
    """Interaction sums for the pair (a, b).

    Returns:
        (strengthening + weakening sum, antagonistic sum)
    """
    function = problem.combination_function
    interactions_sum = 0.0
    for kind in (InteractionKind.STRENGTHENING, InteractionKind.WEAKENING):
        for (i, j), coefficient in problem.interaction_table(kind).items():
            interactions_sum += combine(
                function, partials[(a, b, i)], partials[(a, b, j)]
            ) * coefficient

    antagonistic_sum = 0.0
    for (i, j), coefficient in problem.interaction_table(InteractionKind.ANTAGONISTIC).items():
        antagonistic_sum += combine(
            function, partials[(a, b, i)], partials[(b, a, j)]
        ) * coefficient

    return interactions_sum, antagonistic_sum


def total_preference(
    problem: PreferenceProblem,
    partials: PartialPreferenceMatrix,
    a: str,
    b: str,
) -> float:
    """Total preference index of a over b.

    The result is not clamped to [0, 1]; strong antagonistic effects can push
    it outside that range.
    """
    preference = 0.0
    for criterion in problem.criteria:
        preference += partials[(a, b, criterion.id)] * criterion.weight

    interactions_sum, antagonistic_sum = interaction_terms(problem, partials, a, b)
    capacity = problem.total_weight() + interactions_sum - antagonistic_sum
    if capacity == 0:
        raise ComputationError(
            "Net concordance capacity is zero", {"pair": (a, b)}
        )
    return (preference + interactions_sum - antagonistic_sum) / capacity


class InteractionAggregator:
    """Aggregates partial preferences with criterion interactions (normal mode)."""

    def __init__(self, problem: PreferenceProblem):
        self.problem = problem

    def aggregate(self, partials: PartialPreferenceMatrix) -> PreferenceMatrix:
        """Compute the total preference matrix.

        Args:
            partials: Partial preferences covering every compared pair

        Returns:
            Total preference per ordered pair

        Raises:
            PositiveNetBalanceError: Before any pair is computed, if infeasible
        """
        check_net_balance(self.problem)
        values = {
            (a, b): total_preference(self.problem, partials, a, b)
            for a, b in comparison_pairs(self.problem)
        }
        logger.info(
            "Total preferences aggregated",
            pairs=len(values),
            interactions=len(self.problem.interactions),
            combination_function=self.problem.combination_function.value,
        )
        return PreferenceMatrix(values)
