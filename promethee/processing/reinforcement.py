"""Reinforced preference aggregation.

A criterion whose evaluation difference exceeds its reinforced preference
threshold counts as a full preference with its weight multiplied by the
criterion's reinforcement factor, in both numerator and denominator.
"""

from promethee.exceptions import ComputationError
from promethee.processing.interactions import check_net_balance, interaction_terms
from promethee.processing.partial_preferences import comparison_pairs
from promethee.processing.thresholds import evaluation_difference, resolve_threshold
from promethee.types import PartialPreferenceMatrix, PreferenceMatrix, PreferenceProblem
from promethee.utils.logging import get_logger

logger = get_logger(__name__)


def reinforced_criteria(problem: PreferenceProblem, a: str, b: str) -> list[str]:
    """Criteria on which the preference of a over b is reinforced."""
    reinforced = []
    for criterion in problem.criteria:
        ga = problem.evaluation(a, criterion.id)
        gb = problem.evaluation(b, criterion.id)
        d = evaluation_difference(criterion.direction, ga, gb)
        rp = resolve_threshold(
            criterion.direction, ga, gb, criterion.thresholds.reinforced_preference
        )
        if rp is not None and d > rp:
            reinforced.append(criterion.id)
    return reinforced


class ReinforcedPreferenceAggregator:
    """Aggregates partial preferences in reinforced preference mode."""

    def __init__(self, problem: PreferenceProblem):
        self.problem = problem

    def pair_preference(
        self,
        partials: PartialPreferenceMatrix,
        a: str,
        b: str,
        reinforced: list[str],
    ) -> float:
        preference = 0.0
        capacity = 0.0
        for criterion in self.problem.criteria:
            if criterion.id in reinforced:
                weight = criterion.weight * criterion.reinforcement_factor
                preference += weight
            else:
                weight = criterion.weight
                preference += partials[(a, b, criterion.id)] * weight
            capacity += weight

        interactions_sum, antagonistic_sum = interaction_terms(self.problem, partials, a, b)
        capacity += interactions_sum - antagonistic_sum
        if capacity == 0:
            raise ComputationError(
                "Net concordance capacity is zero", {"pair": (a, b)}
            )
        return (preference + interactions_sum - antagonistic_sum) / capacity

    def aggregate(self, partials: PartialPreferenceMatrix) -> PreferenceMatrix:
        """Compute total preferences with reinforcement applied.

        Raises:
            PositiveNetBalanceError: Before any pair is computed, if infeasible
        """
        check_net_balance(self.problem)
        values = {}
        reinforced_pairs = 0
        for a, b in comparison_pairs(self.problem):
            reinforced = reinforced_criteria(self.problem, a, b)
            values[(a, b)] = self.pair_preference(partials, a, b, reinforced)
            if reinforced:
                reinforced_pairs += 1

        logger.info(
            "Reinforced preferences aggregated",
            pairs=len(values),
            reinforced_pairs=reinforced_pairs,
        )
        return PreferenceMatrix(values)
