"""Per-criterion preference degrees for every compared pair of entities."""

from promethee.processing.generalised_criteria import preference_degree
from promethee.processing.thresholds import evaluation_difference, resolve_threshold
from promethee.types import (
    ComparisonMode,
    Criterion,
    GeneralisedCriterion,
    PartialPreferenceMatrix,
    PreferenceProblem,
)
from promethee.utils.logging import get_logger

logger = get_logger(__name__)


def comparison_pairs(problem: PreferenceProblem) -> list[tuple[str, str]]:
    """Ordered entity pairs compared under the problem's comparison mode.

    Alternatives mode compares every alternative with every alternative.
    Profiles mode compares each alternative with each profile in both
    directions, then every profile with every profile.
    """
    if problem.comparison_mode == ComparisonMode.ALTERNATIVES:
        return [(a, b) for a in problem.alternatives for b in problem.alternatives]

    pairs = []
    for alternative in problem.alternatives:
        for profile in problem.profiles:
            pairs.append((alternative, profile))
            pairs.append((profile, alternative))
    pairs.extend((a, b) for a in problem.profiles for b in problem.profiles)
    return pairs


def criterion_preference(
    criterion: Criterion,
    function: GeneralisedCriterion,
    ga: float,
    gb: float,
) -> float:
    """Degree to which evaluation ``ga`` is preferred to ``gb`` on one criterion."""
    direction = criterion.direction
    thresholds = criterion.thresholds
    d = evaluation_difference(direction, ga, gb)
    p = resolve_threshold(direction, ga, gb, thresholds.preference)
    q = resolve_threshold(direction, ga, gb, thresholds.indifference)
    s = resolve_threshold(direction, ga, gb, thresholds.sigma)
    return preference_degree(function, d, p=p, q=q, s=s)


def build_partial_preferences(problem: PreferenceProblem) -> PartialPreferenceMatrix:
    """Build the partial preference matrix.

    Args:
        problem: Problem whose configuration has been checked

    Returns:
        Matrix keyed by (entity_a, entity_b, criterion)
    """
    functions = {c.id: problem.function_for(c.id) for c in problem.criteria}
    values = {}
    for a, b in comparison_pairs(problem):
        for criterion in problem.criteria:
            values[(a, b, criterion.id)] = criterion_preference(
                criterion,
                functions[criterion.id],
                problem.evaluation(a, criterion.id),
                problem.evaluation(b, criterion.id),
            )

    logger.info(
        "Partial preferences computed",
        comparison_mode=problem.comparison_mode.value,
        pairs=len(values) // len(problem.criteria),
        criteria=len(problem.criteria),
    )
    return PartialPreferenceMatrix(values)
