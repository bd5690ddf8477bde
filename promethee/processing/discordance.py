"""Discordance indices and preferences weakened by discordance."""

from promethee.exceptions import InputError
from promethee.processing.partial_preferences import comparison_pairs
from promethee.types import PartialPreferenceMatrix, PreferenceMatrix, PreferenceProblem
from promethee.utils.logging import get_logger

logger = get_logger(__name__)


class DiscordanceCalculator:
    """Computes how strongly each criterion opposes the preference of a over b.

    The partial discordance of a over b on criterion j is the partial
    preference of b over a on j; the overall discordance is
    ``1 - prod(1 - D_j(a, b))``.
    """

    def __init__(self, problem: PreferenceProblem):
        self.problem = problem

    def partial_discordances(self, partials: PartialPreferenceMatrix) -> PartialPreferenceMatrix:
        values = {}
        for a, b in comparison_pairs(self.problem):
            for criterion_id in self.problem.criteria_ids:
                values[(a, b, criterion_id)] = partials[(b, a, criterion_id)]
        return PartialPreferenceMatrix(values)

    def compute(
        self, partials: PartialPreferenceMatrix
    ) -> tuple[PreferenceMatrix, PartialPreferenceMatrix]:
        """Compute overall and partial discordances.

        Args:
            partials: Partial preferences covering both directions of every pair

        Returns:
            (discordance per pair, partial discordance per pair and criterion)
        """
        partial = self.partial_discordances(partials)
        values = {}
        for a, b in comparison_pairs(self.problem):
            concordant = 1.0
            for criterion_id in self.problem.criteria_ids:
                concordant *= 1.0 - partial[(a, b, criterion_id)]
            values[(a, b)] = 1.0 - concordant

        logger.info("Discordances computed", pairs=len(values))
        return PreferenceMatrix(values), partial


def apply_discordance(
    preferences: PreferenceMatrix, discordances: PreferenceMatrix
) -> PreferenceMatrix:
    """Weaken each total preference by its discordance: ``pi * (1 - D)``.

    Raises:
        InputError: If the two matrices do not cover the same pairs
    """
    if set(preferences) != set(discordances):
        missing = sorted(set(preferences) ^ set(discordances))
        raise InputError(
            "Preferences and discordances must cover the same pairs",
            {"mismatched": missing[:5]},
        )
    values = {
        pair: preference * (1.0 - discordances[pair])
        for pair, preference in preferences.items()
    }
    logger.info("Preferences weakened by discordance", pairs=len(values))
    return PreferenceMatrix(values)
