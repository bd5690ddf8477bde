"""Preference pipeline: validated problem in, preference matrices out."""

from typing import Optional

from promethee.config import get_config
from promethee.core.validation import check_configuration
from promethee.exceptions import ComputationError, PrometheeError
from promethee.processing.discordance import DiscordanceCalculator, apply_discordance
from promethee.processing.interactions import InteractionAggregator
from promethee.processing.partial_preferences import build_partial_preferences
from promethee.processing.reinforcement import ReinforcedPreferenceAggregator
from promethee.types import (
    OperatingMode,
    PartialPreferenceMatrix,
    PreferenceMatrix,
    PreferenceProblem,
)
from promethee.utils.logging import bind_run_context, clear_run_context, get_logger

logger = get_logger(__name__)


class PreferenceResults:
    """Results of one engine run."""

    def __init__(
        self,
        preferences: PreferenceMatrix,
        partial_preferences: PartialPreferenceMatrix,
        discordances: Optional[PreferenceMatrix] = None,
        partial_discordances: Optional[PartialPreferenceMatrix] = None,
        preferences_with_discordance: Optional[PreferenceMatrix] = None,
    ):
        """Initialize results.

        Args:
            preferences: Total preference per ordered pair
            partial_preferences: Degree per ordered pair and criterion
            discordances: Overall discordance per pair (optional)
            partial_discordances: Discordance per pair and criterion (optional)
            preferences_with_discordance: Preferences weakened by discordance (optional)
        """
        self.preferences = preferences
        self.partial_preferences = partial_preferences
        self.discordances = discordances
        self.partial_discordances = partial_discordances
        self.preferences_with_discordance = preferences_with_discordance

    @property
    def has_discordance(self) -> bool:
        return self.discordances is not None


class PreferencePipeline:
    """Orchestrates configuration checks, partial preferences and aggregation."""

    def __init__(self, compute_discordance: Optional[bool] = None):
        """Initialize pipeline.

        Args:
            compute_discordance: Also compute discordances; defaults to the
                engine configuration
        """
        if compute_discordance is None:
            compute_discordance = get_config().engine.compute_discordance
        self.compute_discordance = compute_discordance

    def run(self, problem: PreferenceProblem) -> PreferenceResults:
        """Run the engine on one problem.

        Args:
            problem: Structurally valid problem bundle

        Returns:
            PreferenceResults with every requested matrix fully populated

        Raises:
            ConfigurationError: If the method configuration is unusable; no
                partial results are produced
            ComputationError: If a pair cannot be aggregated
        """
        bind_run_context(
            operating_mode=problem.operating_mode.value,
            comparison_mode=problem.comparison_mode.value,
        )
        logger.info(
            "Starting preference pipeline",
            criteria=len(problem.criteria),
            alternatives=len(problem.alternatives),
            profiles=len(problem.profiles),
            interactions=len(problem.interactions),
            discordance=self.compute_discordance,
        )

        try:
            check_configuration(problem)

            partials = build_partial_preferences(problem)

            if problem.operating_mode == OperatingMode.REINFORCED_PREFERENCE:
                aggregator = ReinforcedPreferenceAggregator(problem)
            else:
                aggregator = InteractionAggregator(problem)
            preferences = aggregator.aggregate(partials)

            results = PreferenceResults(preferences, partials)
            if self.compute_discordance:
                discordances, partial_discordances = DiscordanceCalculator(problem).compute(partials)
                results.discordances = discordances
                results.partial_discordances = partial_discordances
                results.preferences_with_discordance = apply_discordance(preferences, discordances)

            logger.info("Preference pipeline complete", pairs=len(preferences))
            return results

        except PrometheeError as e:
            logger.error("Preference pipeline failed", error=str(e))
            raise
        except ZeroDivisionError as e:
            logger.error("Division by zero while computing preferences", error=str(e))
            raise ComputationError(
                "Division by zero while computing preferences",
                {"reason": str(e)},
            ) from e
        finally:
            clear_run_context()
