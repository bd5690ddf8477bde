"""Method configuration checks run before any preference is computed."""

from promethee.exceptions import ConfigurationError, NullThresholdError
from promethee.types import GeneralisedCriterion, OperatingMode, PreferenceProblem
from promethee.utils.logging import get_logger

logger = get_logger(__name__)


def check_configuration(problem: PreferenceProblem) -> None:
    """Check that every criterion can be evaluated under the configured method.

    Args:
        problem: Structurally valid problem bundle

    Raises:
        ConfigurationError: If a criterion has no generalised criterion, uses the
            Gaussian shape in reinforced mode, or lacks a usable reinforcement factor
        NullThresholdError: If a threshold required by the shape or mode is absent
    """
    reinforced = problem.operating_mode == OperatingMode.REINFORCED_PREFERENCE

    for criterion in problem.criteria:
        function = problem.function_for(criterion.id)
        if function is None:
            raise ConfigurationError(
                "Generalised criterion expected for every criterion",
                {"criterion": criterion.id},
            )

        missing = [
            name for name in function.required_thresholds
            if criterion.thresholds.get(name) is None
        ]
        if missing:
            raise NullThresholdError(
                f"{function.label} function ({int(function)}) on criterion {criterion.id} "
                f"requires {' and '.join(missing)} threshold",
                {"criterion": criterion.id, "missing": missing},
            )

        if not reinforced:
            continue
        if function == GeneralisedCriterion.GAUSSIAN:
            raise ConfigurationError(
                "Generalised criteria must be between 1 and 5 in reinforced preference mode",
                {"criterion": criterion.id},
            )
        if criterion.thresholds.reinforced_preference is None:
            raise NullThresholdError(
                f"Reinforced preference threshold is not specified on criterion {criterion.id}",
                {"criterion": criterion.id},
            )
        if criterion.reinforcement_factor is None or criterion.reinforcement_factor <= 1:
            raise ConfigurationError(
                f"Reinforcement factor on criterion {criterion.id} must be greater than 1",
                {"criterion": criterion.id, "factor": criterion.reinforcement_factor},
            )

    logger.debug(
        "Configuration accepted",
        criteria=len(problem.criteria),
        operating_mode=problem.operating_mode.value,
    )
