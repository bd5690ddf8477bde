"""PROMETHEE preference engine - outranking preferences with criterion interactions."""

__version__ = "0.1.0"
__description__ = "PROMETHEE partial and total preferences with interactions, reinforcement and discordance"

from promethee.types import (
    CombinationFunction,
    ComparisonMode,
    Criterion,
    GeneralisedCriterion,
    InteractionEffect,
    InteractionKind,
    OperatingMode,
    PartialPreferenceMatrix,
    PreferenceDirection,
    PreferenceMatrix,
    PreferenceProblem,
    Threshold,
)
from promethee.config import get_config
from promethee.core.preference_pipeline import PreferencePipeline, PreferenceResults
from promethee.utils.logging import get_logger, configure_logging

__all__ = [
    "CombinationFunction",
    "ComparisonMode",
    "Criterion",
    "GeneralisedCriterion",
    "InteractionEffect",
    "InteractionKind",
    "OperatingMode",
    "PartialPreferenceMatrix",
    "PreferenceDirection",
    "PreferenceMatrix",
    "PreferenceProblem",
    "Threshold",
    "get_config",
    "PreferencePipeline",
    "PreferenceResults",
    "get_logger",
    "configure_logging",
]
