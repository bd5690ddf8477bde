"""Type definitions and data models for the preference engine."""

from collections.abc import Iterator, Mapping
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Literal, Optional, Union

import numpy as np
import pandas as pd
from pydantic import BaseModel, Field, field_validator, model_validator

from promethee.exceptions import (
    InvalidCombinationFunctionError,
    InvalidDirectionError,
    InvalidOperatingModeError,
)


class PreferenceDirection(str, Enum):
    """Direction of preference on a criterion."""

    MAX = "MAX"
    MIN = "MIN"

    @classmethod
    def from_label(cls, label: str) -> "PreferenceDirection":
        """Convert an external label, failing on anything but MAX/MIN."""
        for direction in cls:
            if direction.value == label:
                return direction
        raise InvalidDirectionError(label)


class GeneralisedCriterion(IntEnum):
    """The six generalised criterion shapes, numbered as in PROMETHEE literature."""

    USUAL = 1
    U_SHAPE = 2
    V_SHAPE = 3
    LEVEL = 4
    V_SHAPE_INDIFFERENCE = 5
    GAUSSIAN = 6

    @property
    def required_thresholds(self) -> tuple[str, ...]:
        """Threshold names that must be present for this shape."""
        return _REQUIRED_THRESHOLDS[self]

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


_REQUIRED_THRESHOLDS = {
    GeneralisedCriterion.USUAL: (),
    GeneralisedCriterion.U_SHAPE: ("indifference",),
    GeneralisedCriterion.V_SHAPE: ("preference",),
    GeneralisedCriterion.LEVEL: ("indifference", "preference"),
    GeneralisedCriterion.V_SHAPE_INDIFFERENCE: ("indifference", "preference"),
    GeneralisedCriterion.GAUSSIAN: ("sigma",),
}


class CombinationFunction(str, Enum):
    """Z function fusing two partial preferences into an interaction term."""

    MULTIPLICATION = "multiplication"
    MINIMUM = "minimum"

    @classmethod
    def from_label(cls, label: str) -> "CombinationFunction":
        for function in cls:
            if function.value == label:
                return function
        raise InvalidCombinationFunctionError(label)


class OperatingMode(str, Enum):
    """Aggregation branch."""

    NORMAL = "normal"
    REINFORCED_PREFERENCE = "reinforced_preference"

    @classmethod
    def from_label(cls, label: str) -> "OperatingMode":
        for mode in cls:
            if mode.value == label:
                return mode
        raise InvalidOperatingModeError(label)


class ComparisonMode(str, Enum):
    """Which entity pairs are compared."""

    ALTERNATIVES = "alternatives"
    PROFILES = "profiles"


class InteractionKind(str, Enum):
    """Kind of pairwise interaction between two criteria."""

    STRENGTHENING = "strengthening"
    WEAKENING = "weakening"
    ANTAGONISTIC = "antagonistic"


class Threshold(BaseModel):
    """Constant threshold, or one linear in the worse of the two compared evaluations."""

    constant: Optional[float] = Field(None, description="Constant threshold value")
    slope: Optional[float] = Field(None, description="Slope of a linear threshold")
    intercept: Optional[float] = Field(None, description="Intercept of a linear threshold")

    @model_validator(mode="after")
    def check_form(self) -> "Threshold":
        """Ensure exactly one of the constant or linear forms is given."""
        linear = self.slope is not None or self.intercept is not None
        if self.constant is not None and linear:
            raise ValueError("Threshold is either constant or linear, not both")
        if self.constant is None and not linear:
            raise ValueError("Threshold needs a constant or a slope/intercept")
        if linear and (self.slope is None or self.intercept is None):
            raise ValueError("Linear threshold needs both slope and intercept")
        return self

    @property
    def is_constant(self) -> bool:
        return self.constant is not None

    @classmethod
    def of(cls, value: float) -> "Threshold":
        """Shorthand for a constant threshold."""
        return cls(constant=value)


class CriterionThresholds(BaseModel):
    """Thresholds attached to one criterion; absent ones do not apply."""

    preference: Optional[Threshold] = None
    indifference: Optional[Threshold] = None
    sigma: Optional[Threshold] = None
    reinforced_preference: Optional[Threshold] = None

    @field_validator("*", mode="before")
    @classmethod
    def accept_numbers(cls, v):
        """Plain numbers are constant thresholds."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return {"constant": v}
        return v

    def get(self, name: str) -> Optional[Threshold]:
        return getattr(self, name)


class Criterion(BaseModel):
    """Single criterion definition."""

    id: str = Field(..., min_length=1)
    direction: PreferenceDirection = PreferenceDirection.MAX
    weight: float = Field(..., ge=0.0, description="Criterion weight")
    function: Optional[GeneralisedCriterion] = Field(
        None, description="Generalised criterion used when the problem specifies one per criterion"
    )
    thresholds: CriterionThresholds = Field(default_factory=CriterionThresholds)
    reinforcement_factor: Optional[float] = Field(
        None, description="Weight multiplier applied when the reinforced preference threshold is exceeded"
    )

    @field_validator("function", mode="before")
    @classmethod
    def numeric_function(cls, v):
        if isinstance(v, str) and v.isdigit():
            return int(v)
        return v

    @field_validator("direction", mode="before")
    @classmethod
    def direction_label(cls, v):
        return PreferenceDirection.from_label(v)


class InteractionEffect(BaseModel):
    """Interaction coefficient between an ordered pair of distinct criteria."""

    row: str
    column: str
    coefficient: float
    kind: InteractionKind

    @model_validator(mode="after")
    def distinct_criteria(self) -> "InteractionEffect":
        if self.row == self.column:
            raise ValueError(f"Interaction needs two distinct criteria, got {self.row} twice")
        return self


class PreferenceProblem(BaseModel):
    """Validated input bundle for one engine run.

    Criteria, alternatives and profiles are kept sorted by id so that every
    output iterates in the same order.
    """

    criteria: list[Criterion] = Field(..., min_length=1)
    alternatives: list[str] = Field(..., min_length=1)
    profiles: list[str] = Field(default_factory=list)
    performances: dict[str, dict[str, float]]
    profile_performances: dict[str, dict[str, float]] = Field(default_factory=dict)
    comparison_mode: ComparisonMode = ComparisonMode.ALTERNATIVES
    generalised_criterion: Union[Literal["specified"], GeneralisedCriterion] = "specified"
    operating_mode: OperatingMode = OperatingMode.NORMAL
    combination_function: CombinationFunction = CombinationFunction.MULTIPLICATION
    interactions: list[InteractionEffect] = Field(default_factory=list)

    @field_validator("generalised_criterion", mode="before")
    @classmethod
    def numeric_label(cls, v):
        """Accept "1".."6" labels as used in exchange files."""
        if isinstance(v, str) and v.isdigit():
            return int(v)
        return v

    @field_validator("operating_mode", mode="before")
    @classmethod
    def operating_mode_label(cls, v):
        return OperatingMode.from_label(v)

    @field_validator("combination_function", mode="before")
    @classmethod
    def combination_function_label(cls, v):
        return CombinationFunction.from_label(v)

    @model_validator(mode="after")
    def check_consistency(self) -> "PreferenceProblem":
        """Sort ids and check entities, performances and interactions agree."""
        self.criteria = sorted(self.criteria, key=lambda c: c.id)
        self.alternatives = sorted(self.alternatives)
        self.profiles = sorted(self.profiles)

        criteria_ids = [c.id for c in self.criteria]
        for label, ids in (
            ("criterion", criteria_ids),
            ("alternative", self.alternatives),
            ("profile", self.profiles),
        ):
            if len(set(ids)) != len(ids):
                raise ValueError(f"Duplicate {label} ids")

        overlap = set(self.alternatives) & set(self.profiles)
        if overlap:
            raise ValueError(f"Ids used as both alternative and profile: {sorted(overlap)}")
        if self.comparison_mode == ComparisonMode.PROFILES and not self.profiles:
            raise ValueError("Comparison with profiles requires at least one profile")

        _check_table(self.performances, self.alternatives, criteria_ids, "alternative")
        if self.comparison_mode == ComparisonMode.PROFILES:
            _check_table(self.profile_performances, self.profiles, criteria_ids, "profile")

        seen = set()
        for effect in self.interactions:
            for criterion in (effect.row, effect.column):
                if criterion not in criteria_ids:
                    raise ValueError(f"Interaction refers to unknown criterion {criterion}")
            key = (effect.kind, effect.row, effect.column)
            if key in seen:
                raise ValueError(
                    f"Duplicate {effect.kind.value} interaction between {effect.row} and {effect.column}"
                )
            seen.add(key)
        return self

    @property
    def criteria_ids(self) -> list[str]:
        return [c.id for c in self.criteria]

    def criterion(self, criterion_id: str) -> Criterion:
        for criterion in self.criteria:
            if criterion.id == criterion_id:
                return criterion
        raise KeyError(criterion_id)

    def function_for(self, criterion_id: str) -> Optional[GeneralisedCriterion]:
        """Generalised criterion applied to a criterion (program-wide one wins)."""
        if self.generalised_criterion == "specified":
            return self.criterion(criterion_id).function
        return self.generalised_criterion

    def evaluation(self, entity: str, criterion_id: str) -> float:
        """Performance of an alternative or profile on a criterion."""
        if entity in self.performances:
            return self.performances[entity][criterion_id]
        return self.profile_performances[entity][criterion_id]

    def interaction_table(self, kind: InteractionKind) -> dict[tuple[str, str], float]:
        """(row, column) -> coefficient for one interaction kind, in input order."""
        return {
            (effect.row, effect.column): effect.coefficient
            for effect in self.interactions
            if effect.kind == kind
        }

    def total_weight(self) -> float:
        return sum(c.weight for c in self.criteria)


def _check_table(
    table: dict[str, dict[str, float]],
    entities: list[str],
    criteria_ids: list[str],
    label: str,
) -> None:
    for entity in entities:
        row = table.get(entity)
        if row is None:
            raise ValueError(f"No performances for {label} {entity}")
        missing = [c for c in criteria_ids if c not in row]
        if missing:
            raise ValueError(f"Missing performances of {label} {entity} on {missing}")
        for criterion, value in row.items():
            if not np.isfinite(value):
                raise ValueError(f"Performance of {label} {entity} on {criterion} is not finite")


class PartialPreferenceMatrix(Mapping):
    """Per-criterion degrees keyed by (entity_a, entity_b, criterion).

    Read-only once built; both directions of a pair are stored independently.
    """

    def __init__(self, values: dict[tuple[str, str, str], float]):
        """Initialize matrix.

        Args:
            values: Degrees in the iteration order the builder produced them
        """
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, key: tuple[str, str, str]) -> float:
        return self._values[key]

    def __iter__(self) -> Iterator[tuple[str, str, str]]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PartialPreferenceMatrix({len(self)} entries)"

    def pairs(self) -> list[tuple[str, str]]:
        """Distinct (entity_a, entity_b) pairs in stored order."""
        return list(dict.fromkeys((a, b) for a, b, _ in self._values))

    def for_pair(self, entity_a: str, entity_b: str) -> dict[str, float]:
        """criterion -> degree for one ordered pair."""
        return {c: v for (a, b, c), v in self._values.items() if a == entity_a and b == entity_b}

    def to_frame(self) -> pd.DataFrame:
        """One row per pair, one column per criterion."""
        index = pd.MultiIndex.from_tuples(self.pairs(), names=["entity_a", "entity_b"])
        frame = pd.DataFrame(
            [self.for_pair(a, b) for a, b in index],
            index=index,
        )
        return frame


class PreferenceMatrix(Mapping):
    """Aggregated values keyed by (entity_a, entity_b); read-only once built."""

    def __init__(self, values: dict[tuple[str, str], float]):
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, key: tuple[str, str]) -> float:
        return self._values[key]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PreferenceMatrix({len(self)} pairs)"

    def entities(self) -> list[str]:
        """Row entities followed by column-only entities, in first-seen order."""
        seen = dict.fromkeys(a for a, _ in self._values)
        seen.update(dict.fromkeys(b for _, b in self._values))
        return list(seen)

    def to_frame(self) -> pd.DataFrame:
        """Square frame of values; pairs that are not compared are NaN."""
        entities = self.entities()
        frame = pd.DataFrame(np.nan, index=entities, columns=entities)
        for (a, b), value in self._values.items():
            frame.loc[a, b] = value
        return frame

    def to_array(self) -> np.ndarray:
        return self.to_frame().to_numpy(dtype=float)
