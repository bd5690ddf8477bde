"""Load preference problems from YAML or JSON files."""

import json
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from promethee.config import EngineConfig, get_config
from promethee.exceptions import InputError
from promethee.types import PreferenceProblem
from promethee.utils.logging import get_logger

logger = get_logger(__name__)

_INTERACTION_KINDS = ("strengthening", "weakening", "antagonistic")


class ProblemLoader:
    """Loads problem files into validated PreferenceProblem bundles.

    Method fields a file leaves unset (comparison mode, generalised
    criterion, operating mode, combination function) are filled from the
    engine configuration.
    """

    def __init__(self, engine_config: Optional[EngineConfig] = None):
        """Initialize loader.

        Args:
            engine_config: Method defaults; the global configuration when None
        """
        self.engine_config = engine_config or get_config().engine

    def load(self, path: Path) -> PreferenceProblem:
        """Load and validate a problem file.

        Args:
            path: Path to a .yaml, .yml or .json problem file

        Returns:
            Validated problem

        Raises:
            InputError: If the file is missing, unparsable or invalid
        """
        if not path.exists():
            raise InputError("Problem file not found", {"path": str(path)})

        logger.info(f"Loading problem from {path}")
        try:
            with open(path) as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise InputError("Problem file could not be parsed", {"path": str(path), "reason": str(e)}) from e

        if not isinstance(data, dict):
            raise InputError("Problem file must contain a mapping", {"path": str(path)})

        return self.from_dict(data)

    def from_dict(self, data: dict) -> PreferenceProblem:
        """Build a problem from already parsed data.

        Interactions may be given either as a list of effects or as a mapping
        ``kind -> row -> column -> coefficient``.

        Raises:
            InputError: If pydantic validation fails
        """
        merged = {**self.engine_config.problem_defaults(), **data}
        merged["interactions"] = self._normalize_interactions(merged.get("interactions"))

        try:
            problem = PreferenceProblem(**merged)
        except ValidationError as e:
            raise InputError(
                "Invalid problem definition",
                {"errors": "; ".join(_format_error(err) for err in e.errors())},
            ) from e

        logger.debug(
            "Problem loaded",
            criteria=problem.criteria_ids,
            alternatives=len(problem.alternatives),
            profiles=len(problem.profiles),
        )
        return problem

    @staticmethod
    def _normalize_interactions(interactions) -> list:
        if interactions is None:
            return []
        if isinstance(interactions, list):
            return interactions
        if not isinstance(interactions, dict):
            raise InputError("Interactions must be a list or a mapping by kind")

        effects = []
        for kind, rows in interactions.items():
            if kind not in _INTERACTION_KINDS:
                raise InputError("Unknown interaction kind", {"kind": kind})
            rows = rows or {}
            if not isinstance(rows, dict):
                raise InputError("Interactions of a kind must map row criteria to columns", {"kind": kind})
            for row, columns in rows.items():
                if not isinstance(columns, dict):
                    raise InputError(
                        "Interaction row must map column criteria to coefficients",
                        {"kind": kind, "row": row},
                    )
                for column, coefficient in columns.items():
                    effects.append(
                        {"kind": kind, "row": row, "column": column, "coefficient": coefficient}
                    )
        return effects


def _format_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    if location:
        return f"{location}: {error['msg']}"
    return error["msg"]
