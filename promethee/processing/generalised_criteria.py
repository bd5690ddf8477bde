"""Generalised criterion functions mapping an evaluation difference to a preference degree."""

from typing import Callable, Optional

import numpy as np

from promethee.exceptions import NullThresholdError
from promethee.types import GeneralisedCriterion


def usual(d: float) -> float:
    """Type 1: any positive difference is a strict preference."""
    return 0.0 if d <= 0 else 1.0


def u_shape(d: float, q: float) -> float:
    """Type 2: strict preference beyond the indifference threshold."""
    return 0.0 if d <= q else 1.0


def v_shape(d: float, p: float) -> float:
    """Type 3: linear growth up to the preference threshold."""
    if d <= 0:
        return 0.0
    if d <= p:
        return d / p
    return 1.0


def level(d: float, q: float, p: float) -> float:
    """Type 4: weak preference (0.5) between q and p, strict beyond p."""
    if d <= q:
        return 0.0
    if d <= p:
        return 0.5
    return 1.0


def v_shape_indifference(d: float, q: float, p: float) -> float:
    """Type 5: linear ramp from q to p."""
    if d <= q:
        return 0.0
    if d <= p:
        return (d - q) / (p - q)
    return 1.0


def gaussian(d: float, s: float) -> float:
    """Type 6: Gaussian growth controlled by sigma."""
    if d <= 0:
        return 0.0
    if s == 0:
        return 1.0
    return float(1.0 - np.exp(-(d ** 2) / (2 * s ** 2)))


_FUNCTIONS: dict[GeneralisedCriterion, tuple[Callable[..., float], tuple[str, ...]]] = {
    GeneralisedCriterion.USUAL: (usual, ()),
    GeneralisedCriterion.U_SHAPE: (u_shape, ("q",)),
    GeneralisedCriterion.V_SHAPE: (v_shape, ("p",)),
    GeneralisedCriterion.LEVEL: (level, ("q", "p")),
    GeneralisedCriterion.V_SHAPE_INDIFFERENCE: (v_shape_indifference, ("q", "p")),
    GeneralisedCriterion.GAUSSIAN: (gaussian, ("s",)),
}


def preference_degree(
    function: GeneralisedCriterion,
    d: float,
    p: Optional[float] = None,
    q: Optional[float] = None,
    s: Optional[float] = None,
) -> float:
    """Evaluate a generalised criterion.

    Thresholds the shape does not use are ignored.

    Args:
        function: Generalised criterion shape (1-6)
        d: Signed difference, favored minus other, under the criterion direction
        p: Resolved preference threshold
        q: Resolved indifference threshold
        s: Resolved sigma threshold

    Returns:
        Preference degree in [0, 1]

    Raises:
        NullThresholdError: If a threshold the shape requires is None
    """
    shape = GeneralisedCriterion(function)
    func, parameters = _FUNCTIONS[shape]
    resolved = {"p": p, "q": q, "s": s}
    args = []
    for name in parameters:
        if resolved[name] is None:
            raise NullThresholdError(
                f"{shape.label} function requires a {name} threshold",
                {"function": int(shape)},
            )
        args.append(resolved[name])
    return func(d, *args)
