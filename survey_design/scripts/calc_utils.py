import math

import numpy as np

from survey_design.errors import InconsistentDesignError, MissingParametersError


def is_equal_weighted(values: np.ndarray) -> bool:
    """Check whether every element equals the first one.

    Comparison is exact, as in the definition of a simple random sample.
    NaN never compares equal, so a vector holding NaN is not equal-weighted.

    Args:
        values: 1-D array of weights, probabilities or population sizes

    Returns:
        True if all elements are identical (an empty vector is trivially True)
    """
    if len(values) == 0:
        return True
    return bool(np.all(values == values[0]))


def common_value(values: np.ndarray, label: str, kind: str) -> float:
    """Return the single value shared by an equal-weighted vector.

    Args:
        values: 1-D array to check
        label: Which argument is checked ("weights", "probs" or "popsize")
        kind: Plural noun for the error message (e.g. "sampling weights")

    Returns:
        The common element

    Raises:
        MissingParametersError: If the vector is empty
        InconsistentDesignError: If the elements differ
    """
    if len(values) == 0:
        raise MissingParametersError(
            f"Cannot infer population size from an empty {label} vector"
        )
    if not is_equal_weighted(values):
        raise InconsistentDesignError(
            f"Simple Random Sample must be equi-weighted. "
            f"Different {kind} detected in {label}"
        )
    return float(values[0])


def reciprocal(values: np.ndarray) -> np.ndarray:
    """Element-wise 1/x, mapping zero to infinity without a warning."""
    with np.errstate(divide="ignore"):
        return 1.0 / np.asarray(values, dtype=float)


def round_population_size(value: float, label: str = "population size") -> int:
    """Round a population size to the nearest integer.

    Halves round to the nearest even integer (Python's ``round``).

    Args:
        value: Unrounded population size
        label: Name used in error messages

    Returns:
        Population size as a positive integer

    Raises:
        InconsistentDesignError: If the value is not finite or not positive
    """
    if not math.isfinite(value):
        raise InconsistentDesignError(
            f"Cannot resolve {label}: value {value} is not finite"
        )

    result = int(round(value))
    if result <= 0:
        raise InconsistentDesignError(
            f"Cannot resolve {label}: {value} does not round to a positive integer"
        )
    return result


def require_positive(values: np.ndarray, label: str) -> None:
    """Raise unless every element is finite and strictly positive.

    Weights and probabilities are reciprocals of each other, so a zero,
    negative, infinite or NaN entry cannot be turned into a valid pair.

    Raises:
        InconsistentDesignError: Naming ``label`` and the first bad value
    """
    bad = ~(np.isfinite(values) & (values > 0))
    if bad.any():
        value = values[np.argmax(bad)]
        raise InconsistentDesignError(
            f"{label} must be finite and strictly positive, got {value}"
        )
