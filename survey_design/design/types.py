"""Type definitions for survey designs.

Contains the data classes describing what a caller may pass when building a
design. Weights and probabilities may be given either as a column of the
survey data or as a literal vector; ``ColumnRef`` tags the first case so the
resolver can normalise both to a vector in one step.
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union


class DesignMethod(Enum):
    """Available survey design types."""

    SIMPLE = "simple"
    STRATIFIED = "stratified"
    CLUSTER = "cluster"

    @classmethod
    def from_string(cls, value: str) -> "DesignMethod":
        """Convert string to DesignMethod enum."""
        for method in cls:
            if method.value == value.lower():
                return method
        raise ValueError(f"Unknown design method: {value}")


@dataclass(frozen=True)
class ColumnRef:
    """Reference to a column of the survey data by name."""

    name: str


class _UnitWeights:
    """Marker for weights the caller did not specify."""

    def __repr__(self) -> str:
        return "UNIT_WEIGHTS"


# Default for ``weights``: all ones, unless probabilities are given
UNIT_WEIGHTS = _UnitWeights()

VectorArg = Union[str, ColumnRef, Sequence[float], None]
PopsizeArg = Union[numbers.Real, Sequence[float], None]


def as_source(value):
    """Tag a weights/probs argument.

    Strings become ``ColumnRef``; ``None``, ``UNIT_WEIGHTS``, ``ColumnRef``
    and literal vectors are returned unchanged.
    """
    if isinstance(value, str):
        return ColumnRef(value)
    return value


def is_scalar(value) -> bool:
    """Whether a popsize argument is a single number rather than a vector."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass
class SampleDesignSpec:
    """Input parameters for building a survey design.

    Every field is optional; the resolver fills in what can be inferred.
    """

    popsize: PopsizeArg = None
    sampsize: Optional[int] = None  # None means the number of rows
    weights: Union[VectorArg, _UnitWeights] = UNIT_WEIGHTS
    probs: VectorArg = None
    ignore_fpc: bool = True

    # With a scalar popsize and no explicit weights/probs, derive
    # weights = popsize / sampsize. False keeps all-ones weights.
    derive_weights_from_popsize: bool = True

    def __post_init__(self):
        self.weights = as_source(self.weights)
        self.probs = as_source(self.probs)

    @property
    def weights_given(self) -> bool:
        """Whether the caller supplied weights explicitly."""
        return self.weights is not UNIT_WEIGHTS and self.weights is not None

    @property
    def probs_given(self) -> bool:
        """Whether the caller supplied probabilities."""
        return self.probs is not None

    def validate(self) -> List[str]:
        """Validate scalar arguments.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.sampsize is not None:
            if isinstance(self.sampsize, bool) or not isinstance(
                self.sampsize, numbers.Integral
            ):
                errors.append(
                    f"Sample size must be an integer, got {type(self.sampsize).__name__}"
                )
            elif self.sampsize < 0:
                errors.append("Sample size must not be negative")

        if not isinstance(self.ignore_fpc, bool):
            errors.append("ignore_fpc must be True or False")

        if not isinstance(self.derive_weights_from_popsize, bool):
            errors.append("derive_weights_from_popsize must be True or False")

        if self.popsize is not None:
            if isinstance(self.popsize, (str, bool)):
                errors.append("Population size must be a number or a vector of numbers")
            elif is_scalar(self.popsize) and self.popsize < 0:
                errors.append("Population size must not be negative")

        return errors
