"""Exceptions raised while constructing survey designs.

Every error is a ``ValueError`` so callers that only care about bad input
can catch that, while the subclasses name which rule was broken.
"""


class DesignError(ValueError):
    """Base class for invalid design arguments."""


class InconsistentDesignError(DesignError):
    """Weights, probabilities or population sizes contradict the design."""


class MissingParametersError(DesignError):
    """Not enough information to infer the population size."""


class DimensionMismatchError(DesignError):
    """A vector or column does not match the table's row count."""


class ColumnNotFoundError(DesignError, KeyError):
    """A referenced column does not exist in the table."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message instead
        return str(self.args[0]) if self.args else ""
