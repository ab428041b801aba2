"""Simple random sample design.

A simple random sample gives every unit of the population the same
probability of being selected, so it is equi-weighted by definition. The
resolver here turns a partial description of the design (population size,
weights, probabilities) into one consistent set of design fields.

The population size is equal to the sample size unless ``popsize``, weights
or probabilities say otherwise.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from survey_design.design.base import AbstractSurveyDesign
from survey_design.design.types import (
    UNIT_WEIGHTS,
    ColumnRef,
    DesignMethod,
    SampleDesignSpec,
    is_scalar,
)
from survey_design.errors import DesignError, MissingParametersError
from survey_design.scripts import parameter as param
from survey_design.scripts.calc_utils import (
    common_value,
    reciprocal,
    require_positive,
    round_population_size,
)
from survey_design.scripts.table_utils import (
    check_length,
    get_column,
    row_count,
    set_column,
    to_numeric_vector,
)

logger = logging.getLogger("survey_design.design.simple")


@dataclass(frozen=True, eq=False)
class SimpleRandomSampleDesign(AbstractSurveyDesign):
    """Survey design sampled by simple random sampling.

    Build it with ``SimpleRandomSampleDesign.from_table`` or
    ``resolve_simple_random_sample``; the constructor itself only stores
    already resolved fields.

    Attributes:
        table: Survey data, carrying ``weights`` and ``probs`` columns
        sample_size: Number of sampled units
        population_size: Number of units in the population
        sample_fraction: sample_size / population_size
        fpc: Finite population correction, 1 when ignored
        ignore_fpc: Whether the finite population correction is ignored
    """

    table: pd.DataFrame = field(repr=False)
    sample_size: int
    population_size: int
    sample_fraction: float
    fpc: float
    ignore_fpc: bool

    @property
    def method(self) -> DesignMethod:
        return DesignMethod.SIMPLE

    @property
    def display_name(self) -> str:
        return "Simple Random Sample"

    @classmethod
    def from_table(
        cls, table: pd.DataFrame, spec: Optional[SampleDesignSpec] = None, **kwargs
    ) -> "SimpleRandomSampleDesign":
        """Build a design from survey data. See ``resolve_simple_random_sample``."""
        return resolve_simple_random_sample(table, spec, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method.value,
            "rows": row_count(self.table),
            "sample_size": self.sample_size,
            "population_size": self.population_size,
            "sample_fraction": self.sample_fraction,
            "fpc": self.fpc,
            "ignore_fpc": self.ignore_fpc,
        }


def _materialize(table: pd.DataFrame, source, label: str) -> Optional[np.ndarray]:
    """Resolve a weights/probs argument to a vector with one value per row."""
    if source is None:
        return None
    if isinstance(source, ColumnRef):
        logger.debug(f"Reading {label} from column '{source.name}'")
        return get_column(table, source.name)

    vector = to_numeric_vector(source, label)
    check_length(table, vector, label)
    return vector


def _require_sampsize(sampsize: int) -> None:
    if sampsize == 0:
        raise DesignError("Sample size must be positive to derive weights from popsize")


def _constant_vector(value: float, n: int) -> np.ndarray:
    return np.full(n, value, dtype=float)


def resolve_simple_random_sample(
    table: pd.DataFrame, spec: Optional[SampleDesignSpec] = None, **kwargs
) -> SimpleRandomSampleDesign:
    """Resolve design parameters and build a simple random sample design.

    Weights and probabilities are written to ``table`` as the ``weights``
    and ``probs`` columns. The table is modified in place, only after every
    check has passed; pass a copy to keep the original untouched. Calls must
    not run concurrently on the same table.

    Population size is taken from ``popsize`` when given. Otherwise it is
    inferred as ``sampsize * w`` where ``w`` is the common weight (or the
    reciprocal of the common probability).

    Args:
        table: Survey data
        spec: Design parameters. Alternatively pass the ``SampleDesignSpec``
            fields as keyword arguments.

    Returns:
        The constructed SimpleRandomSampleDesign

    Raises:
        DesignError: If the arguments are malformed
        InconsistentDesignError: If weights, probs or popsize are not equal
            across units, weights or probs are not finite and positive, or
            the population size cannot be positive
        MissingParametersError: If there is nothing to infer population size from
        DimensionMismatchError: If a vector or column length differs from the
            number of rows
        ColumnNotFoundError: If a referenced column does not exist
    """
    if spec is None:
        try:
            spec = SampleDesignSpec(**kwargs)
        except TypeError as e:
            raise DesignError(str(e)) from e
    elif kwargs:
        raise DesignError("Pass either a SampleDesignSpec or keyword arguments, not both")

    errors = spec.validate()
    if errors:
        raise DesignError("; ".join(errors))

    n = row_count(table)
    sampsize = n if spec.sampsize is None else int(spec.sampsize)

    # Step 1: column references and literal vectors become float arrays
    probs = _materialize(table, spec.probs, "probs")
    if spec.weights is UNIT_WEIGHTS:
        weights = None if probs is not None else np.ones(n)
    else:
        weights = _materialize(table, spec.weights, "weights")
    for label, vector in (("weights", weights), ("probs", probs)):
        if vector is not None:
            require_positive(vector, label)

    # Step 2: population size
    popsize = spec.popsize
    if popsize is None:
        if weights is not None:
            equal_weight = common_value(weights, "weights", "sampling weights")
            logger.debug(f"Inferring population size from weights ({equal_weight})")
        elif probs is not None:
            equal_prob = common_value(probs, "probs", "sampling probabilities")
            weights = reciprocal(probs)
            equal_weight = float(weights[0])
            logger.debug(f"Inferring population size from probs ({equal_prob})")
        else:
            raise MissingParametersError(
                "If popsize not given then either sampling weights or "
                "sampling probabilities must be given"
            )
        population_size = round_population_size(sampsize * equal_weight)

    elif is_scalar(popsize):
        population_size = round_population_size(float(popsize), "popsize")
        if spec.derive_weights_from_popsize:
            if not spec.weights_given and not spec.probs_given:
                _require_sampsize(sampsize)
                weights = _constant_vector(population_size / sampsize, n)
                logger.debug(f"Deriving weights from popsize {population_size}")
            elif sampsize > 0:
                expected = population_size / sampsize
                if weights is not None and not np.allclose(weights, expected):
                    logger.warning(
                        f"Supplied weights disagree with popsize {population_size} "
                        f"(expected {expected}); keeping the supplied weights"
                    )
                if probs is not None and not np.allclose(probs, 1 / expected):
                    logger.warning(
                        f"Supplied probs disagree with popsize {population_size} "
                        f"(expected {1 / expected}); keeping the supplied probs"
                    )
        elif weights is None and probs is None:
            weights = np.ones(n)

    else:
        popsizes = to_numeric_vector(popsize, "popsize")
        first = common_value(popsizes, "popsize", "population sizes")
        _require_sampsize(sampsize)
        population_size = round_population_size(first, "popsize")
        weights = _constant_vector(population_size / sampsize, n)
        logger.debug(f"Population size {population_size} taken from popsize vector")

    # Step 3: derived fields
    sample_fraction = sampsize / population_size
    fpc = 1.0 if spec.ignore_fpc else 1 - sampsize / population_size
    if sampsize > population_size:
        logger.warning(
            f"Sample size {sampsize} exceeds population size {population_size}"
        )

    # Step 4: write columns; the caller-supplied quantity is authoritative
    if probs is not None:
        if weights is not None and not np.allclose(weights * probs, 1.0):
            logger.warning("Supplied weights and probs disagree; using probs")
        set_column(table, param.probs_column, probs)
        set_column(table, param.weights_column, reciprocal(table[param.probs_column]))
    else:
        set_column(table, param.weights_column, weights)
        set_column(table, param.probs_column, reciprocal(table[param.weights_column]))

    design = SimpleRandomSampleDesign(
        table=table,
        sample_size=sampsize,
        population_size=population_size,
        sample_fraction=sample_fraction,
        fpc=fpc,
        ignore_fpc=spec.ignore_fpc,
    )
    logger.info(
        f"Built simple random sample: sampsize={sampsize}, "
        f"popsize={population_size}, fpc={fpc}"
    )
    return design
