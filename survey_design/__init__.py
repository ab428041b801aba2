"""Survey sampling designs.

The data passed to a design constructor is modified: ``weights`` and
``probs`` columns are added to it. To avoid this pass a copy of the data
instead of the original.
"""

from survey_design.design import (
    UNIT_WEIGHTS,
    AbstractSurveyDesign,
    ColumnRef,
    DesignMethod,
    DesignService,
    SampleDesignSpec,
    SimpleRandomSampleDesign,
    resolve_simple_random_sample,
)
from survey_design.errors import (
    ColumnNotFoundError,
    DesignError,
    DimensionMismatchError,
    InconsistentDesignError,
    MissingParametersError,
)

__version__ = "0.1.0"

__all__ = [
    "AbstractSurveyDesign",
    "SimpleRandomSampleDesign",
    "resolve_simple_random_sample",
    "SampleDesignSpec",
    "ColumnRef",
    "UNIT_WEIGHTS",
    "DesignMethod",
    "DesignService",
    "DesignError",
    "InconsistentDesignError",
    "MissingParametersError",
    "DimensionMismatchError",
    "ColumnNotFoundError",
]
