"""Survey design module.

Each design type is a class holding the survey data together with the
design fields its resolver derives. Only simple random samples can be
constructed; stratified and cluster designs are named but not supported.

Usage:
    from survey_design.design import SimpleRandomSampleDesign

    design = SimpleRandomSampleDesign.from_table(df, popsize=1000)
    print(design.describe())
"""

from survey_design.design.base import AbstractSurveyDesign
from survey_design.design.service import (
    DesignService,
    get_design_resolver,
    get_resolver_from_string,
)
from survey_design.design.simple import (
    SimpleRandomSampleDesign,
    resolve_simple_random_sample,
)
from survey_design.design.types import (
    UNIT_WEIGHTS,
    ColumnRef,
    DesignMethod,
    SampleDesignSpec,
)

__all__ = [
    "AbstractSurveyDesign",
    "SimpleRandomSampleDesign",
    "resolve_simple_random_sample",
    "DesignMethod",
    "SampleDesignSpec",
    "ColumnRef",
    "UNIT_WEIGHTS",
    "DesignService",
    "get_design_resolver",
    "get_resolver_from_string",
]
