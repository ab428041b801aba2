"""Design service for building survey designs.

This module provides the main entry points for callers that pick a design
type by name or hold design parameters as a plain mapping.
"""

import logging
from dataclasses import fields
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import pandas as pd

from survey_design.design.base import AbstractSurveyDesign
from survey_design.design.simple import resolve_simple_random_sample
from survey_design.design.types import DesignMethod, SampleDesignSpec
from survey_design.errors import DesignError

logger = logging.getLogger("survey_design.design.service")

DesignResolver = Callable[[pd.DataFrame, SampleDesignSpec], AbstractSurveyDesign]

# Registry of design types that can be constructed
_RESOLVER_REGISTRY: Dict[DesignMethod, DesignResolver] = {
    DesignMethod.SIMPLE: resolve_simple_random_sample,
}

_DISPLAY_NAMES: Dict[DesignMethod, str] = {
    DesignMethod.SIMPLE: "Simple Random Sample",
}


def get_design_resolver(method: DesignMethod) -> DesignResolver:
    """Get the resolver building designs of a given type.

    Args:
        method: The design type

    Returns:
        Callable taking the survey data and a SampleDesignSpec

    Raises:
        ValueError: If the design type cannot be constructed
    """
    if method not in _RESOLVER_REGISTRY:
        raise ValueError(f"Unsupported design method: {method}")

    return _RESOLVER_REGISTRY[method]


def get_resolver_from_string(method_str: str) -> DesignResolver:
    """Get design resolver from string method name.

    Args:
        method_str: String name of design type (e.g., "simple")

    Returns:
        The corresponding resolver
    """
    method = DesignMethod.from_string(method_str)
    return get_design_resolver(method)


class DesignService:
    """High-level service for design construction.

    Converts plain mappings to SampleDesignSpec and dispatches to the
    resolver registered for the requested design type.
    """

    @staticmethod
    def create_spec_from_mapping(mapping: Mapping[str, Any]) -> SampleDesignSpec:
        """Create SampleDesignSpec from a mapping of parameter names.

        Args:
            mapping: Design parameters, e.g. loaded from a settings file

        Returns:
            SampleDesignSpec populated from the mapping

        Raises:
            DesignError: If the mapping holds unknown parameter names
        """
        known = {f.name for f in fields(SampleDesignSpec)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise DesignError(f"Unknown design parameters: {', '.join(unknown)}")

        return SampleDesignSpec(**dict(mapping))

    @staticmethod
    def build(
        table: pd.DataFrame,
        spec: Optional[SampleDesignSpec] = None,
        method: DesignMethod = DesignMethod.SIMPLE,
    ) -> AbstractSurveyDesign:
        """Build a survey design of the requested type.

        Args:
            table: Survey data, modified in place
            spec: Design parameters (defaults for every field when omitted)
            method: The design type

        Returns:
            The constructed design
        """
        resolver = get_design_resolver(method)
        logger.debug(f"Building {method.value} design on {len(table)} rows")
        return resolver(table, spec if spec is not None else SampleDesignSpec())

    @staticmethod
    def build_from_mapping(
        table: pd.DataFrame, mapping: Mapping[str, Any], method: str = "simple"
    ) -> AbstractSurveyDesign:
        """Build a design directly from a mapping and a method name.

        This is a convenience method that combines create_spec_from_mapping
        and build into a single call.
        """
        spec = DesignService.create_spec_from_mapping(mapping)
        return DesignService.build(table, spec, DesignMethod.from_string(method))

    @staticmethod
    def get_validation_errors(spec: SampleDesignSpec) -> List[str]:
        """Get validation errors for design parameters.

        Args:
            spec: Design parameters

        Returns:
            List of validation error messages
        """
        return spec.validate()

    @staticmethod
    def get_available_methods() -> List[Tuple[str, str]]:
        """Get list of design types that can be built.

        Returns:
            List of (method_value, display_name) tuples
        """
        return [
            (method.value, _DISPLAY_NAMES[method])
            for method in DesignMethod
            if method in _RESOLVER_REGISTRY
        ]

