"""Base class for survey designs.

Defines the interface that every survey design type implements. The data to
a design constructor is modified: ``weights`` and ``probs`` columns are
written to it. To avoid this pass a copy of the data instead of the original.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

import numpy as np
import pandas as pd

from survey_design.design.types import DesignMethod
from survey_design.scripts import parameter as param
from survey_design.scripts.formatting import describe


class AbstractSurveyDesign(ABC):
    """Abstract base class for survey designs.

    Subclasses hold the survey data and whatever design fields their
    constructor resolves. Presentation only reads fields that construction
    always sets.
    """

    table: pd.DataFrame

    @property
    @abstractmethod
    def method(self) -> DesignMethod:
        """Return the design type."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name for this design type."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Scalar design fields as a plain dictionary."""
        pass

    @property
    def weights(self) -> np.ndarray:
        """Frequency weights stored on the survey data."""
        return self.table[param.weights_column].to_numpy()

    @property
    def probs(self) -> np.ndarray:
        """Inclusion probabilities stored on the survey data."""
        return self.table[param.probs_column].to_numpy()

    def describe(self) -> str:
        """Render the design as multi-line text."""
        return describe(self)

    def __str__(self) -> str:
        return self.describe()
