"""Survey design scripts package.

Contains table access, calculation and formatting helpers used by the
design classes.
"""

from .calc_utils import (
    common_value,
    is_equal_weighted,
    reciprocal,
    require_positive,
    round_population_size,
)
from .formatting import describe, format_short
from .logger import setup_logging
from .table_utils import (
    check_length,
    get_column,
    row_count,
    set_column,
    to_numeric_vector,
)

__all__ = [
    # Calculations
    "is_equal_weighted",
    "common_value",
    "reciprocal",
    "require_positive",
    "round_population_size",
    # Table access
    "row_count",
    "get_column",
    "set_column",
    "check_length",
    "to_numeric_vector",
    # Presentation
    "format_short",
    "describe",
    # Logging
    "setup_logging",
]
