"""Text rendering of survey designs."""

import numbers
from typing import List

import numpy as np

from survey_design.scripts import parameter as param


def _round_sigdigits(value: float, digits: int) -> float:
    if not np.isfinite(value) or value == 0:
        return float(value)
    return float(f"{value:.{digits}g}")


def format_short(x) -> str:
    """Format a value or vector for a one-line preview.

    Floats are rounded to three significant digits. Vectors shorter than
    three elements are printed in full, longer ones as the first three
    elements followed by the last one.

    Examples:
        >>> format_short([2.0, 2.0, 2.0, 2.0])
        '2.0, 2.0, 2.0 ... 2.0'
        >>> format_short(0.123456)
        '0.123'
    """
    if isinstance(x, (bool, np.bool_)):
        return str(bool(x))

    if isinstance(x, numbers.Number):
        if isinstance(x, (float, np.floating)):
            return str(_round_sigdigits(float(x), param.short_sigdigits))
        return str(x)

    values: List = list(np.asarray(x).tolist())
    if values and isinstance(values[0], float):
        values = [_round_sigdigits(v, param.short_sigdigits) for v in values]

    if len(values) < param.short_head:
        return str(values)

    head = ", ".join(str(v) for v in values[: param.short_head])
    return f"{head} ... {values[-1]}"


def describe(design) -> str:
    """Render a simple random sample design as text.

    Args:
        design: A constructed ``SimpleRandomSampleDesign``

    Returns:
        Multi-line summary with data dimensions, weight and probability
        previews and the scalar design fields
    """
    rows, cols = design.table.shape
    lines = [
        f"{design.display_name}:",
        f"data: {rows}x{cols} DataFrame",
        f"weights: {format_short(design.weights)}",
        f"probs: {format_short(design.probs)}",
        f"fpc: {format_short(design.fpc)}",
        f"popsize: {format_short(design.population_size)}",
        f"sampsize: {format_short(design.sample_size)}",
        f"sampfraction: {format_short(design.sample_fraction)}",
        f"ignorefpc: {format_short(design.ignore_fpc)}",
    ]
    return "\n".join(lines)
