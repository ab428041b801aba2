"""Shared fixtures for survey_design tests."""

import logging

import pandas as pd
import pytest


@pytest.fixture
def survey_data():
    """Ten observations of a single measured variable."""
    return pd.DataFrame({"income": [41.0, 52.5, 38.0, 47.2, 55.1, 60.3, 44.4, 51.0, 39.9, 46.6]})


@pytest.fixture
def make_table():
    """Factory building a table with ``n`` rows and optional extra columns."""

    def _make(n, **columns):
        data = {"y": list(range(n))}
        data.update(columns)
        return pd.DataFrame(data)

    return _make


@pytest.fixture
def restore_design_logger():
    """Restore the survey_design logger after tests that reconfigure logging."""
    design_logger = logging.getLogger("survey_design")
    handlers = design_logger.handlers[:]
    level = design_logger.level
    propagate = design_logger.propagate
    yield design_logger
    design_logger.handlers[:] = handlers
    design_logger.setLevel(level)
    design_logger.propagate = propagate
