"""Logging setup for survey_design.

The configuration is a ``logging.config.dictConfig`` mapping written as TOML.
It is looked up in this order:

1. the ``path`` passed to ``setup_logging``
2. the file named by the SURVEY_DESIGN_LOG_CFG environment variable
3. ``logging_config.toml`` shipped inside the package

A missing file named by the environment variable silences the package
(NullHandler) instead of failing, so a stale variable never breaks callers.
"""

import logging
import logging.config
import os
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli

from survey_design.scripts import parameter as param


def _silence() -> logging.Logger:
    design_logger = logging.getLogger(param.log_root)
    for handler in design_logger.handlers[:]:
        design_logger.removeHandler(handler)
    design_logger.addHandler(logging.NullHandler())
    return design_logger


def _read_config(cfg_path: Path) -> Dict[str, Any]:
    if not cfg_path.is_file():
        raise FileNotFoundError(f"Logging config not found at {cfg_path}")
    with cfg_path.open("rb") as f:
        return tomli.load(f)


def load_default_config() -> Dict[str, Any]:
    """Read the logging configuration shipped with the package."""
    cfg = resources.files(param.log_cfg_package).joinpath(param.log_cfg_file)
    return tomli.loads(cfg.read_text(encoding="utf-8"))


def setup_logging(path: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Configure the ``survey_design`` loggers.

    Args:
        path: TOML logging configuration to load. Overrides the environment
            variable and the packaged default.

    Returns:
        The ``survey_design`` parent logger

    Raises:
        FileNotFoundError: If ``path`` (or the environment variable) names
            something that is not a file
    """
    if path is not None:
        cfg = _read_config(Path(path))
    elif os.getenv(param.log_cfg_env):
        env_path = Path(os.environ[param.log_cfg_env])
        if not env_path.exists():
            return _silence()
        cfg = _read_config(env_path)
    else:
        cfg = load_default_config()

    logging.config.dictConfig(cfg)
    return logging.getLogger(param.log_root)
