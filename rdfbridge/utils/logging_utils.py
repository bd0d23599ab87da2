"""
Logging helpers for rdfbridge

The package logs through standard-library loggers named after each module.
Applications decide where records go; these helpers only set levels.
"""

import logging
from typing import Optional, Union

from ..config.config_loader import RdfBridgeConfig, get_config

PACKAGE_LOGGER = "rdfbridge"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Set the level of the rdfbridge package logger.

    Args:
        level: Logging level name or number

    Returns:
        The package logger
    """
    if isinstance(level, str):
        numeric_level = getattr(logging, level.upper(), logging.INFO)
    else:
        numeric_level = level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)
    return logger


def configure_logging_from_config(config: Optional[RdfBridgeConfig] = None) -> logging.Logger:
    """Set the package log level from configuration (app.log_level / RDFBRIDGE_LOG_LEVEL)."""
    if config is None:
        config = get_config()
    return configure_logging(config.get_log_level())
