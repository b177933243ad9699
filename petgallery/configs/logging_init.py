"""
Centralized logging initialization to avoid circular imports.
This module initializes both the petgallery and petgallery-cli loggers
with the same verbosity settings from the global configuration.
"""

import logging
from typing import Optional

from petgallery.cli.cli_logging import setup_logging as setup_cli_logging
from petgallery.configs.custom_logging import format_pydantic, setup_logging
from petgallery.configs.settings_models import Settings

# Re-export format_pydantic for use by other modules
__all__ = ["logger", "initialize_loggers", "format_pydantic"]

settings = Settings()

logger = setup_logging(__name__, level=settings.logging.verbosity_level)


def initialize_loggers(
    verbose: Optional[bool] = True,
    verbose_level: Optional[str] = None,
) -> logging.Logger:
    """
    Initialize all loggers with consistent settings.

    Args:
        verbose: Boolean flag indicating whether verbose logging is enabled
        verbose_level: String indicating the verbosity level (DEBUG, INFO, etc.)
            If None, uses the level from settings.

    Returns:
        The configured logger instance
    """
    if verbose_level is None:
        verbose_level = settings.logging.verbosity_level

    if verbose is None:
        verbose = True

    setup_cli_logging(verbose=verbose, verbose_level=verbose_level)

    # Reconfigure in place so modules holding a reference keep logging
    setup_logging(__name__, level=verbose_level)

    return logger
