import logging
import sys

from colorlog import ColoredFormatter

# Configured by the CLI verbose callback
logger = logging.getLogger("petgallery-cli")
logger.propagate = True

CLI_LOG_FORMAT = (
    "%(log_color)s%(levelname)-8s%(reset)s %(asctime)s %(name)s:%(lineno)d - %(message)s"
)


def setup_logging(verbose: bool = False, verbose_level: str = "INFO") -> logging.Logger:
    """
    Configure the CLI logger.

    Records go to stderr; stdout carries the command output (tables, status
    lines) so it can be piped. Without ``verbose`` only errors are shown.
    """
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ColoredFormatter(
            CLI_LOG_FORMAT,
            datefmt="%H:%M:%S",
            reset=True,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
    )
    logger.addHandler(handler)

    level = getattr(logging, verbose_level.upper(), logging.INFO) if verbose else logging.ERROR
    logger.setLevel(level)
    return logger
