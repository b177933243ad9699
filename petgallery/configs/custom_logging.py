import logging
import re
import sys
from io import StringIO
from typing import Any

import pydantic
from colorlog import ColoredFormatter
from rich.console import Console
from rich.pretty import Pretty
from rich.theme import Theme

custom_theme = Theme(
    {
        "repr.tag_name": "bold magenta",
        "repr.attrib_name": "yellow",
        "repr.attrib_value": "green",
        "repr.attrib_equal": "dim",
        "repr.bool_true": "bold bright_green",
        "repr.bool_false": "bold bright_red",
        "repr.none": "dim",
        "repr.number": "cyan",
        "repr.str": "green",
        "repr.brace": "bold dim",
    }
)


def format_pydantic(model: pydantic.BaseModel, max_line_length: int = 80) -> str:
    """
    Format a Pydantic model on one line for use in f-strings.

    Long lists (breed or image sets) are collapsed to their length so that a
    whole QueryState fits in a log line.

    Args:
        model: A Pydantic model instance
        max_line_length: Maximum length before falling back to one field per line

    Returns:
        Formatted string representation of the model
    """
    if not isinstance(model, pydantic.BaseModel):
        return str(model)

    model_name = model.__class__.__name__
    items = [f"{key}={_plain_format_value(value)}" for key, value in model.model_dump().items()]

    single_line = f"{model_name}({', '.join(items)})"
    if len(single_line) <= max_line_length:
        return single_line

    lines = [f"{model_name}("]
    lines.extend(f"    {item}," for item in items)
    lines.append(")")
    return "\n".join(lines)


def _plain_format_value(value: Any) -> str:
    """Format a value without color codes"""
    if isinstance(value, str):
        if len(value) > 30:
            return f"'{value[:27]}...'"
        return f"'{value}'"
    elif isinstance(value, list | tuple):
        if len(value) <= 3:
            return repr(value) if len(repr(value)) <= 40 else f"[{len(value)} items]"
        return f"[{len(value)} items]"
    elif isinstance(value, dict):
        if len(value) <= 2:
            items = [f"{k}: {_plain_format_value(v)}" for k, v in value.items()]
            return f"{{{', '.join(items)}}}"
        return f"{{{len(value)} items}}"
    return repr(value)


class RichReprFormatter(ColoredFormatter):
    """
    A colored formatter that pretty-prints Pydantic models and containers
    passed directly as the log message.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.string_console = Console(
            highlight=True, width=120, theme=custom_theme, file=StringIO()
        )

    def _render_pretty(self, obj: Any) -> str:
        self.string_console.file = StringIO()
        self.string_console.print(Pretty(obj))
        return self.string_console.file.getvalue().strip()

    def format(self, record):
        if isinstance(record.msg, pydantic.BaseModel):
            record.msg = format_pydantic(record.msg)
        elif not isinstance(record.msg, str | int | float | bool | type(None)):
            record.msg = self._render_pretty(record.msg)

        # Shorten pathname to start from 'petgallery/'
        match = re.search(r"(petgallery/.*?)$", record.pathname)
        if match:
            record.pathname = match.group(1)

        return super().format(record)


def setup_logging(name=None, level="INFO"):
    """
    Set up the ``petgallery`` logger with:
    - Path from petgallery folder only
    - Colored level name
    - Bold line number and function name
    - Rich representation for Pydantic models
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("petgallery")
    logger.setLevel(numeric_level)
    logger.propagate = True

    # Remove any existing handlers to avoid duplicates
    if logger.handlers:
        logger.handlers = []

    formatter = RichReprFormatter(
        "%(asctime)s - %(log_color)s%(levelname)s%(reset)s - %(pathname)s:%(bold)s%(lineno)d%(reset)s - %(bold)s%(funcName)s%(reset)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        reset=True,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
        secondary_log_colors={
            "bold": {
                "DEBUG": "bold",
                "INFO": "bold",
                "WARNING": "bold",
                "ERROR": "bold",
                "CRITICAL": "bold",
            }
        },
        style="%",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


# The logger will be initialized by logging_init.py
