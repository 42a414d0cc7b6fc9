# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for the "runway" logger.

The parser only emits debug records (recognizer matches, scope changes, unparsed
tokens, collected errors). `setup_logging()` attaches handlers to the "runway"
logger alone, so a host application's own logging configuration is left alone.
It is usually driven by the `logging` section of a Runway config file through
`runway.config.loader(..., setup_logs=True)`.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODES = ("cli", "json")
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )
    handler = logging.StreamHandler()
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    return handler


def _file_handler(log_file: str, json_file: bool) -> logging.Handler:
    handler = logging.FileHandler(log_file, "a", "UTF-8")
    if json_file:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", "%H:%M:%S")
        )
    return handler


def setup_logging(
    mode: str | None = None,
    level: int | str = logging.WARNING,
    log_file: str | None = None,
    json_file: bool = False,
) -> logging.Logger:
    """
    Configure the "runway" logger.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for structured
            records. Defaults to `RUNWAY_LOG_MODE`, then "cli".
        level (int | str): Level for the "runway" logger, e.g. "DEBUG" to trace
            every parse step.
        log_file (str | None): Optional file receiving the same records.
        json_file (bool): Write the file as JSON lines instead of plain text.

    Returns:
        logging.Logger: The configured "runway" logger.

    Raises:
        ValueError: If `mode` or `level` is not recognised.
    """
    mode = mode or os.getenv("RUNWAY_LOG_MODE") or "cli"
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}. Must be one of: {', '.join(LOG_MODES)}")

    runway_logger = logging.getLogger("runway")
    runway_logger.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in list(runway_logger.handlers):
        runway_logger.removeHandler(handler)
        handler.close()

    runway_logger.addHandler(_console_handler(mode))
    if log_file:
        runway_logger.addHandler(_file_handler(log_file, json_file))
    runway_logger.propagate = False
    runway_logger.debug("Logging initialized in '%s' mode.", mode)
    return runway_logger
