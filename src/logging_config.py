"""Structured logging setup (JSON in production, plain text locally)."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == "text":
        return logging.Formatter(_TEXT_FORMAT, datefmt="%H:%M:%S")
    return JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        },
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Point the root logger and uvicorn's loggers at a single stdout handler.

    ``log_format="text"`` swaps the JSON formatter for a human-readable one;
    any other value keeps JSON output.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(log_format))

    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.addHandler(handler)
        uv_logger.propagate = False

    # httpx logs full request URLs at INFO; SerpAPI keys ride in the query string
    logging.getLogger("httpx").setLevel(logging.WARNING)
