"""
Home Energy Model Logging Configuration.

One root configuration shared by the CLI, the demo and library callers:
- Console output through rich (stderr, so report tables on stdout stay clean)
- Optional JSON-lines log file for batch runs
- Level from HEM_LOG_LEVEL, file location from HEM_LOG_DIR
- Model context (scenario, month, orientation, bill index) appended to
  every message that carries it

Usage:
    from src.utils.logging_config import get_logger

    logger = get_logger(__name__)
    logger.warning("Odd billing period", extra={"bill_index": 4})

    scenario_log = get_logger(__name__, scenario="roof")
    scenario_log.info("Model built")        # ... [scenario=roof]
"""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from rich.console import Console
from rich.logging import RichHandler


DEFAULT_LOG_LEVEL = os.environ.get("HEM_LOG_LEVEL", "INFO").upper()

LOG_DIR = Path(os.environ.get("HEM_LOG_DIR", "logs"))

# Record attributes reported when passed via ``extra``
CONTEXT_KEYS = ("scenario", "month", "orientation", "bill_index")


def _context(record: logging.LogRecord) -> Dict[str, Any]:
    return {key: getattr(record, key) for key in CONTEXT_KEYS if hasattr(record, key)}


class ContextFormatter(logging.Formatter):
    """Message followed by its model context, e.g. ``Solar gain [month=7]``."""

    def __init__(self, fmt: str = "%(name)s | %(message)s"):
        super().__init__(fmt=fmt)

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        context = _context(record)
        if context:
            pairs = ", ".join(f"{key}={value}" for key, value in context.items())
            formatted = f"{formatted} [{pairs}]"
        return formatted


class JsonLinesFormatter(logging.Formatter):
    """One JSON object per line for log files."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_context(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class ScenarioAdapter(logging.LoggerAdapter):
    """Logger adapter that tags every record with a fixed scenario name."""

    def process(self, msg, kwargs):
        extra = dict(self.extra)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_to_file: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure logging for the entire application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also log to a file
        log_file: Custom log file path (default: logs/hem_YYYYMMDD.log)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setFormatter(ContextFormatter())
    console_handler.setLevel(numeric_level)
    root_logger.addHandler(console_handler)

    if log_to_file:
        if log_file is None:
            path = LOG_DIR / f"hem_{datetime.now().strftime('%Y%m%d')}.log"
        else:
            path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(JsonLinesFormatter())
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        root_logger.addHandler(file_handler)


def get_logger(
    name: str,
    scenario: Optional[str] = None,
) -> Union[logging.Logger, ScenarioAdapter]:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)
        scenario: Bind a scenario name to every record

    Returns:
        Plain logger, or a ScenarioAdapter when a scenario is given
    """
    logger = logging.getLogger(name)
    if scenario is None:
        return logger
    return ScenarioAdapter(logger, {"scenario": scenario})
