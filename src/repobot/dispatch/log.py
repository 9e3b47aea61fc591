"""Logging setup.

Two logging surfaces:
- rich-colored stderr output (human-readable)
- an optional JSONL file (machine-readable)

Both are attached to the "repobot" logger; module loggers propagate to it.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing_extensions import override

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "repobot"


class JSONFormatter(logging.Formatter):
    """Format log records as a single-line JSON object."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        return json.dumps(log_obj)


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> logging.Logger:
    """Configure the "repobot" logger.

    Existing handlers are closed and replaced, so calling this repeatedly never
    duplicates output.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for h in list(logger.handlers):
        try:
            h.close()
        finally:
            logger.removeHandler(h)

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        json_handler = logging.FileHandler(log_file, encoding="utf-8")
        json_handler.setFormatter(JSONFormatter())
        logger.addHandler(json_handler)

    return logger
