"""Logging setup shared by the API and the Streamlit help page."""
from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Attach console and, optionally, file handlers to the root logger.

    ``FAQSEARCH_LOG_LEVEL`` picks the level unless ``level`` is given.
    ``FAQSEARCH_LOG_FILE`` names the log file; set it to an empty string to
    log to the console only. Calling this twice is a no-op.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    level_name = (level or os.getenv("FAQSEARCH_LOG_LEVEL", "INFO")).upper()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = os.getenv("FAQSEARCH_LOG_FILE", "faqsearch.log")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
