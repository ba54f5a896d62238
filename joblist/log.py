"""Logging for the listing client.

Every module asks ``get_logger(__name__)`` for its logger. The first call
attaches a stdout handler at ``LOG_LEVEL`` and, unless ``JOBLIST_LOG_FILE=0``,
a DEBUG-level file under ``logs/listing-YYYY-MM-DD.log`` so request traces
survive a Streamlit rerun.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import date
from pathlib import Path

LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_configured = False


def get_logger(name: str) -> logging.Logger:
    global _configured
    if not _configured:
        _install_handlers()
        _configured = True
    return logging.getLogger(name)


def _with_format(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
    return handler


def _install_handlers() -> None:
    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    # Streamlit or pytest may already own the root logger
    if root.handlers:
        return

    root.addHandler(_with_format(logging.StreamHandler(sys.stdout), level))

    if os.environ.get("JOBLIST_LOG_FILE", "1") == "0":
        return
    log_file = LOG_DIR / f"listing-{date.today().isoformat()}.log"
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        root.addHandler(_with_format(logging.FileHandler(log_file, encoding="utf-8"), logging.DEBUG))
    except OSError as exc:
        root.warning("File logging disabled, cannot write %s: %s", log_file, exc)
