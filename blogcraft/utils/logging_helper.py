#!/usr/bin/env python
"""
logging_helper.py – one-call setup: file + stderr.

Usage:
    from blogcraft.utils.logging_helper import get_logger
    log = get_logger()                  # derives name from caller's file
    log.info("It works")

The level comes from BLOGCRAFT_LOG_LEVEL (default INFO). Module loggers are
created when their module is imported, which happens before the CLI reads
.env; the CLI calls set_level() once the environment is complete.
"""

from __future__ import annotations
import inspect, logging, sys, os
from pathlib import Path
from typing import Optional, Union

from .paths import LOG_DIR

NAMESPACE = "blogcraft"
LEVEL_ENV = "BLOGCRAFT_LOG_LEVEL"
DEF_FMT  = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEF_DATE = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Turn 'debug' / 'INFO' / 10 / None (→ env var, then INFO) into a level."""
    if level is None:
        level = os.environ.get(LEVEL_ENV) or logging.INFO
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: '{level}'")
    return value


def _caller_name(frame_info: inspect.FrameInfo) -> str:
    module = inspect.getmodule(frame_info.frame)
    if module and module.__name__ != "__main__":
        return module.__name__.split(".")[-1]
    # run as a script: use the file-stem (e.g., compose)
    return os.path.splitext(os.path.basename(frame_info.filename))[0]


def get_logger(level: Union[int, str, None] = None,
               log_dir: str | Path = LOG_DIR) -> logging.Logger:
    """
    Create (or return existing) logger 'blogcraft.<module>' for the caller
    (e.g. 'blogcraft.session'). Writes to logs/<module>.log and echoes to
    stderr, so stdout stays free for command output such as JSON records.
    """
    name = _caller_name(inspect.stack()[1])
    logger = logging.getLogger(f"{NAMESPACE}.{name}")
    if logger.handlers:                 # already initialised
        return logger

    try:
        level = resolve_level(level)
    except ValueError:
        level = logging.INFO            # main() reports the bad env value
    logger.setLevel(level)

    Path(log_dir).mkdir(parents=True, exist_ok=True)

    fh = logging.FileHandler(Path(log_dir) / f"{name}.log", encoding="utf-8")
    fh.setFormatter(logging.Formatter(DEF_FMT, DEF_DATE))

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    for handler in (fh, ch):
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def set_level(level: Union[int, str, None] = None) -> int:
    """Re-level every blogcraft logger (and its handlers) made so far."""
    level = resolve_level(level)
    prefix = f"{NAMESPACE}."
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not name.startswith(prefix) or not isinstance(logger, logging.Logger):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    return level
