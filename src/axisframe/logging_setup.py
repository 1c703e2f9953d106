"""Logging setup for applications embedding axisframe.

The library itself only creates module loggers; it never configures
handlers on import. Applications call configure_logging() once.
"""

import logging
from pathlib import Path
from typing import Optional

from axisframe.schemas import InternalConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(config: InternalConfig, log_path: Optional[Path | str] = None) -> logging.Logger:
    """Install console (and optionally file) handlers on the axisframe logger.

    Parameters
    ----------
    config : InternalConfig
        Supplies the log level (config.logging.level).

    log_path : Path or str, optional
        If given, also log to this file. Parent directories are created.

    Returns
    -------
    logging.Logger
        The configured "axisframe" package logger.
    """
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # Clear existing handlers and add new ones
    root = logging.getLogger("axisframe")
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    logger.info("Logging: level=%s, file=%s", logging.getLevelName(log_level), log_path)
    return root
