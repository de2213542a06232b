"""Centralized logging configuration for dotinstall."""

import logging
import sys
from pathlib import Path

from .api.config.DotinstallConfig import DotinstallConfig
from .api.config.get_home_dir import get_home_dir

# LogConfig spells WARNING the short way
_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: DotinstallConfig, log_file: Path | None = None) -> Path:
    """Configure the ``dotinstall`` logger.

    Records at the configured level go to the logfile under the dotinstall
    home directory; warnings and errors are also echoed to stderr. Calling
    this again replaces the previously installed handlers.

    Args:
        config: Loaded configuration; its ``log`` section picks level and file
        log_file: Optional override for the logfile path

    Returns:
        The logfile path in use
    """
    if log_file is None:
        log_file = get_home_dir(config.log.file)

    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(_LEVELS[config.log.level])
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)

    logger = logging.getLogger("dotinstall")
    logger.setLevel(_LEVELS[config.log.level])
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in (file_handler, stderr_handler):
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
    return log_file
