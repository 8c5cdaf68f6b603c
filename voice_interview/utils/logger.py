"""
Logging setup shared by every module of the practice engine.

Each module calls setup_logger("<module>"). Console output always goes to
stdout; when VOICE_INTERVIEW_LOG_FILE is set, all module loggers also append
to that one file.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from . import config


def setup_logger(
    name: str,
    log_level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Get a module logger, attaching handlers on first use.

    Args:
        name: Logger name, usually the module name
        log_level: Level name. Default: config.LOG_LEVEL
        log_file: Log file path. Default: config.LOG_FILE (console only if unset)

    Returns:
        Configured logger instance
    """
    level = getattr(logging, (log_level or config.LOG_LEVEL).upper())
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Handlers are attached once per logger name
    if logger.handlers:
        return logger

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    path = resolve_log_file(log_file or config.LOG_FILE)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def resolve_log_file(log_file: Optional[Union[str, Path]]) -> Optional[Path]:
    """Absolute log path; relative names are placed under LOGS_DIR."""
    if not log_file:
        return None
    path = Path(log_file)
    if not path.is_absolute():
        path = config.LOGS_DIR / path
    return path
