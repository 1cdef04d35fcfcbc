"""
Logging for contentschema.

Library modules log through the loguru ``logger`` exported here and never
configure sinks on import. Applications that want the package's log layout
call ``setup_logging`` once at startup, as the CLI does.
"""

import inspect
import logging
import sys
from pathlib import Path

from loguru import logger

from ..settings import Settings, get_settings

LOG_FILE_NAME = "contentschema.log"

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames inside the logging module so loguru reports the real caller
        frame, depth = inspect.currentframe(), 0
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def add_file_sink(log_file: str | Path, config: Settings) -> int:
    """Add a rotating, zip-compressed file sink and return its loguru id."""
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    return logger.add(
        str(log_path),
        level=config.log_level,
        format=config.log_format or DEFAULT_FORMAT,
        rotation=config.log_rotation,
        retention=config.log_retention,
        compression="zip",
        backtrace=True,
        diagnose=True,
    )


def setup_logging(
    config: Settings | None = None,
    *,
    log_file: str | Path | None = None,
    intercept_stdlib: bool = False,
) -> None:
    """
    Replace loguru's sinks with the configured stderr and file sinks.

    Args:
        config: Settings to read log options from (default: cached settings)
        log_file: File sink path; defaults to the settings log directory.
            Only used when ``config.log_to_file`` is set.
        intercept_stdlib: Also route the standard library root logger to loguru
    """
    config = config or get_settings()

    logger.remove()
    logger.add(
        sys.stderr,
        level=config.log_level,
        format=config.log_format or DEFAULT_FORMAT,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    if config.log_to_file:
        add_file_sink(log_file or config.get_log_dir() / LOG_FILE_NAME, config)

    if intercept_stdlib:
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


__all__ = ["InterceptHandler", "add_file_sink", "logger", "setup_logging"]
