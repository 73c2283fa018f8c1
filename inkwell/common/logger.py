"""Logging setup for Inkwell.

Attaches a console handler and, when a log directory is configured, a
rotating file handler to the package logger. Module loggers created with
``logging.getLogger(__name__)`` propagate to it.
"""

import logging
import logging.handlers
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"  # ISO 8601
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(
    logging_config,
    name: str = "inkwell",
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Configure the ``name`` logger from a LoggingConfig.

    Handlers are only attached once per logger; later calls just update
    the level.

    Raises:
        ValueError: If the configured level is not a standard level name
    """
    level = str(logging_config.level).upper()
    if level not in LEVELS:
        raise ValueError(
            f"Invalid log level: {logging_config.level}. Must be one of: {', '.join(LEVELS)}"
        )

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if logging_config.file_logging:
        os.makedirs(logging_config.log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(logging_config.log_dir, f"{name}.log"),
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if logging_config.console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
