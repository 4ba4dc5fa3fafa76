"""
Logging Configuration
Sets up the package logger used by the model, the sweeps and the CLI.
"""
import logging
import sys
from typing import Optional

LOGGER_NAMESPACE = "springconstant"

# Layouts selectable from the command line (--log-format)
LOG_FORMATS: dict[str, str] = {
    "default": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    "short": '%(levelname)s: %(message)s',
    "debug": '%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s',
}


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_format: str = "default",
    propagate: bool = True,
) -> logging.Logger:
    """
    Configures the logger for the 'springconstant' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        log_format: Key of LOG_FORMATS used for console and file records.
        propagate: Whether records also reach the root logger's handlers.

    Returns:
        The configured package logger.
    """
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format '{log_format}', expected one of {', '.join(LOG_FORMATS)}.")

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    logger.propagate = propagate

    # Repeated CLI runs in one process must not stack handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMATS[log_format], datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized ({log_format} format).")
    return logger
