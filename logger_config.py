"""
Logging configuration for the Support client.

Every module logs through get_logger(__name__). Records go to stdout as
'YYYY-MM-DD HH:MM:SS - <logger> - <LEVEL> - <message>', which Lambda ships
to CloudWatch Logs unchanged. The level comes from LOG_LEVEL (DEBUG, INFO,
WARNING, ERROR or CRITICAL; unknown values fall back to INFO). The transport
logs successful calls at INFO and failed ones at ERROR; the Lambda decorator
logs validation errors at WARNING.
"""
import logging
import os
import sys


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to this module's name if not provided)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or __name__)

    # Handlers are attached once per logger name
    if logger.handlers:
        return logger

    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logger.level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)

    logger.propagate = False

    return logger
