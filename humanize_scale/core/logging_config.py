import logging
import sys

LOGGER_NAME = "humanize_scale"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Configure and setup package logging.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        logging.Logger: Configured logger instance
    """
    # Create formatter
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Create console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    # Get package logger
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Clear any existing handlers to avoid duplicates
    logger.handlers.clear()

    logger.addHandler(console_handler)

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Names already inside the package namespace are returned as-is, so
    get_logger(__name__) and logging.getLogger(__name__) agree.

    Args:
        name: The name of the module/logger

    Returns:
        logging.Logger: Logger instance
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


# Configure logging for external libraries
def configure_external_loggers():
    """Configure logging levels for external libraries to reduce noise."""
    # Reduce uvicorn access logging noise
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    # Reduce httpx logging noise (used by the FastAPI test client)
    logging.getLogger("httpx").setLevel(logging.WARNING)
