from loguru import logger
import os

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {module}:{function}:{line} - {message}"


def setup_logging(log_file: str = "logs/app.log", level: str = "INFO") -> int:
    """Add the rotating file sink and return its handler id"""
    log_dir = os.path.dirname(log_file)
    if log_dir:
        # Create logs directory if it doesn't exist
        os.makedirs(log_dir, exist_ok=True)

    handler_id = logger.add(
        log_file,
        rotation="500 MB",
        level=level,
        format=LOG_FORMAT
    )
    logger.info(f"Logging to {log_file} at level {level}")
    return handler_id


# Export logger instance
__all__ = ['logger', 'setup_logging']
