import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name, level=logging.INFO):
    """
    Creates and returns a logger with the specified name.

    Cloud Functions forwards stdout/stderr to Cloud Logging, so a single
    stream handler per logger is all each function needs.

    Args:
        name: The name for the logger, typically __name__ from the calling module
        level: The minimum level to emit, applied when the logger is first configured

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure handlers if they haven't been added yet
    if not logger.handlers:
        logger.setLevel(level)

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
