import logging
import sys

CONFIG = {
    "CELL_SIZE": 23,
    "FPS": 60,
    "LOG_LEVEL": "INFO",
}


def setup_logging():
    """Send the ``tetris`` loggers to stdout with a timestamp prefix."""
    logger = logging.getLogger("tetris")
    logger.setLevel(CONFIG["LOG_LEVEL"])

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(
        "[%(asctime)s] %(levelname)s %(message)s", "%Y-%m-%d %H:%M:%S"))
    logger.addHandler(console_handler)
    return logger
