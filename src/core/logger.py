# core/logger.py
import logging

LOGGER_NAME = "raytracer"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def init_logger(level: int = logging.INFO) -> logging.Logger:
    """Configure the root handler once and return the package logger."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)
    return log

def get_logger(name: str) -> logging.Logger:
    """Child logger of the package logger, e.g. get_logger("renderer")."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
