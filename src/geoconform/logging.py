import logging
import os

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(name: str) -> int:
    # WARNING for library usage, INFO for the command line front end.
    # GEOCONFORM_LOG_LEVEL overrides both.
    default_level = logging.WARNING
    if name.endswith('.cli'):
        default_level = logging.INFO

    level_name = os.getenv('GEOCONFORM_LOG_LEVEL', logging.getLevelName(default_level))
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        return default_level
    return level


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    # Validator loggers are siblings under "geoconform"; keep each record on one handler.
    logger.propagate = False

    logger.setLevel(_resolve_level(name))
    return logger
