# pokeview/logger.py
import logging

from pokeview import config

LOGGER = logging.getLogger("pokeview")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

if not LOGGER.handlers:
    _formatter = logging.Formatter(LOG_FORMAT)
    _stream = logging.StreamHandler()
    _stream.setFormatter(_formatter)
    LOGGER.addHandler(_stream)
    if config.LOG_FILE:
        _file = logging.FileHandler(config.LOG_FILE, encoding="utf-8")
        _file.setFormatter(_formatter)
        LOGGER.addHandler(_file)
    LOGGER.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))


def log_action(message: str, level: int = logging.INFO):
    LOGGER.log(level, message)
