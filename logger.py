"""
Logging for the action config editor.

Registry mutations are logged at DEBUG, exports at INFO and rejected exports
at WARNING. Records go to stderr so an artifact printed on stdout stays
parseable. `--verbose` (or VERBOSE=true) lowers every editor logger to DEBUG.
"""

import logging
import sys
from typing import Dict

from config import Config


class Logger:
    """Hands out one configured logger per module name."""

    _loggers: Dict[str, logging.Logger] = {}

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if name in cls._loggers:
            return cls._loggers[name]

        logger = logging.getLogger(name)

        level_name = 'DEBUG' if Config.VERBOSE else Config.LOG_LEVEL.upper()
        logger.setLevel(getattr(logging, level_name, logging.INFO))

        if not logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            logger.addHandler(handler)

        cls._loggers[name] = logger
        return logger


def get_logger(module_name: str) -> logging.Logger:
    """Convenience function to get a logger for a module."""
    return Logger.get_logger(module_name)


def set_level(level_name: str) -> None:
    """Change the level of every logger handed out so far."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    for logger in Logger._loggers.values():
        logger.setLevel(level)
