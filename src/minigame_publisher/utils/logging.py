"""Console logging for the publisher: verbosity levels and a coloured stdout handler."""

import logging
import sys
from enum import IntEnum

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class VerboseLevel(IntEnum):
    """Verbosity as written in the ``verbose_level`` config key (0 silences output)."""

    NONE = 0
    ERRORS = 1
    WARNINGS = 2
    INFO = 3
    DEBUG = 4

    @property
    def logging_level(self) -> int:
        return {
            VerboseLevel.NONE: logging.CRITICAL + 1,
            VerboseLevel.ERRORS: logging.ERROR,
            VerboseLevel.WARNINGS: logging.WARNING,
            VerboseLevel.INFO: logging.INFO,
            VerboseLevel.DEBUG: logging.DEBUG,
        }[self]


class CustomFormatter(logging.Formatter):
    """Colours the level name and message by severity."""

    COLORS = {
        logging.DEBUG: '\033[0;36m',
        logging.INFO: '\033[0;32m',
        logging.WARNING: '\033[0;33m',
        logging.ERROR: '\033[0;31m',
        logging.CRITICAL: '\033[0;35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, '')
        # Work on a copy; other handlers must see the plain record.
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f'{color}{record.levelname}{self.RESET}'
        colored.msg = f'{color}{record.msg}{self.RESET}'
        return super().format(colored)


def get_logger(name: str, level: int = VerboseLevel.INFO) -> logging.Logger:
    """
    Return the named logger writing coloured lines to stdout.

    Calling it again for the same name replaces the handler instead of stacking a new one.
    ``level`` may be a :class:`VerboseLevel` or the plain integer read from a config file.
    """
    logger = logging.getLogger(name)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return set_logger_level(logger, level)


def set_logger_level(logger: logging.Logger, level: int) -> logging.Logger:
    level = VerboseLevel(level)
    logger.setLevel(level.logging_level)
    logger.disabled = level == VerboseLevel.NONE
    return logger
