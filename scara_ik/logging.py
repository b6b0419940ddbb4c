"""Logging setup with colored console output"""

import logging
import sys

ROOT_LOGGER_NAME = "scara_ik"


class ColoredFormatter(logging.Formatter):
    """Colors the level name for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # copy so other handlers see the uncolored record
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger (once) and set its level."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColoredFormatter(
            "%(asctime)s │ %(levelname)-8s │ %(name)-16s │ %(message)s",
            datefmt="%H:%M:%S"
        ))
        root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Named logger under the scara_ik namespace (e.g. "arm", "demo")."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
