"""Colored console logging."""

import logging

RESET = "\033[0m"
BOLD = "\033[1m"
GREY = "\033[90m"

# level -> (short label, color)
LEVEL_STYLES = {
    logging.DEBUG: ("DEBG", "\033[36m"),
    logging.INFO: ("INFO", "\033[32m"),
    logging.WARNING: ("WARN", "\033[33m"),
    logging.ERROR: ("ERRR", "\033[31m"),
    logging.CRITICAL: ("CRIT", "\033[41m"),
}


class LevelColorFormatter(logging.Formatter):
    """Prefix each record with a grey time and a colored four-letter level tag."""

    def __init__(self):
        super().__init__(datefmt="%H:%M")

    def format(self, record: logging.LogRecord) -> str:
        label, color = LEVEL_STYLES.get(record.levelno, (record.levelname[:4], ""))
        stamp = self.formatTime(record, self.datefmt)
        message = super().format(record)
        return f"{GREY}{stamp}{RESET} {BOLD}{color}{label}{RESET} {message}"


def setup_logging(level: int = logging.WARNING) -> None:
    """Attach the colored formatter to the package logger."""
    logger = logging.getLogger("links_folder")
    logger.setLevel(level)
    if not any(isinstance(h.formatter, LevelColorFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(LevelColorFormatter())
        logger.addHandler(handler)
