"""
    Logging setup for the chao command line.

    The library modules only create loggers under the `chao` namespace; this
    module attaches a handler to that namespace, colouring the level name by
    severity when stderr is a VT-100 compatible terminal.
"""

import logging
import os

# coloring only makes sense when stderr is attached to a terminal
has_a_tty = os.isatty(2)

RESET_SEQ = "\033[0m"
COLOR_SEQ = "\033[1;%dm"

BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

LEVEL_COLORS = {
    'DEBUG': BLUE,
    'INFO': GREEN,
    'WARNING': YELLOW,
    'ERROR': RED,
    'CRITICAL': RED,
}

LOG_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def color_me(color):
    """Return a function wrapping a message in the given terminal color code."""
    color_seq = COLOR_SEQ % (30 + color)

    def closure(msg):
        return color_seq + msg + RESET_SEQ
    return closure


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the record's level name by severity."""

    colors = {level: color_me(color) for level, color in LEVEL_COLORS.items()}

    def __init__(self, msg, use_color=True, datefmt=None):
        logging.Formatter.__init__(self, msg, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record):
        levelname = record.levelname
        if self.use_color and levelname in self.colors:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = self.colors[levelname](levelname)
        return logging.Formatter.format(self, record)


def setup_logging(level='WARNING', use_color=None):
    """Attach a single stderr handler to the `chao` logger at `level`."""
    if use_color is None:
        use_color = has_a_tty
    logger = logging.getLogger('chao')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if getattr(handler, '_chao_handler', False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler._chao_handler = True
    handler.setFormatter(ColoredFormatter(LOG_FORMAT, use_color=use_color, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger
