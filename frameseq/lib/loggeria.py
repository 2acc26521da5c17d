"""Logging setup for the frameseq package.

Every module logs through logging.getLogger(__name__), so all records end up
on the "frameseq" logger configured here.
"""
import logging
import logging.handlers
import os
import sys

LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]

LEVEL_MAP = dict((name, logging.getLevelName(name)) for name in LEVELS)

FORMATTER = logging.Formatter('%(asctime)s %(name)s%(levelname)9s:  %(message)s')

FRAMESEQ_LOGGER_NAME = "frameseq"

# Log files roll over daily and a week of them is kept.
FILE_ROLLOVER_HOURS = 24
FILE_BACKUP_COUNT = 7

# Set on handlers we create, so repeated setup replaces rather than stacks them.
_OWNED = "_frameseq_owned"


class BelowErrorFilter(logging.Filter):
    """Let through only records less severe than ERROR.

    Host applications often flag anything on stderr as a failure, so
    routine records go to stdout and only errors go to stderr.
    """

    def filter(self, record):
        return record.levelno < logging.ERROR


def get_frameseq_logger():
    """Return the "frameseq" package's logger object."""
    return logging.getLogger(FRAMESEQ_LOGGER_NAME)


def _owned(handler):
    setattr(handler, _OWNED, True)
    handler.setFormatter(FORMATTER)
    return handler


def setup_frameseq_logging(level_name="INFO", log_filepath=None):
    """Attach console handlers, and optionally a rotating file handler.

    Calling this again replaces the handlers from the previous call.
    """
    logger = get_frameseq_logger()
    set_frameseq_log_level(level_name)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    stdout_handler = _owned(logging.StreamHandler(sys.stdout))
    stdout_handler.addFilter(BelowErrorFilter())
    logger.addHandler(stdout_handler)

    stderr_handler = _owned(logging.StreamHandler(sys.stderr))
    stderr_handler.setLevel(logging.ERROR)
    logger.addHandler(stderr_handler)

    if log_filepath:
        log_dirpath = os.path.dirname(log_filepath)
        if log_dirpath and not os.path.isdir(log_dirpath):
            os.makedirs(log_dirpath)
        logger.addHandler(_owned(logging.handlers.TimedRotatingFileHandler(
            log_filepath, when='h', interval=FILE_ROLLOVER_HOURS,
            backupCount=FILE_BACKUP_COUNT)))

    return logger


def set_frameseq_log_level(level_name):
    """Set the "frameseq" package's logger to the given level name."""
    assert level_name in LEVEL_MAP, "Invalid log level: %s" % level_name
    get_frameseq_logger().setLevel(LEVEL_MAP[level_name])
