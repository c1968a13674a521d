"""
Library log helpers.

The library does not configure logging. Host application adds handlers
to the `pathparse` logger (or to the root logger).
"""

import logging


#: Library logger.
logger = logging.getLogger('pathparse')
logger.addHandler(logging.NullHandler())


def log(msg, level=None):
    """Library log."""
    if isinstance(msg, bytes):
        msg = msg.decode('utf-8')
    elif not isinstance(msg, str):
        msg = str(msg)
    if level is None:
        level = logging.INFO
    logger.log(level, msg)


def log_error(msg):
    log(msg, level=logging.ERROR)


def log_warning(msg):
    log(msg, level=logging.WARNING)


def log_info(msg):
    log(msg, level=logging.INFO)


def log_debug(msg):
    log(msg, level=logging.DEBUG)


log.error = log_error
log.warning = log_warning
log.info = log_info
log.debug = log_debug
