"""Logging setup shared by all modules of the sequence engine."""

import logging
import sys

ROOT_LOGGER_NAME = 'recseq'

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger():
    """Set up the package root logger with a single handler.

    Only the first call has an effect, so handlers are never duplicated.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.WARNING)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(handler)

    # propagate so that pytest's caplog sees the records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name):
    """Return a logger below the package root logger.

    Module names are mapped into the package namespace, e.g. ``chain``
    becomes ``recseq.chain``.
    """
    setup_root_logger()

    if not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = '{}.{}'.format(ROOT_LOGGER_NAME, name)
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level):
    """Set the level of the package root logger and all of its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.WARNING)
    for handler in root_logger.handlers:
        handler.setLevel(level)
