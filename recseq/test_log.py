import logging

from recseq.log import get_logger, set_global_log_level, ROOT_LOGGER_NAME


def test_get_logger_maps_into_package_namespace():
    assert get_logger('chain').name == ROOT_LOGGER_NAME + '.chain'
    assert get_logger(ROOT_LOGGER_NAME + '.chain').name == ROOT_LOGGER_NAME + '.chain'


def test_child_logger_inherits_level():
    assert get_logger('anything').level == logging.NOTSET


def test_set_global_log_level():
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    previous = root_logger.level
    try:
        set_global_log_level(logging.DEBUG)
        assert root_logger.level == logging.DEBUG
        assert get_logger('chain').isEnabledFor(logging.DEBUG)
    finally:
        set_global_log_level(previous)


def test_root_logger_has_a_single_handler():
    get_logger('chain')
    get_logger('sequence')
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1
