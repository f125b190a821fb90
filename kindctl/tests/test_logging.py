import logging

from kindctl.logging import resolve_level, setup_logger


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO


def test_setup_logger_is_reentrant():
    logger = setup_logger("kindctl.tests.api", "info")
    again = setup_logger("kindctl.tests.api", "warning")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.handlers[0].level == logging.WARNING
    assert logger.propagate is False
