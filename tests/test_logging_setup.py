import logging

from core.logging_setup import resolve_level, setup_logging


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("bogus") == logging.INFO
    assert resolve_level(None) == logging.INFO


def test_gateway_loggers_are_quieted():
    setup_logging("INFO")
    assert logging.getLogger("discord.gateway").level == logging.WARNING
    assert logging.getLogger("discord.http").level == logging.WARNING
