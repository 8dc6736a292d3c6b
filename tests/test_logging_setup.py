import logging
from directory_api.logging_setup import LOG_FORMAT, QUIET_LOGGERS, configure_logging

def test_configure_logging_sets_level_and_format():
    configure_logging("debug")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(getattr(h.formatter, "_fmt", None) == LOG_FORMAT for h in root.handlers)
    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
    configure_logging("INFO")

def test_unknown_level_falls_back_to_info():
    configure_logging("chatty")
    assert logging.getLogger().level == logging.INFO
