import logging

import pytest

from RPNCalc import logging_config


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    ("INFO", logging.INFO),
    ("Warning", logging.WARNING),
    ("verbose", None),
    (7, None),
])
def test_resolve_level(name, expected):
    assert logging_config.resolve_level(name) == expected


def test_configure_logging_defaults_to_setting():
    assert logging_config.configure_logging() == logging.INFO


def test_unknown_level_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        assert logging_config.configure_logging("loud") == logging.INFO
    assert "Unknown log_level 'loud'" in caplog.text
