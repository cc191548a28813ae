import logging
from unittest.mock import patch

import pytest

from resource_kit.logging_setup import HTTP_LOGGERS, resolve_level, setup_logging


@pytest.fixture(autouse=True)
def restore_levels():
    names = ("resource_kit",) + HTTP_LOGGERS
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_explicit_level():
    with patch("resource_kit.logging_setup.logging.basicConfig") as basic_config:
        assert setup_logging("debug") == logging.DEBUG
    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
    assert logging.getLogger("resource_kit").level == logging.DEBUG


def test_env_level(monkeypatch):
    monkeypatch.setenv("RESOURCE_KIT_LOG_LEVEL", "WARNING")
    assert resolve_level() == logging.WARNING


def test_unknown_level_falls_back_to_info():
    assert resolve_level("chatty") == logging.INFO


def test_http_loggers_quiet_unless_debug():
    with patch("resource_kit.logging_setup.logging.basicConfig"):
        setup_logging("INFO")
        assert logging.getLogger("urllib3").level == logging.WARNING

        setup_logging("DEBUG")
        assert logging.getLogger("urllib3").level == logging.DEBUG
