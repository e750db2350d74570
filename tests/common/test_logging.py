"""Logging setup tests."""

import logging

import pytest

from election_portal.common.logging import get_logger, setup_logging


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_json_output(self, restore_root_logger, capsys) -> None:
        setup_logging(level="INFO", log_format="json")

        logging.getLogger("election_portal.test").info("stdlib message")

        err = capsys.readouterr().err
        assert '"event": "stdlib message"' in err
        assert '"level": "info"' in err

    def test_level_and_quiet_loggers(self, restore_root_logger) -> None:
        setup_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_get_logger(self) -> None:
        assert get_logger(__name__) is not None
