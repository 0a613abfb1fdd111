"""Тесты настройки логирования"""

import logging

import pytest

from logging_config import ColoredFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only():
    setup_logging(log_file=False, level="WARNING")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ColoredFormatter)


def test_file_handler(tmp_path):
    setup_logging(log_file=True, debug=True, log_dir=tmp_path / "logs")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert any(p.name.startswith("localization_") for p in (tmp_path / "logs").iterdir())


def test_colored_formatter_keeps_levelname():
    formatter = ColoredFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
    assert formatter.format(record) == "\033[31mERROR\033[0m boom"
    assert record.levelname == "ERROR"
