import logging

from bitword.utils import logging as bitword_logging
from bitword.utils.logging import NoColorFormatter, build_logger


def test_no_color_formatter_strips_codes():
    formatter = NoColorFormatter(fmt="%(message)s")
    record = logging.LogRecord("bitword", logging.WARNING, __file__, 1, "\x1b[31mFAIL\x1b[0m: add", None, None)
    assert formatter.format(record) == "FAIL: add"


def test_build_logger_writes_file(tmp_path):
    logger = build_logger("bitword.test", "test.log", logger_dir=str(tmp_path / "a"), level="DEBUG")
    logger.info("hello")
    bitword_logging.handler.flush()
    assert "| INFO | bitword.test | hello" in (tmp_path / "a" / "test.log").read_text(encoding="utf-8")


def test_build_logger_moves_handler(tmp_path):
    build_logger("bitword.test", "test.log", logger_dir=str(tmp_path / "a"))
    first = bitword_logging.handler
    logger = build_logger("bitword.test", "test.log", logger_dir=str(tmp_path / "b"))
    assert bitword_logging.handler is not first
    assert first not in logger.handlers
    assert bitword_logging.handler in logger.handlers
    assert (tmp_path / "b" / "test.log").exists()
