import logging

from textual.logging import TextualHandler

from skill_search.logging_config import setup_logging


def test_file_logging(tmp_path):
    log_file = tmp_path / "logs" / "skill-search.log"
    handler = setup_logging("info", log_file)
    logging.getLogger("skill_search.scanner").info("scanned %d skills", 3)
    handler.flush()
    assert "scanned 3 skills" in log_file.read_text()
    assert logging.getLogger("skill_search").level == logging.INFO


def test_default_handler_is_textual():
    handler = setup_logging()
    logger = logging.getLogger("skill_search")
    assert isinstance(handler, TextualHandler)
    assert logger.handlers == [handler]
    assert logger.level == logging.WARNING


def test_repeated_setup_replaces_handler(tmp_path):
    setup_logging("debug", tmp_path / "a.log")
    setup_logging("debug", tmp_path / "b.log")
    assert len(logging.getLogger("skill_search").handlers) == 1
