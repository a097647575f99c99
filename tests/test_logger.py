"""
setup_loggerのテスト
"""

import logging
from contextlib import contextmanager

from src.story_journal.logger import setup_logger


@contextmanager
def bare_root_logger():
    """basicConfigが効くようにルートロガーのハンドラを一時的に外す"""
    root = logging.getLogger()
    httpx_logger = logging.getLogger("httpx")
    saved = (root.handlers[:], root.level, httpx_logger.level)
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers, level, httpx_level = saved
        root.setLevel(level)
        httpx_logger.setLevel(httpx_level)


def test_creates_log_directory_and_writes_file(tmp_path):
    log_file = tmp_path / "nested" / "logs" / "story_journal.log"

    with bare_root_logger() as root:
        setup_logger(log_level="info", log_file=str(log_file))
        logging.getLogger("journal.store").info("Journal saved")
        for handler in root.handlers:
            handler.flush()
        level = root.level

    assert level == logging.INFO
    assert "journal.store - INFO - Journal saved" in log_file.read_text(encoding="utf-8")


def test_httpx_request_logs_quieted_unless_debug(tmp_path):
    with bare_root_logger():
        setup_logger(log_level="INFO", log_file=str(tmp_path / "app.log"))
        info_level = logging.getLogger("httpx").level

    with bare_root_logger():
        setup_logger(log_level="DEBUG", log_file=str(tmp_path / "app.log"))
        debug_level = logging.getLogger("httpx").level

    assert info_level == logging.WARNING
    assert debug_level == logging.DEBUG


def test_unknown_level_falls_back_to_info(tmp_path):
    with bare_root_logger() as root:
        setup_logger(log_level="chatty", log_file=str(tmp_path / "app.log"))
        level = root.level

    assert level == logging.INFO
