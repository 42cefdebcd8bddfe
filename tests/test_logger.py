"""
Tests for the colored console / rotating file logger.
"""
import logging

from densitybox.library import Logger, get_logger


def test_console_colors_and_plain_file(tmp_path, capsys):
    log_file = tmp_path / "logs" / "run.log"
    logger = Logger(level_console=Logger.INFO, filename=log_file, name="test_colors")
    logger.info("[GREEN]done %s", "ok")
    logger.debug("hidden on console")
    logger.close()

    out = capsys.readouterr().out
    assert "\033[92mdone ok" in out
    assert "hidden on console" not in out

    text = log_file.read_text(encoding="utf-8")
    assert "done ok" in text
    assert "[GREEN]" not in text
    assert "hidden on console" in text


def test_warning_format(capsys):
    logger = Logger(name="test_warning")
    logger.warning("careful")
    logger.close()
    assert "WARNING: careful" in capsys.readouterr().out


def test_get_logger_default():
    assert get_logger().name == "densitybox"
    custom = logging.getLogger("custom")
    assert get_logger(custom) is custom
