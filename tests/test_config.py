"""
Unit tests for persian_chrono/config and the leap-rule / logger factories.
"""

import logging

import pytest

from persian_chrono import BirashkRule, Config, ConfigError, ThirtyThreeYearRule, get_rule
from persian_chrono.utils.logger import CustomLogger, error_handler


def test_defaults():
    assert Config.get_reference_timezone("Asia/Tehran").zone == "Asia/Tehran"
    settings = Config.get_logging_config()
    assert settings['max_bytes'] == 5 * 1024 * 1024
    assert settings['backup_count'] == 3


def test_unknown_reference_timezone():
    with pytest.raises(ConfigError):
        Config.get_reference_timezone("Nowhere/Special")


@pytest.mark.parametrize("name,cls", [
    ("33", ThirtyThreeYearRule),
    (" 2820 ", BirashkRule),
    (2820, BirashkRule),
])
def test_get_rule(name, cls):
    assert isinstance(get_rule(name), cls)
    assert isinstance(Config.get_leap_rule(str(name)), cls)


def test_unknown_rule():
    with pytest.raises(ConfigError) as excinfo:
        get_rule("julian")
    assert "julian" in excinfo.value.message


def test_logger_rejects_unknown_level():
    with pytest.raises(ConfigError):
        CustomLogger("Broken", level="LOUD")


def test_logger_writes_rotating_file(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "persian_chrono.log"
    monkeypatch.setattr(Config, "LOG_FILE", str(log_file))
    logger = CustomLogger("FileTest", level="INFO")
    logger.info("converted %s", "1403-08-20")
    for handler in logger.logger.handlers:
        handler.flush()
    assert "converted 1403-08-20" in log_file.read_text()
    assert logger.name == "FileTest"


def test_error_handler_logs_and_reraises(caplog):
    logger = CustomLogger("DecoratorTest")

    @error_handler(logger)
    def explode():
        raise ValueError("boom")

    with caplog.at_level(logging.DEBUG, logger="persian_chrono.DecoratorTest"):
        with pytest.raises(ValueError):
            explode()
    assert "Error in explode: boom" in caplog.text
    assert explode.__name__ == "explode"


def test_error_handler_stays_quiet_at_default_level(caplog):
    logger = CustomLogger("QuietTest", level="WARNING")

    @error_handler(logger)
    def explode():
        raise ValueError("boom")

    with caplog.at_level(logging.WARNING, logger="persian_chrono.QuietTest"):
        with pytest.raises(ValueError):
            explode()
    assert not [r for r in caplog.records if r.name == "persian_chrono.QuietTest"]
