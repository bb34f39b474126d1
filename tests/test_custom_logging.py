import logging
from unittest.mock import patch, call

from interview_coach.custom_logging import LOG_FORMAT_DEBUG, LOG_FORMAT_DEFAULT, LogLevels, configure_logging


def test_log_levels():
    assert [level.value for level in LogLevels] == ["DEBUG", "INFO", "WARNING", "ERROR"]


@patch("interview_coach.custom_logging.logging.basicConfig")
def test_configure_logging(basic_config):
    tests = [
        ("debug", logging.DEBUG, LOG_FORMAT_DEBUG),
        ("INFO", logging.INFO, LOG_FORMAT_DEFAULT),
        ("warning", logging.WARNING, LOG_FORMAT_DEFAULT),
        ("loud", logging.ERROR, LOG_FORMAT_DEFAULT),
    ]
    for level, expected_level, expected_format in tests:
        basic_config.reset_mock()
        configure_logging(level)
        assert basic_config.mock_calls[0] == call(level=expected_level, format=expected_format), f"---> {level}"


@patch("interview_coach.custom_logging.logging.error")
@patch("interview_coach.custom_logging.logging.basicConfig")
def test_configure_logging_unknown_level(basic_config, log_error):
    configure_logging("loud")
    assert basic_config.mock_calls == [call(level=logging.ERROR, format=LOG_FORMAT_DEFAULT)]
    assert log_error.mock_calls == [call("Unknown log level 'LOUD', falling back to ERROR")]
