"""Settings from QUIZ_* environment variables."""

import pytest

from learning_track.config import DEFAULT_ANSWER_DELAY, load_settings


def test_defaults():
    settings = load_settings({})
    assert settings.variant == "classic"
    assert settings.answer_delay == DEFAULT_ANSWER_DELAY == 1.0
    assert settings.log_level == "WARNING"
    assert settings.log_file is None


def test_overrides():
    settings = load_settings({
        "QUIZ_VARIANT": "alternate",
        "QUIZ_ANSWER_DELAY": "0",
        "QUIZ_LOG_LEVEL": "debug",
        "QUIZ_LOG_FILE": "logs/quiz.log",
    })
    assert settings.variant == "alternate"
    assert settings.answer_delay == 0.0
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "logs/quiz.log"


@pytest.mark.parametrize("raw", ["soon", "-1", "nan", "inf"])
def test_invalid_delay_raises(raw):
    with pytest.raises(ValueError) as exc_info:
        load_settings({"QUIZ_ANSWER_DELAY": raw})
    assert "QUIZ_ANSWER_DELAY" in str(exc_info.value)
