import pytest

from config import Config
from tests.conftest import FIXED_MS


def test_defaults():
    config = Config()
    assert config.max_length == 200
    assert config.blank_prefix == "unnamed_file_"
    assert config.empty_prefix == "video_"
    assert config.log_level == "INFO"


def test_environment_overrides(monkeypatch, fixed_clock):
    monkeypatch.setenv("SANITIZE_MAX_LENGTH", "50")
    monkeypatch.setenv("SANITIZE_EMPTY_PREFIX", "clip_")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config()

    assert config.log_level == "DEBUG"
    assert config.sanitize("a" * 60) == "a" * 50
    assert config.sanitize("***", clock=fixed_clock) == f"clip_{FIXED_MS}"
    assert config.sanitize(None, clock=fixed_clock) == f"unnamed_file_{FIXED_MS}"


def test_env_file(tmp_path, fixed_clock):
    env_file = tmp_path / ".env"
    env_file.write_text("SANITIZE_BLANK_PREFIX=untitled_\n")

    config = Config(env_file=str(env_file))

    assert config.blank_prefix == "untitled_"
    assert config.sanitize("   ", clock=fixed_clock) == f"untitled_{FIXED_MS}"


def test_blank_length_uses_default(monkeypatch):
    monkeypatch.setenv("SANITIZE_MAX_LENGTH", " ")
    assert Config().max_length == 200


@pytest.mark.parametrize(
    "var, value, message",
    [
        ("SANITIZE_MAX_LENGTH", "abc", "must be an integer"),
        ("SANITIZE_MAX_LENGTH", "0", "must be positive"),
        ("SANITIZE_MAX_LENGTH", "10", "too short"),
        ("SANITIZE_BLANK_PREFIX", "bad/", "not a safe filename prefix"),
        ("SANITIZE_EMPTY_PREFIX", "end.", "not a safe filename prefix"),
        ("LOG_LEVEL", "chatty", "not a logging level"),
    ],
)
def test_invalid_settings(monkeypatch, var, value, message):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValueError, match=message):
        Config()
