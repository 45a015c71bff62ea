import pytest

CONFIG_VARS = (
    "SANITIZE_MAX_LENGTH",
    "SANITIZE_BLANK_PREFIX",
    "SANITIZE_EMPTY_PREFIX",
    "LOG_LEVEL",
)

FIXED_MS = 1_700_000_000_000


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without sanitizer settings in the environment."""
    for var in CONFIG_VARS:
        # setenv first so monkeypatch also undoes values loaded by dotenv
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_MS
