import pytest


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove matcher settings from the environment."""
    for name in ("APP_ENV", "LOG_LEVEL", "DEFAULT_DIGIT_LIMIT"):
        monkeypatch.delenv(name, raising=False)
