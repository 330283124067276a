import pytest
from pydantic import ValidationError

from myapp._version import __version__
from myapp.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "HOST", "APP_VERSION", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.app_version == __version__
    assert settings.log_level == "INFO"


def test_port_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "9090")
    assert Settings(_env_file=None).port == 9090


def test_empty_port_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "")
    assert Settings(_env_file=None).port == 8080


def test_invalid_port_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_version_override_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_VERSION", "v2.0.1")
    assert Settings(_env_file=None).app_version == "v2.0.1"


def test_settings_are_immutable() -> None:
    settings = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.app_version = "changed"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
