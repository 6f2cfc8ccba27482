from __future__ import annotations

import pytest
from pydantic import ValidationError

import dirspec.settings as settings_module
from dirspec.dirs.models import Platform, RuntimePolicy
from dirspec.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DIRSPEC_PLATFORM", raising=False)
    monkeypatch.delenv("DIRSPEC_RUNTIME_POLICY", raising=False)


def test_defaults_follow_host() -> None:
    settings = Settings()

    assert settings.platform is None
    assert settings.runtime_policy is RuntimePolicy.UID
    assert settings.resolved_platform() is Platform.current()


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DIRSPEC_PLATFORM", "windows")
    monkeypatch.setenv("DIRSPEC_RUNTIME_POLICY", "tmp")

    settings = Settings()

    assert settings.resolved_platform() is Platform.WINDOWS
    assert settings.runtime_policy is RuntimePolicy.TMP


def test_invalid_platform_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DIRSPEC_PLATFORM", "plan9")

    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_returns_singleton(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings_module, "_settings", None)

    first = get_settings()

    assert get_settings() is first
