from __future__ import annotations

import pytest
from result import is_err, is_ok

import dirspec
import dirspec.settings as settings_module
from dirspec import DirectoryKind, Platform, RuntimePolicy
from dirspec.settings import Settings


@pytest.fixture
def linux_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    settings = Settings(platform=Platform.LINUX, runtime_policy=RuntimePolicy.TMP)
    monkeypatch.setattr(settings_module, "_settings", settings)
    return settings


@pytest.fixture
def windows_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    settings = Settings(platform=Platform.WINDOWS)
    monkeypatch.setattr(settings_module, "_settings", settings)
    return settings


def test_module_functions_use_configured_platform(
    linux_settings: Settings, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", "/home/u")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("XDG_DOWNLOAD_DIR", "/srv/downloads")
    monkeypatch.setenv("TMPDIR", "/scratch")
    monkeypatch.delenv("XDG_RUNTIME_DIR", raising=False)

    assert str(dirspec.home().unwrap()) == "/home/u"
    assert str(dirspec.config_home().unwrap()) == "/home/u/.config"
    assert str(dirspec.downloads().unwrap()) == "/srv/downloads"
    assert str(dirspec.runtime().unwrap()) == "/scratch"
    assert dirspec.config_local() == dirspec.config_home()


def test_module_functions_cover_every_kind(linux_settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", "/home/u")

    for kind in DirectoryKind:
        function = getattr(dirspec, kind.value)
        assert function() == dirspec.resolve(kind)


def test_windows_module_functions(windows_settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_PUBLICSHARE_DIR", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    assert str(dirspec.publicshare().unwrap()) == "C:\\Users\\Public"
    assert is_err(dirspec.fonts())
    assert is_err(dirspec.config_home())


def test_results_expose_option_shape(linux_settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", "/home/u")
    monkeypatch.setenv("XDG_CACHE_HOME", "cache")

    result = dirspec.cache_home()

    assert is_ok(result)
    assert str(result.ok()) == "/home/u/.cache"


def test_default_resolver_follows_settings(windows_settings: Settings) -> None:
    assert dirspec.default_resolver().platform is Platform.WINDOWS
