from __future__ import annotations

import pytest

from dirspec.dirs.environment import MappingEnvironment, OsEnvironment


def test_os_environment_reads_current_value(monkeypatch: pytest.MonkeyPatch) -> None:
    environment = OsEnvironment()

    monkeypatch.setenv("DIRSPEC_TEST_VALUE", "first")
    assert environment.read("DIRSPEC_TEST_VALUE") == "first"

    monkeypatch.setenv("DIRSPEC_TEST_VALUE", "second")
    assert environment.read("DIRSPEC_TEST_VALUE") == "second"


def test_os_environment_returns_none_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DIRSPEC_TEST_VALUE", raising=False)

    assert OsEnvironment().read("DIRSPEC_TEST_VALUE") is None


def test_os_environment_treats_empty_value_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DIRSPEC_TEST_VALUE", "")

    assert OsEnvironment().read("DIRSPEC_TEST_VALUE") is None


def test_mapping_environment_reads_from_mapping() -> None:
    environment = MappingEnvironment({"HOME": "/home/u", "EMPTY": ""})

    assert environment.read("HOME") == "/home/u"
    assert environment.read("EMPTY") is None
    assert environment.read("MISSING") is None


def test_mapping_environment_is_isolated_from_process(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", "/home/process")

    assert MappingEnvironment().read("HOME") is None
