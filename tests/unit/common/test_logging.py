from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger

import dirspec
from dirspec.common import disable_library_logging
from dirspec.dirs.environment import MappingEnvironment
from dirspec.dirs.models import Platform
from dirspec.dirs.resolver import DirectoryResolver


@pytest.fixture
def captured() -> Iterator[list[str]]:
    messages: list[str] = []
    dirspec.enable_logging("DEBUG")
    handler_id = logger.add(messages.append, level="DEBUG", format="{extra[scope]} {message}")
    yield messages
    logger.remove(handler_id)
    logger.remove()
    disable_library_logging()


def test_library_logging_is_disabled_by_default() -> None:
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="TRACE", format="{message}")
    try:
        resolver = DirectoryResolver(platform=Platform.LINUX, environment=MappingEnvironment({"XDG_CACHE_HOME": "x"}))
        resolver.cache_home()
    finally:
        logger.remove(handler_id)

    assert not any("Ignoring relative XDG override" in message for message in messages)


def test_relative_override_is_logged(captured: list[str]) -> None:
    resolver = DirectoryResolver(
        platform=Platform.LINUX,
        environment=MappingEnvironment({"HOME": "/home/u", "XDG_CONFIG_HOME": "relative/config"}),
    )

    resolver.config_home()

    assert any(message.startswith("xdg Ignoring relative XDG override") for message in captured)


def test_failed_default_is_logged(captured: list[str]) -> None:
    resolver = DirectoryResolver(platform=Platform.WINDOWS, environment=MappingEnvironment())

    resolver.config_home()

    assert any(message.startswith("defaults Default rule failed") for message in captured)


def test_enable_logging_returns_handler_id() -> None:
    handler_id = dirspec.enable_logging("INFO")
    try:
        assert isinstance(handler_id, int)
    finally:
        logger.remove()
        disable_library_logging()
