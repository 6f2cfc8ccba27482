"""Protocols for the process state the resolver reads."""

from __future__ import annotations

from typing import Protocol


class EnvironmentReader(Protocol):
    """Read access to environment variables."""

    def read(self, name: str) -> str | None: ...


class UserDatabase(Protocol):
    """Read access to the system user-account database."""

    def current_uid(self) -> int | None: ...

    def home_directory(self) -> str | None: ...
