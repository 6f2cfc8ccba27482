"""Environment variable readers."""

from __future__ import annotations

import os
from collections.abc import Mapping


class OsEnvironment:
    """Reads the live process environment on every call."""

    def read(self, name: str) -> str | None:
        return os.environ.get(name) or None


class MappingEnvironment:
    """Reads variables from a fixed mapping instead of the process environment."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def read(self, name: str) -> str | None:
        return self._values.get(name) or None

    def __repr__(self) -> str:
        return f"MappingEnvironment({self._values!r})"
