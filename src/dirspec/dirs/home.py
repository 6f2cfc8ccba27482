"""Home directory resolution."""

from __future__ import annotations

import os
import sys
from pathlib import PurePath

from result import Err, Ok, Result

from dirspec.common import create_logger

from .models import DirectoryError, DirectoryKind, HomeNotFoundError, Platform
from .protocol import EnvironmentReader, UserDatabase

logger = create_logger("home")


class PasswdUserDatabase:
    """User database backed by the ``pwd`` module (Unix only)."""

    def current_uid(self) -> int | None:
        if sys.platform == "win32":
            return None
        return os.getuid()

    def home_directory(self) -> str | None:
        if sys.platform == "win32":
            return None

        import pwd

        try:
            entry = pwd.getpwuid(os.getuid())
        except KeyError:
            return None

        home = entry.pw_dir
        if not home:
            return None
        try:
            # Undecodable bytes come back as surrogate escapes
            home.encode("utf-8")
        except UnicodeEncodeError:
            return None
        return home


class HomeResolver:
    """Resolves the current user's home directory.

    Environment variables win (``HOME`` on Unix, ``USERPROFILE`` on Windows).
    Unix falls back to the user database entry for the current uid; Windows
    falls back to ``HOMEDRIVE`` + ``HOMEPATH``.
    """

    def __init__(self, platform: Platform, environment: EnvironmentReader, user_database: UserDatabase) -> None:
        self._platform = platform
        self._environment = environment
        self._user_database = user_database
        self._path_type = platform.path_type()

    def resolve(self) -> Result[PurePath, DirectoryError]:
        home = self._resolve_unix() if self._platform.is_unix else self._resolve_windows()
        if home is None:
            logger.debug("Home directory could not be resolved", platform=self._platform.value)
            return Err(
                HomeNotFoundError(
                    kind=DirectoryKind.HOME,
                    message="could not resolve home directory",
                )
            )
        return Ok(self._path_type(home))

    def _resolve_unix(self) -> str | None:
        home = self._environment.read("HOME")
        if home is not None:
            return home
        return self._user_database.home_directory()

    def _resolve_windows(self) -> str | None:
        profile = self._environment.read("USERPROFILE")
        if profile is not None:
            return profile

        drive = self._environment.read("HOMEDRIVE")
        path = self._environment.read("HOMEPATH")
        if drive is not None and path is not None:
            return f"{drive}{path}"
        return None
