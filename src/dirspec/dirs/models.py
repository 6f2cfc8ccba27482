"""Directory kinds, platform families and resolution error models."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from pydantic import BaseModel, ConfigDict


class DirectoryKind(str, Enum):
    """Logical directories that can be resolved."""

    HOME = "home"
    BIN_HOME = "bin_home"
    CACHE_HOME = "cache_home"
    CONFIG_HOME = "config_home"
    CONFIG_LOCAL = "config_local"
    DATA_HOME = "data_home"
    DATA_LOCAL = "data_local"
    STATE_HOME = "state_home"
    DESKTOP = "desktop"
    DOCUMENTS = "documents"
    DOWNLOADS = "downloads"
    MUSIC = "music"
    PICTURES = "pictures"
    VIDEOS = "videos"
    TEMPLATES = "templates"
    PUBLICSHARE = "publicshare"
    RUNTIME = "runtime"
    FONTS = "fonts"
    PREFERENCES = "preferences"


class Platform(str, Enum):
    """Operating system families with distinct directory conventions."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"

    @classmethod
    def current(cls) -> Platform:
        if sys.platform == "win32":
            return cls.WINDOWS
        if sys.platform == "darwin":
            return cls.MACOS
        return cls.LINUX

    @property
    def is_unix(self) -> bool:
        return self is not Platform.WINDOWS

    def path_type(self) -> type[PurePath]:
        """Path class for this platform.

        The host platform gets concrete ``Path`` objects; any other platform gets
        the matching pure flavour so paths can be computed on any host.
        """
        if self is Platform.current():
            return Path
        if self is Platform.WINDOWS:
            return PureWindowsPath
        return PurePosixPath


class RuntimePolicy(str, Enum):
    """How the Linux runtime directory is derived when XDG_RUNTIME_DIR is unset."""

    UID = "uid"
    TMP = "tmp"


class DirectoryError(BaseModel):
    """Base directory resolution error."""

    model_config = ConfigDict(extra="forbid")

    kind: DirectoryKind
    message: str


class HomeNotFoundError(DirectoryError):
    """The current user's home directory could not be determined."""


class EnvironmentVariableMissingError(DirectoryError):
    """A platform variable needed for the default location is unset."""

    variable: str


class UnsupportedDirectoryError(DirectoryError):
    """The platform has no convention for this directory."""

    platform: Platform


class DirectoryNotFoundError(DirectoryError):
    """No rule produced a location for this directory."""
