"""XDG Base Directory override variables."""

from __future__ import annotations

from pathlib import PurePath

from dirspec.common import create_logger

from .models import DirectoryKind
from .protocol import EnvironmentReader

logger = create_logger("xdg")

XDG_VARIABLES: dict[DirectoryKind, str] = {
    DirectoryKind.BIN_HOME: "XDG_BIN_HOME",
    DirectoryKind.CACHE_HOME: "XDG_CACHE_HOME",
    DirectoryKind.CONFIG_HOME: "XDG_CONFIG_HOME",
    DirectoryKind.DATA_HOME: "XDG_DATA_HOME",
    DirectoryKind.STATE_HOME: "XDG_STATE_HOME",
    DirectoryKind.DESKTOP: "XDG_DESKTOP_DIR",
    DirectoryKind.DOCUMENTS: "XDG_DOCUMENTS_DIR",
    DirectoryKind.DOWNLOADS: "XDG_DOWNLOAD_DIR",
    DirectoryKind.MUSIC: "XDG_MUSIC_DIR",
    DirectoryKind.PICTURES: "XDG_PICTURES_DIR",
    DirectoryKind.PUBLICSHARE: "XDG_PUBLICSHARE_DIR",
    DirectoryKind.RUNTIME: "XDG_RUNTIME_DIR",
    DirectoryKind.TEMPLATES: "XDG_TEMPLATES_DIR",
    DirectoryKind.VIDEOS: "XDG_VIDEOS_DIR",
}


def resolve_override(
    kind: DirectoryKind,
    environment: EnvironmentReader,
    path_type: type[PurePath],
) -> PurePath | None:
    """Return the XDG override for ``kind`` if it is set to an absolute path.

    Relative values must be ignored, so they are treated exactly like an unset
    variable.
    """
    variable = XDG_VARIABLES.get(kind)
    if variable is None:
        return None

    value = environment.read(variable)
    if value is None:
        return None

    path = path_type(value)
    if not path.is_absolute():
        logger.debug("Ignoring relative XDG override", variable=variable, value=value)
        return None
    return path
