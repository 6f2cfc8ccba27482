"""dirspec - cross-platform standard directory resolution with XDG overrides.

Each function returns ``Ok(path)`` or ``Err(DirectoryError)``. XDG variables
holding absolute paths take precedence; relative values are ignored and the
platform default is used instead.

dirspec's logging is disabled by default. Call ``dirspec.enable_logging()`` to
see it.
"""

from pathlib import PurePath

from result import Result

from dirspec.common import disable_library_logging, enable_library_logging
from dirspec.dirs import (
    DirectoryError,
    DirectoryKind,
    DirectoryNotFoundError,
    DirectoryResolver,
    EnvironmentVariableMissingError,
    HomeNotFoundError,
    MappingEnvironment,
    Platform,
    RuntimePolicy,
    UnsupportedDirectoryError,
)
from dirspec.settings import get_settings

disable_library_logging()

enable_logging = enable_library_logging


def default_resolver() -> DirectoryResolver:
    return DirectoryResolver.from_settings(get_settings())


def resolve(kind: DirectoryKind) -> Result[PurePath, DirectoryError]:
    return default_resolver().resolve(kind)


def home() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.HOME)


def bin_home() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.BIN_HOME)


def cache_home() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.CACHE_HOME)


def config_home() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.CONFIG_HOME)


def config_local() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.CONFIG_LOCAL)


def data_home() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.DATA_HOME)


def data_local() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.DATA_LOCAL)


def state_home() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.STATE_HOME)


def desktop() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.DESKTOP)


def documents() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.DOCUMENTS)


def downloads() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.DOWNLOADS)


def music() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.MUSIC)


def pictures() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.PICTURES)


def videos() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.VIDEOS)


def templates() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.TEMPLATES)


def publicshare() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.PUBLICSHARE)


def runtime() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.RUNTIME)


def fonts() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.FONTS)


def preferences() -> Result[PurePath, DirectoryError]:
    return resolve(DirectoryKind.PREFERENCES)


__all__ = [
    "DirectoryError",
    "DirectoryKind",
    "DirectoryNotFoundError",
    "DirectoryResolver",
    "EnvironmentVariableMissingError",
    "HomeNotFoundError",
    "MappingEnvironment",
    "Platform",
    "RuntimePolicy",
    "UnsupportedDirectoryError",
    "bin_home",
    "cache_home",
    "config_home",
    "config_local",
    "data_home",
    "data_local",
    "default_resolver",
    "desktop",
    "documents",
    "downloads",
    "enable_logging",
    "fonts",
    "home",
    "music",
    "pictures",
    "preferences",
    "publicshare",
    "resolve",
    "runtime",
    "state_home",
    "templates",
    "videos",
]
