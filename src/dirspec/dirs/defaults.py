"""Platform default locations, as a literal table keyed by platform and kind."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PurePath
from typing import TypeAlias

from result import Err, Ok, Result

from dirspec.common import create_logger

from .models import (
    DirectoryError,
    DirectoryKind,
    DirectoryNotFoundError,
    EnvironmentVariableMissingError,
    Platform,
    RuntimePolicy,
    UnsupportedDirectoryError,
)
from .protocol import EnvironmentReader, UserDatabase

logger = create_logger("defaults")

DirectoryResult: TypeAlias = Result[PurePath, DirectoryError]


@dataclass(frozen=True)
class RuleContext:
    """Everything a default rule may consult while deriving a path."""

    platform: Platform
    environment: EnvironmentReader
    user_database: UserDatabase
    runtime_policy: RuntimePolicy
    home: Callable[[], DirectoryResult]
    resolve: Callable[[DirectoryKind], DirectoryResult]

    @property
    def path_type(self) -> type[PurePath]:
        return self.platform.path_type()


@dataclass(frozen=True)
class HomeRelative:
    """``home / parts``."""

    parts: tuple[str, ...]

    def apply(self, kind: DirectoryKind, context: RuleContext) -> DirectoryResult:
        return context.home().map(lambda home: home.joinpath(*self.parts))


@dataclass(frozen=True)
class FromVariable:
    """``$variable / parts``; fails when the variable is unset."""

    variable: str
    parts: tuple[str, ...] = ()

    def apply(self, kind: DirectoryKind, context: RuleContext) -> DirectoryResult:
        value = context.environment.read(self.variable)
        if value is None:
            return Err(
                EnvironmentVariableMissingError(
                    kind=kind,
                    variable=self.variable,
                    message=f"could not resolve {kind.value} directory: {self.variable} is not set",
                )
            )
        return Ok(context.path_type(value).joinpath(*self.parts))


@dataclass(frozen=True)
class Fixed:
    """A hardcoded absolute location."""

    path: str

    def apply(self, kind: DirectoryKind, context: RuleContext) -> DirectoryResult:
        return Ok(context.path_type(self.path))


@dataclass(frozen=True)
class SameAs:
    """Whatever another kind resolves to, override included."""

    target: DirectoryKind

    def apply(self, kind: DirectoryKind, context: RuleContext) -> DirectoryResult:
        return context.resolve(self.target)


@dataclass(frozen=True)
class TempDirectory:
    """``$TMPDIR``, or ``/tmp`` when it is unset."""

    def apply(self, kind: DirectoryKind, context: RuleContext) -> DirectoryResult:
        return Ok(context.path_type(context.environment.read("TMPDIR") or "/tmp"))


@dataclass(frozen=True)
class UserRuntime:
    """``/run/user/{uid}`` under the uid policy, otherwise the temp directory."""

    def apply(self, kind: DirectoryKind, context: RuleContext) -> DirectoryResult:
        if context.runtime_policy is RuntimePolicy.TMP:
            return TempDirectory().apply(kind, context)

        uid = context.user_database.current_uid()
        if uid is None:
            return Err(
                DirectoryNotFoundError(
                    kind=kind,
                    message=f"could not resolve {kind.value} directory: current uid is unknown",
                )
            )
        return Ok(context.path_type("/run/user") / str(uid))


@dataclass(frozen=True)
class Unsupported:
    """The platform has no conventional location."""

    def apply(self, kind: DirectoryKind, context: RuleContext) -> DirectoryResult:
        return Err(
            UnsupportedDirectoryError(
                kind=kind,
                platform=context.platform,
                message=f"{kind.value} directory has no convention on {context.platform.value}",
            )
        )


DefaultRule: TypeAlias = HomeRelative | FromVariable | Fixed | SameAs | TempDirectory | UserRuntime | Unsupported

DEFAULT_RULES: dict[Platform, dict[DirectoryKind, DefaultRule]] = {
    Platform.LINUX: {
        DirectoryKind.BIN_HOME: HomeRelative((".local", "bin")),
        DirectoryKind.CACHE_HOME: HomeRelative((".cache",)),
        DirectoryKind.CONFIG_HOME: HomeRelative((".config",)),
        DirectoryKind.CONFIG_LOCAL: SameAs(DirectoryKind.CONFIG_HOME),
        DirectoryKind.DATA_HOME: HomeRelative((".local", "share")),
        DirectoryKind.DATA_LOCAL: SameAs(DirectoryKind.DATA_HOME),
        DirectoryKind.STATE_HOME: HomeRelative((".local", "state")),
        DirectoryKind.DESKTOP: HomeRelative(("Desktop",)),
        DirectoryKind.DOCUMENTS: HomeRelative(("Documents",)),
        DirectoryKind.DOWNLOADS: HomeRelative(("Downloads",)),
        DirectoryKind.MUSIC: HomeRelative(("Music",)),
        DirectoryKind.PICTURES: HomeRelative(("Pictures",)),
        DirectoryKind.VIDEOS: HomeRelative(("Videos",)),
        DirectoryKind.TEMPLATES: HomeRelative(("Templates",)),
        DirectoryKind.PUBLICSHARE: HomeRelative(("Public",)),
        DirectoryKind.RUNTIME: UserRuntime(),
        DirectoryKind.FONTS: HomeRelative((".local", "share", "fonts")),
        DirectoryKind.PREFERENCES: SameAs(DirectoryKind.CONFIG_HOME),
    },
    Platform.MACOS: {
        DirectoryKind.BIN_HOME: HomeRelative((".local", "bin")),
        DirectoryKind.CACHE_HOME: HomeRelative(("Library", "Caches")),
        DirectoryKind.CONFIG_HOME: HomeRelative(("Library", "Application Support")),
        DirectoryKind.CONFIG_LOCAL: SameAs(DirectoryKind.CONFIG_HOME),
        DirectoryKind.DATA_HOME: HomeRelative(("Library", "Application Support")),
        DirectoryKind.DATA_LOCAL: SameAs(DirectoryKind.DATA_HOME),
        DirectoryKind.STATE_HOME: HomeRelative(("Library", "Application Support")),
        DirectoryKind.DESKTOP: HomeRelative(("Desktop",)),
        DirectoryKind.DOCUMENTS: HomeRelative(("Documents",)),
        DirectoryKind.DOWNLOADS: HomeRelative(("Downloads",)),
        DirectoryKind.MUSIC: HomeRelative(("Music",)),
        DirectoryKind.PICTURES: HomeRelative(("Pictures",)),
        DirectoryKind.VIDEOS: HomeRelative(("Movies",)),
        DirectoryKind.TEMPLATES: HomeRelative(("Templates",)),
        DirectoryKind.PUBLICSHARE: HomeRelative(("Public",)),
        DirectoryKind.RUNTIME: TempDirectory(),
        DirectoryKind.FONTS: HomeRelative(("Library", "Fonts")),
        DirectoryKind.PREFERENCES: HomeRelative(("Library", "Preferences")),
    },
    Platform.WINDOWS: {
        DirectoryKind.BIN_HOME: FromVariable("LOCALAPPDATA", ("Programs",)),
        DirectoryKind.CACHE_HOME: FromVariable("LOCALAPPDATA"),
        DirectoryKind.CONFIG_HOME: FromVariable("APPDATA"),
        DirectoryKind.CONFIG_LOCAL: FromVariable("LOCALAPPDATA"),
        DirectoryKind.DATA_HOME: FromVariable("APPDATA"),
        DirectoryKind.DATA_LOCAL: FromVariable("LOCALAPPDATA"),
        DirectoryKind.STATE_HOME: FromVariable("LOCALAPPDATA"),
        DirectoryKind.DESKTOP: FromVariable("USERPROFILE", ("Desktop",)),
        DirectoryKind.DOCUMENTS: FromVariable("USERPROFILE", ("Documents",)),
        DirectoryKind.DOWNLOADS: FromVariable("USERPROFILE", ("Downloads",)),
        DirectoryKind.MUSIC: FromVariable("USERPROFILE", ("Music",)),
        DirectoryKind.PICTURES: FromVariable("USERPROFILE", ("Pictures",)),
        DirectoryKind.VIDEOS: FromVariable("USERPROFILE", ("Videos",)),
        DirectoryKind.TEMPLATES: FromVariable("USERPROFILE", ("Templates",)),
        DirectoryKind.PUBLICSHARE: Fixed("C:\\Users\\Public"),
        DirectoryKind.RUNTIME: FromVariable("TEMP"),
        DirectoryKind.FONTS: Unsupported(),
        DirectoryKind.PREFERENCES: SameAs(DirectoryKind.CONFIG_HOME),
    },
}


def resolve_default(kind: DirectoryKind, context: RuleContext) -> DirectoryResult:
    """Derive the conventional location of ``kind`` on the context's platform."""
    if kind is DirectoryKind.HOME:
        return context.home()

    rule = DEFAULT_RULES[context.platform][kind]
    result = rule.apply(kind, context)
    if result.is_err():
        logger.debug("Default rule failed", kind=kind.value, rule=type(rule).__name__)
    return result
