"""Directory resolution: XDG override first, platform default second."""

from __future__ import annotations

from pathlib import PurePath
from typing import TYPE_CHECKING

from result import Ok, Result

from dirspec.common import create_logger

from .defaults import RuleContext, resolve_default
from .environment import OsEnvironment
from .home import HomeResolver, PasswdUserDatabase
from .models import DirectoryError, DirectoryKind, Platform, RuntimePolicy
from .protocol import EnvironmentReader, UserDatabase
from .xdg import resolve_override

if TYPE_CHECKING:
    from dirspec.settings import Settings

logger = create_logger("resolver")


class DirectoryResolver:
    """Resolves standard user directories for one platform.

    The platform is fixed at construction. Every call reads the environment
    afresh, so a resolver can be shared freely and never goes stale.
    """

    def __init__(
        self,
        platform: Platform | None = None,
        environment: EnvironmentReader | None = None,
        user_database: UserDatabase | None = None,
        runtime_policy: RuntimePolicy = RuntimePolicy.UID,
    ) -> None:
        self._platform = platform or Platform.current()
        self._environment = environment or OsEnvironment()
        self._user_database = user_database or PasswdUserDatabase()
        self._path_type = self._platform.path_type()
        self._home_resolver = HomeResolver(self._platform, self._environment, self._user_database)
        self._context = RuleContext(
            platform=self._platform,
            environment=self._environment,
            user_database=self._user_database,
            runtime_policy=runtime_policy,
            home=self.home,
            resolve=self.resolve,
        )

    @classmethod
    def from_settings(cls, settings: Settings, environment: EnvironmentReader | None = None) -> DirectoryResolver:
        return cls(
            platform=settings.resolved_platform(),
            environment=environment,
            runtime_policy=settings.runtime_policy,
        )

    @property
    def platform(self) -> Platform:
        return self._platform

    def resolve(self, kind: DirectoryKind) -> Result[PurePath, DirectoryError]:
        if kind is DirectoryKind.HOME:
            return self._home_resolver.resolve()

        override = resolve_override(kind, self._environment, self._path_type)
        if override is not None:
            logger.trace("Resolved from XDG override", kind=kind.value, path=str(override))
            return Ok(override)

        return resolve_default(kind, self._context)

    def resolve_all(self) -> dict[DirectoryKind, Result[PurePath, DirectoryError]]:
        return {kind: self.resolve(kind) for kind in DirectoryKind}

    def home(self) -> Result[PurePath, DirectoryError]:
        return self._home_resolver.resolve()

    def bin_home(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.BIN_HOME)

    def cache_home(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.CACHE_HOME)

    def config_home(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.CONFIG_HOME)

    def config_local(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.CONFIG_LOCAL)

    def data_home(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.DATA_HOME)

    def data_local(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.DATA_LOCAL)

    def state_home(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.STATE_HOME)

    def desktop(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.DESKTOP)

    def documents(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.DOCUMENTS)

    def downloads(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.DOWNLOADS)

    def music(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.MUSIC)

    def pictures(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.PICTURES)

    def videos(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.VIDEOS)

    def templates(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.TEMPLATES)

    def publicshare(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.PUBLICSHARE)

    def runtime(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.RUNTIME)

    def fonts(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.FONTS)

    def preferences(self) -> Result[PurePath, DirectoryError]:
        return self.resolve(DirectoryKind.PREFERENCES)
