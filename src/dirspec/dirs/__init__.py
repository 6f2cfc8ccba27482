"""Standard user directory resolution."""

from .defaults import DEFAULT_RULES, RuleContext, resolve_default
from .environment import MappingEnvironment, OsEnvironment
from .home import HomeResolver, PasswdUserDatabase
from .models import (
    DirectoryError,
    DirectoryKind,
    DirectoryNotFoundError,
    EnvironmentVariableMissingError,
    HomeNotFoundError,
    Platform,
    RuntimePolicy,
    UnsupportedDirectoryError,
)
from .protocol import EnvironmentReader, UserDatabase
from .resolver import DirectoryResolver
from .xdg import XDG_VARIABLES, resolve_override

__all__ = [
    "DEFAULT_RULES",
    "DirectoryError",
    "DirectoryKind",
    "DirectoryNotFoundError",
    "DirectoryResolver",
    "EnvironmentReader",
    "EnvironmentVariableMissingError",
    "HomeNotFoundError",
    "HomeResolver",
    "MappingEnvironment",
    "OsEnvironment",
    "PasswdUserDatabase",
    "Platform",
    "RuleContext",
    "RuntimePolicy",
    "UnsupportedDirectoryError",
    "UserDatabase",
    "XDG_VARIABLES",
    "resolve_default",
    "resolve_override",
]
