from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from dirspec.constants import ENV_PREFIX
from dirspec.dirs.models import Platform, RuntimePolicy


class Settings(BaseSettings):
    platform: Platform | None = None
    runtime_policy: RuntimePolicy = RuntimePolicy.UID

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
    )

    def resolved_platform(self) -> Platform:
        return self.platform or Platform.current()


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "Settings",
    "get_settings",
]
