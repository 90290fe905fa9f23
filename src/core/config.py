"""Runtime settings, read from environment variables once per process."""

import os
from dataclasses import dataclass, field
from functools import lru_cache

ENV_PREFIX = "CHECKERS_"


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    app_title: str = "Checkers Game Backend"
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        """Unset variables fall back to the defaults above."""
        defaults = cls()
        return cls(
            app_title=os.environ.get(f"{ENV_PREFIX}APP_TITLE", defaults.app_title),
            log_level=os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            cors_origins=_split_origins(os.environ[f"{ENV_PREFIX}CORS_ORIGINS"])
            if f"{ENV_PREFIX}CORS_ORIGINS" in os.environ
            else defaults.cors_origins,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
