"""
Client configuration.

A ``ClientConfig`` is built once and handed to every component that needs the
credentials or the network settings. Values can come from the constructor or
from ``TENCENT_AI_*`` environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.ai.qq.com/fcgi-bin/"
ENV_PREFIX = "TENCENT_AI_"


@dataclass(frozen=True)
class ClientConfig:
    """Credentials and transport settings for the Tencent AI platform."""

    app_id: str
    app_key: str
    proxy: Optional[str] = None
    timeout: float = 30.0
    retries: int = 0
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self) -> None:
        # app_id is numeric on the console, accept ints but sign strings
        if isinstance(self.app_id, int):
            object.__setattr__(self, "app_id", str(self.app_id))
        if not self.app_id:
            raise ConfigurationError("app_id must not be empty")
        if not self.app_key:
            raise ConfigurationError("app_key must not be empty")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        if self.retries < 0:
            raise ConfigurationError(f"retries must be >= 0, got {self.retries}")
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(app_id={self.app_id!r}, app_key='***', proxy={self.proxy!r}, "
            f"timeout={self.timeout!r}, retries={self.retries!r}, base_url={self.base_url!r})"
        )

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """Build a config from ``TENCENT_AI_*`` environment variables.

        Args:
            **overrides: Values that take precedence over the environment.

        Raises:
            ConfigurationError: If the app id or app key is not set anywhere.
        """
        app_id = overrides.pop("app_id", None) or os.getenv(ENV_PREFIX + "APP_ID")
        app_key = overrides.pop("app_key", None) or os.getenv(ENV_PREFIX + "APP_KEY")
        if not app_id:
            raise ConfigurationError(f"{ENV_PREFIX}APP_ID environment variable not set")
        if not app_key:
            raise ConfigurationError(f"{ENV_PREFIX}APP_KEY environment variable not set")

        settings = {
            "proxy": os.getenv(ENV_PREFIX + "PROXY") or None,
        }
        try:
            if os.getenv(ENV_PREFIX + "TIMEOUT"):
                settings["timeout"] = float(os.environ[ENV_PREFIX + "TIMEOUT"])
            if os.getenv(ENV_PREFIX + "RETRIES"):
                settings["retries"] = int(os.environ[ENV_PREFIX + "RETRIES"])
        except ValueError as err:
            raise ConfigurationError(f"Invalid numeric setting in environment: {err}") from err
        base_url = os.getenv(ENV_PREFIX + "BASE_URL")
        if base_url:
            settings["base_url"] = base_url

        settings.update({k: v for k, v in overrides.items() if v is not None})
        return cls(app_id=app_id, app_key=app_key, **settings)
