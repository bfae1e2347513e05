"""Runtime configuration for slides_tools.

Values come from keyword arguments or, through :meth:`SlidesConfig.from_env`,
from ``SLIDES_TOOLS_*`` environment variables. ``GOOGLE_SLIDES_CREDENTIALS``
is honoured as the service-account key path.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

ENV_PREFIX = "SLIDES_TOOLS_"

DEFAULT_BASE_URL = "https://slides.googleapis.com/"
DEFAULT_SCOPES: Tuple[str, ...] = (
    "https://www.googleapis.com/auth/drive.file",
    "https://www.googleapis.com/auth/presentations.currentonly",
)
DEFAULT_PICKER_HOST = "127.0.0.1"
DEFAULT_PICKER_PORT = 1083


def _default_client_secrets() -> Path:
    return Path(__file__).parent / "data" / "oauth_client.json"


def _default_token_cache() -> Path:
    return Path("~/.slides_tools/token.json").expanduser()


@dataclass
class SlidesConfig:
    """
    Settings shared by the client, the auth state and the picker.

    Args:
        base_url: Root URL of the Slides REST API.
        scopes: OAuth scopes requested when authorising.
        client_secrets_path: OAuth client JSON (plain or Fernet-encrypted).
        token_cache_path: Where the authorised-user token is cached.
        service_account_path: Optional service-account key file.
        api_key: Browser API key used by the picker page.
        picker_host: Loopback address the picker listens on.
        picker_port: Port the picker listens on (0 picks a free port).
        picker_timeout: Seconds to wait for a selection, ``None`` for no limit.
        key_env_var: Name of the variable holding the Fernet key.
    """

    base_url: str = DEFAULT_BASE_URL
    scopes: Tuple[str, ...] = DEFAULT_SCOPES
    client_secrets_path: Path = field(default_factory=_default_client_secrets)
    token_cache_path: Optional[Path] = field(default_factory=_default_token_cache)
    service_account_path: Optional[Path] = None
    api_key: Optional[str] = None
    picker_host: str = DEFAULT_PICKER_HOST
    picker_port: int = DEFAULT_PICKER_PORT
    picker_timeout: Optional[float] = None
    key_env_var: str = "SLIDES_TOOLS_KEY"

    def __post_init__(self):
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        self.scopes = tuple(self.scopes)
        self.client_secrets_path = Path(self.client_secrets_path)
        if self.token_cache_path is not None:
            self.token_cache_path = Path(self.token_cache_path).expanduser()
        if self.service_account_path is not None:
            self.service_account_path = Path(self.service_account_path).expanduser()
        if not 0 <= self.picker_port <= 65535:
            raise ValueError(f"Invalid picker port: {self.picker_port}")
        if self.picker_timeout is not None and self.picker_timeout <= 0:
            raise ValueError(f"Picker timeout must be positive, got {self.picker_timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "SlidesConfig":
        """Build a config from ``SLIDES_TOOLS_*`` variables; keyword overrides win."""
        env = os.environ if environ is None else environ
        kwargs = {}

        def get(name):
            return env.get(ENV_PREFIX + name) or None

        if get("BASE_URL"):
            kwargs["base_url"] = get("BASE_URL")
        if get("SCOPES"):
            kwargs["scopes"] = tuple(s for s in get("SCOPES").replace(",", " ").split() if s)
        if get("CLIENT_SECRETS"):
            kwargs["client_secrets_path"] = Path(get("CLIENT_SECRETS"))
        if get("TOKEN_CACHE"):
            kwargs["token_cache_path"] = Path(get("TOKEN_CACHE"))
        service_account = env.get("GOOGLE_SLIDES_CREDENTIALS") or get("SERVICE_ACCOUNT")
        if service_account:
            kwargs["service_account_path"] = Path(service_account)
        if get("API_KEY"):
            kwargs["api_key"] = get("API_KEY")
        if get("PICKER_HOST"):
            kwargs["picker_host"] = get("PICKER_HOST")
        if get("PICKER_PORT"):
            kwargs["picker_port"] = int(get("PICKER_PORT"))
        if get("PICKER_TIMEOUT"):
            kwargs["picker_timeout"] = float(get("PICKER_TIMEOUT"))
        if get("KEY_VAR"):
            kwargs["key_env_var"] = get("KEY_VAR")

        kwargs.update(overrides)
        logger.debug("Config from environment: %s", sorted(kwargs))
        return cls(**kwargs)
