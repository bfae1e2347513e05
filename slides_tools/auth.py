"""OAuth configuration and credential state.

There is no module-level auth singleton: build one :class:`AuthState` at
startup and hand it to :class:`~slides_tools.client.SlidesClient` and
:func:`~slides_tools.picker.choose_presentation`.

Credential lookup order in :meth:`AuthState.auth`:
1. An explicit ``token`` (any ``google.auth`` credentials object)
2. Service-account JSON (``path`` argument or ``GOOGLE_SLIDES_CREDENTIALS``)
3. Cached OAuth token (``token_cache_path``), refreshed when expired
4. Interactive OAuth flow in the browser, cached for next time
"""
from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple
from urllib.parse import urlencode

import google.auth.credentials
from cryptography.fernet import Fernet, InvalidToken
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from google.oauth2.credentials import Credentials as UserCredentials
from google_auth_oauthlib.flow import InstalledAppFlow

from .config import SlidesConfig
from .errors import AuthError

logger = logging.getLogger(__name__)

TOKENINFO_URI = "https://www.googleapis.com/oauth2/v3/tokeninfo"

_CREDENTIALS_HINT = (
    "Can't get Google credentials.\n"
    "Are you running slides_tools in a non-interactive session? Consider:\n"
    "  * Call `AuthState.auth()` directly with all necessary specifics.\n"
    "  * Point GOOGLE_SLIDES_CREDENTIALS at a service-account key file."
)


@dataclass(frozen=True)
class OAuthClient:
    """An OAuth client registered in the Google Cloud console."""

    client_id: str
    client_secret: Optional[str] = None
    redirect_uris: Tuple[str, ...] = ()
    auth_uri: str = "https://accounts.google.com/o/oauth2/auth"
    token_uri: str = "https://oauth2.googleapis.com/token"
    name: Optional[str] = None
    app_id: Optional[str] = None

    def __post_init__(self):
        if not self.client_id:
            raise ValueError("OAuth client needs a client_id")
        object.__setattr__(self, "redirect_uris", tuple(self.redirect_uris))
        if self.app_id is None:
            # The picker's app ID is the project number leading the client ID.
            prefix = self.client_id.split("-", 1)[0]
            if prefix.isdigit():
                object.__setattr__(self, "app_id", prefix)

    @classmethod
    def from_info(cls, info: Mapping[str, Any], name: Optional[str] = None) -> "OAuthClient":
        """Build a client from the decoded console JSON (``installed`` or ``web`` section)."""
        section = info.get("installed") or info.get("web")
        if not section:
            raise ValueError("OAuth client JSON must have an 'installed' or 'web' section")
        return cls(
            client_id=section.get("client_id"),
            client_secret=section.get("client_secret"),
            redirect_uris=section.get("redirect_uris", ()),
            auth_uri=section.get("auth_uri", cls.auth_uri),
            token_uri=section.get("token_uri", cls.token_uri),
            name=name,
            app_id=section.get("app_id") or info.get("app_id"),
        )

    @classmethod
    def from_json(
        cls,
        path: str | Path,
        key: Optional[str] = None,
        key_env_var: str = "SLIDES_TOOLS_KEY",
    ) -> "OAuthClient":
        """
        Load a client from a console JSON file.

        The file may be plain JSON or a Fernet token wrapping that JSON. For
        the encrypted form the key is *key* or the value of *key_env_var*.

        Raises:
            FileNotFoundError: If *path* does not exist
            AuthError: If the file is encrypted and no usable key is available
        """
        path = Path(path)
        raw = path.read_bytes()
        try:
            info = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError):
            key = key or os.getenv(key_env_var)
            if not key:
                raise AuthError(
                    f"{path.name} is encrypted; set {key_env_var} to decrypt it"
                ) from None
            try:
                info = json.loads(Fernet(key.encode()).decrypt(raw.strip()))
            except (InvalidToken, ValueError) as exc:
                raise AuthError(f"Could not decrypt {path.name} with the key in {key_env_var}") from exc
            logger.debug("Decrypted OAuth client from %s", path)
        return cls.from_info(info, name=path.stem)

    def to_client_config(self) -> Dict[str, Dict[str, Any]]:
        """The mapping ``InstalledAppFlow.from_client_config`` expects."""
        return {
            "installed": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uris": list(self.redirect_uris) or ["http://localhost"],
                "auth_uri": self.auth_uri,
                "token_uri": self.token_uri,
            }
        }


def encrypt_client_file(source: str | Path, target: str | Path, key: str) -> Path:
    """Write a Fernet-encrypted copy of a client JSON file, for packaging."""
    data = Path(source).read_bytes()
    json.loads(data)
    target = Path(target)
    target.write_bytes(Fernet(key.encode()).encrypt(data))
    return target


class AuthState:
    """
    Holds the OAuth client, API key and current credential for one process.

    Args:
        config: Shared settings; defaults to ``SlidesConfig()``.
        client: OAuth client; loaded lazily from ``config.client_secrets_path`` when omitted.
        api_key: Browser API key; defaults to ``config.api_key``.
        credentials: A credential to start with, e.g. in tests.
    """

    def __init__(
        self,
        config: Optional[SlidesConfig] = None,
        client: Optional[OAuthClient] = None,
        api_key: Optional[str] = None,
        credentials: Optional[google.auth.credentials.Credentials] = None,
    ):
        self.config = config or SlidesConfig()
        self._client = client
        self._api_key = api_key if api_key is not None else self.config.api_key
        self._credentials = credentials
        self.auth_active = True

    def __repr__(self):
        return (
            f"AuthState(active={self.auth_active}, has_token={self.has_token()}, "
            f"client={self._client.client_id if self._client else None!r})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @property
    def oauth_client(self) -> Optional[OAuthClient]:
        """The configured OAuth client, loaded from the packaged file on first use."""
        if self._client is None:
            path = self.config.client_secrets_path
            if path.exists():
                self._client = OAuthClient.from_json(path, key_env_var=self.config.key_env_var)
                logger.debug("Loaded OAuth client %s from %s", self._client.client_id, path)
        return self._client

    def auth_configure(
        self,
        client: Optional[OAuthClient] = None,
        path: Optional[str | Path] = None,
        api_key: Optional[str] = None,
    ) -> "AuthState":
        """
        Replace the OAuth client (from an object or a console JSON file) and/or the API key.

        Arguments left as ``None`` keep their current value.
        """
        if client is not None and path is not None:
            raise ValueError("Must supply exactly one of `client` or `path`, not both")
        if path is not None:
            client = OAuthClient.from_json(path, key_env_var=self.config.key_env_var)
        if client is not None:
            self._client = client
        if api_key is not None:
            self._api_key = api_key
        return self

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    def auth(
        self,
        email: Optional[str] = None,
        path: Optional[str | Path] = None,
        scopes: Optional[Sequence[str]] = None,
        token: Optional[google.auth.credentials.Credentials] = None,
        interactive: Optional[bool] = None,
    ) -> google.auth.credentials.Credentials:
        """
        Obtain a credential and make it current.

        Args:
            email: Preferred Google account; a cached token for another account is skipped.
            path: Service-account key file, overriding the configured one.
            scopes: OAuth scopes to request; defaults to ``config.scopes``.
            token: Use this credential as-is.
            interactive: Allow the browser flow; defaults to whether stdin is a terminal.

        Raises:
            AuthError: If no credential can be obtained
        """
        scopes = list(scopes or self.config.scopes)
        creds = token
        if creds is not None:
            logger.debug("Using explicitly supplied credentials")
        if creds is None:
            creds = self._from_service_account(path or self.config.service_account_path, scopes)
        if creds is None:
            creds = self._from_token_cache(scopes, email)
        if creds is None:
            if interactive is None:
                interactive = sys.stdin is not None and sys.stdin.isatty()
            if interactive:
                creds = self._from_browser(scopes, email)

        if creds is None:
            raise AuthError(_CREDENTIALS_HINT)

        self._credentials = creds
        self.auth_active = True
        return creds

    def deauth(self) -> None:
        """Forget the current credential; further calls go out unauthenticated with the API key."""
        self.auth_active = False
        self._credentials = None

    def has_token(self) -> bool:
        return self._credentials is not None

    def token(self) -> Optional[google.auth.credentials.Credentials]:
        """
        Return a valid credential, authorising first if none is held.

        Returns ``None`` after :meth:`deauth` until :meth:`auth` is called again.
        """
        if not self.auth_active:
            return None
        if not self.has_token():
            self.auth()
        creds = self._credentials
        if not creds.valid:
            try:
                creds.refresh(Request())
            except GoogleAuthError as exc:
                raise AuthError(f"Could not refresh Google credentials: {exc}") from exc
            logger.debug("Refreshed access token")
        return creds

    def user(self, request=None) -> Optional[str]:
        """Email address of the current identity, or ``None`` without a token."""
        if not self.has_token():
            return None
        creds = self._credentials
        email = getattr(creds, "service_account_email", None)
        if email:
            return email
        creds = self.token()
        request = request or Request()
        query = urlencode({"access_token": creds.token})
        response = request(url=f"{TOKENINFO_URI}?{query}", method="GET")
        if response.status != 200:
            logger.warning("Token info lookup failed with HTTP %s", response.status)
            return None
        return json.loads(response.data).get("email")

    # ------------------------------------------------------------------
    # Credential sources
    # ------------------------------------------------------------------

    def _from_service_account(self, path, scopes):
        if not path:
            return None
        path = Path(path).expanduser()
        if not path.exists():
            logger.warning("Service-account file %s not found", path)
            return None
        try:
            creds = service_account.Credentials.from_service_account_file(str(path), scopes=scopes)
        except (ValueError, KeyError) as exc:
            logger.warning("Service-account auth failed (%s). Falling back to OAuth.", exc)
            return None
        logger.info("Authorised as service account %s", creds.service_account_email)
        return creds

    def _from_token_cache(self, scopes, email):
        token_path = self.config.token_cache_path
        if token_path is None or not token_path.exists():
            return None
        try:
            creds = UserCredentials.from_authorized_user_file(str(token_path), scopes)
            if email and getattr(creds, "account", "") and creds.account != email:
                logger.info("Cached token belongs to %s, not %s", creds.account, email)
                return None
            if creds.expired and creds.refresh_token:
                creds.refresh(Request())
                self._write_token_cache(creds)
        except (ValueError, GoogleAuthError) as exc:
            logger.warning("Failed to load or refresh %s (%s).", token_path, exc)
            return None
        return creds if creds.valid else None

    def _from_browser(self, scopes, email):
        client = self.oauth_client
        if client is None:
            logger.warning("No OAuth client configured; cannot run the browser flow")
            return None
        logger.info("Running interactive OAuth flow - browser window will open ...")
        flow = InstalledAppFlow.from_client_config(client.to_client_config(), scopes)
        kwargs = {"login_hint": email} if email else {}
        creds = flow.run_local_server(port=0, **kwargs)
        self._write_token_cache(creds)
        return creds

    def _write_token_cache(self, creds):
        token_path = self.config.token_cache_path
        if token_path is None:
            return
        try:
            token_path.parent.mkdir(parents=True, exist_ok=True)
            token_path.write_text(creds.to_json())
        except OSError as exc:
            logger.warning("Could not cache token at %s (%s)", token_path, exc)
