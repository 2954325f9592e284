"""
Daraja OAuth access token store.

    GET /oauth/v1/generate?grant_type=client_credentials  (Basic auth)

Tokens are cached in-memory and refreshed on expiry. Concurrent callers
share one refresh: the cached reference is read without locking, and a
refresh happens under a lock with a re-check, so callers racing a slow
refresh all receive the token it produced.
"""

import threading
import time
from typing import Callable, Optional

import requests

from mpesa_connector.errors import AuthUnavailable
from mpesa_connector.models import AccessToken
from mpesa_connector.utils.logger import get_logger, mask_secret

logger = get_logger(__name__)

DEFAULT_EXPIRES_IN = 3600


class AccessTokenStore:
    """Holds the gateway bearer token and refreshes it when it expires."""

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        auth_url: str,
        timeout: float = 15,
        expiry_margin: int = 60,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if not consumer_key or not consumer_secret:
            raise ValueError("AccessTokenStore: 'consumer_key' and 'consumer_secret' are required")
        if not auth_url:
            raise ValueError("AccessTokenStore: 'auth_url' is required")

        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.auth_url = auth_url
        self.timeout = timeout
        self.expiry_margin = expiry_margin
        self._session = session or requests.Session()
        self._clock = clock

        self._token: Optional[AccessToken] = None
        self._lock = threading.Lock()

    def get_access_token(self) -> AccessToken:
        """
        Return a currently valid access token, refreshing if needed.

        Raises:
            AuthUnavailable: If the token endpoint fails or times out
        """
        token = self._token
        if token is not None and token.is_valid(self._clock()):
            return token

        with self._lock:
            # another thread may have refreshed while we waited
            token = self._token
            if token is not None and token.is_valid(self._clock()):
                return token

            token = self._fetch_token()
            self._token = token
            return token

    def has_valid_token(self) -> bool:
        token = self._token
        return token is not None and token.is_valid(self._clock())

    def invalidate(self) -> None:
        """Drop the cached token so the next call fetches a fresh one."""
        with self._lock:
            self._token = None

    def _fetch_token(self) -> AccessToken:
        try:
            resp = self._session.get(
                self.auth_url,
                params={"grant_type": "client_credentials"},
                auth=(self.consumer_key, self.consumer_secret),
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            raise AuthUnavailable(
                f"Timed out after {self.timeout}s obtaining access token"
            ) from exc
        except requests.RequestException as exc:
            raise AuthUnavailable(f"Failed to obtain access token - {exc}") from exc

        if not resp.ok:
            raise AuthUnavailable(
                f"Token endpoint responded with HTTP {resp.status_code}: {resp.text[:300]}"
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise AuthUnavailable("Token endpoint returned a non-JSON body") from exc

        value = data.get("access_token") if isinstance(data, dict) else None
        if not value:
            raise AuthUnavailable("Token endpoint response has no access_token")

        try:
            expires_in = int(data.get("expires_in", DEFAULT_EXPIRES_IN))
        except (TypeError, ValueError):
            expires_in = DEFAULT_EXPIRES_IN

        token = AccessToken(
            value=value,
            expires_at=self._clock() + max(expires_in - self.expiry_margin, 0),
        )
        logger.info("Access token %s refreshed (expires in %ds)", mask_secret(value), expires_in)
        return token
