"""Spotify client-credentials token cache.

The service only needs catalog search, so it authenticates as the application
(no user, no refresh token). SpotifyTokenCache keeps one bearer token per
instance and refreshes it shortly before it expires.

Concurrency: a single lock guards the cached state and is held during the
token exchange, so concurrent cache misses trigger one exchange and the other
callers reuse its result once the lock is released.
"""

import threading
import time
from typing import Callable, Optional

import requests

from weathertunes import config
from weathertunes.core import (
    CredentialsMissingError,
    TokenState,
    UpstreamAuthError,
    UpstreamError,
    UpstreamUnavailableError,
    log_step,
    log_success,
    log_warning,
)

# Status codes the token endpoint uses to reject client credentials
_AUTH_REJECTED = (400, 401, 403)


class SpotifyTokenCache:
    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        token_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.time,
        safety_margin_s: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        self.client_id = client_id if client_id is not None else config.SPOTIFY_CLIENT_ID
        self.client_secret = (
            client_secret if client_secret is not None else config.SPOTIFY_CLIENT_SECRET
        )
        self.token_url = token_url or config.SPOTIFY_TOKEN_URL
        self.session = session or requests.Session()
        self.clock = clock
        margin = (
            safety_margin_s if safety_margin_s is not None else config.TOKEN_SAFETY_MARGIN_S
        )
        self.safety_margin_ms = margin * 1000
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT_S

        self._state: Optional[TokenState] = None
        self._lock = threading.Lock()

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)

    @property
    def state(self) -> Optional[TokenState]:
        return self._state

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def get_token(self) -> str:
        """
        Return a valid bearer token, exchanging credentials on a cache miss.

        Raises:
          - CredentialsMissingError  : client id/secret not configured
          - UpstreamAuthError        : Spotify rejected the credentials
          - UpstreamUnavailableError : network / DNS / timeout
          - UpstreamError            : any other unexpected answer
        """
        with self._lock:
            state = self._state
            if state is not None and self._now_ms() < state.expires_at_ms:
                return state.token

            self._state = self._exchange_credentials()
            return self._state.token

    def invalidate(self) -> None:
        """
        Forget the cached token so the next get_token() re-authenticates.
        Called after Spotify answers 401 to a catalog request.
        """
        with self._lock:
            if self._state is not None:
                log_warning(
                    "Spotify token rejected, clearing token cache.",
                    component="spotify",
                )
            self._state = None

    def _exchange_credentials(self) -> TokenState:
        if not self.has_credentials:
            raise CredentialsMissingError(
                "SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET are not configured"
            )

        log_step(
            "Requesting Spotify access token (client credentials)...",
            component="spotify",
        )
        try:
            r = self.session.post(
                self.token_url,
                data={"grant_type": "client_credentials"},
                auth=(self.client_id, self.client_secret),
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            raise UpstreamUnavailableError(
                "Spotify token endpoint unreachable", details=str(e)
            ) from e
        except requests.RequestException as e:
            raise UpstreamError("Spotify token request failed", details=str(e)) from e

        if r.status_code in _AUTH_REJECTED:
            raise UpstreamAuthError(
                "Spotify rejected client credentials",
                details=f"HTTP {r.status_code}",
            )
        if not r.ok:
            raise UpstreamError(
                "Spotify token endpoint error", details=f"HTTP {r.status_code}"
            )

        try:
            token_info = r.json()
            token = token_info["access_token"]
            expires_in = int(token_info.get("expires_in", 3600))
        except (ValueError, KeyError, TypeError) as e:
            raise UpstreamError(
                "Unexpected Spotify token response", details=str(e)
            ) from e

        expires_at_ms = self._now_ms() + expires_in * 1000 - self.safety_margin_ms
        log_success(
            f"Spotify token refreshed (valid for {expires_in}s).",
            component="spotify",
        )
        return TokenState(token=token, expires_at_ms=expires_at_ms)


def spotify_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
