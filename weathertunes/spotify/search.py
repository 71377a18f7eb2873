from typing import Any, Dict, List, Optional

import requests

from weathertunes import config
from weathertunes.core import (
    CredentialsMissingError,
    Track,
    UpstreamAuthError,
    UpstreamError,
    UpstreamUnavailableError,
)

from .auth import SpotifyTokenCache, spotify_headers

HEALTH_CHECK_QUERY = "weather"


def _first_image_url(album: Dict[str, Any]) -> Optional[str]:
    for image in album.get("images") or []:
        if image.get("url"):
            return image["url"]
    return None


def track_from_item(item: Dict[str, Any]) -> Track:
    """
    Convert a Spotify track object into a Track.

    Media fields stay None when Spotify omits them (preview_url is frequently
    null for client-credentials tokens).
    """
    album = item.get("album") or {}
    artists = item.get("artists") or []
    return Track(
        name=item["name"],
        artist=artists[0]["name"] if artists else "Unknown artist",
        album=album.get("name"),
        image_url=_first_image_url(album),
        preview_url=item.get("preview_url"),
        external_uri=item.get("uri"),
        external_url=(item.get("external_urls") or {}).get("spotify"),
        catalog_id=item.get("id"),
    )


class SpotifyCatalog:
    """Thin wrapper over `GET /v1/search?type=track`."""

    def __init__(
        self,
        api_base: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.api_base = (api_base or config.SPOTIFY_API_BASE).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT_S

    def _search(self, token: str, query: str, limit: int) -> requests.Response:
        try:
            r = self.session.get(
                f"{self.api_base}/search",
                headers=spotify_headers(token),
                params={"q": query, "type": "track", "limit": limit},
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            raise UpstreamUnavailableError(
                "Spotify search unreachable", details=str(e)
            ) from e
        except requests.RequestException as e:
            raise UpstreamError("Spotify search failed", details=str(e)) from e

        if r.status_code == 401:
            raise UpstreamAuthError("Spotify rejected the access token")
        if not r.ok:
            # 429 (rate limited) lands here too
            raise UpstreamError(
                "Spotify search error", details=f"HTTP {r.status_code}"
            )
        return r

    def search_tracks(self, token: str, query: str, limit: int = 10) -> List[Track]:
        """
        Search tracks matching `query`, at most `limit` of them.

        Raises UpstreamAuthError on 401, UpstreamUnavailableError on
        network failures, UpstreamError on anything else unexpected.
        """
        r = self._search(token, query, limit)
        try:
            items = r.json()["tracks"]["items"]
            return [track_from_item(item) for item in items if item]
        except (ValueError, KeyError, TypeError, IndexError) as e:
            raise UpstreamError(
                "Unexpected Spotify search response", details=str(e)
            ) from e

    def check_health(self, token_cache: SpotifyTokenCache) -> str:
        """
        Live check used by /health: authenticate, then run a one-track
        search. Returns "connected", "not configured", "unauthorized" or
        "unreachable".
        """
        try:
            self._search(token_cache.get_token(), HEALTH_CHECK_QUERY, limit=1)
        except CredentialsMissingError:
            return "not configured"
        except UpstreamAuthError:
            token_cache.invalidate()
            return "unauthorized"
        except UpstreamError:
            return "unreachable"
        return "connected"
