"""Public façade for the weathertunes.spotify package.

This module exposes the Spotify Web API integration: the client-credentials
token cache and the catalog search client. Callers should import these
symbols from this façade instead of the internal auth or search modules.
"""

from .auth import SpotifyTokenCache, spotify_headers
from .search import SpotifyCatalog, track_from_item

__all__ = [
    "SpotifyTokenCache",
    "spotify_headers",
    "SpotifyCatalog",
    "track_from_item",
]
