from dotenv import load_dotenv
import os

load_dotenv()

# Spotify credentials (client-credentials flow, no user scopes needed)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")

# Spotify API endpoints
SPOTIFY_TOKEN_URL = os.getenv(
    "SPOTIFY_TOKEN_URL", "https://accounts.spotify.com/api/token"
)
SPOTIFY_API_BASE = os.getenv("SPOTIFY_API_BASE", "https://api.spotify.com/v1")

# WeatherAPI.com
WEATHERAPI_KEY = os.getenv("WEATHERAPI_KEY")
WEATHERAPI_BASE = os.getenv("WEATHERAPI_BASE", "https://api.weatherapi.com/v1")

# Outbound HTTP
HTTP_TIMEOUT_S = float(os.getenv("HTTP_TIMEOUT_S", "10"))

# Refresh the Spotify token this many seconds before it really expires
TOKEN_SAFETY_MARGIN_S = int(os.getenv("TOKEN_SAFETY_MARGIN_S", "60"))

# Recommendation sizing
SEARCH_POOL_SIZE = int(os.getenv("SEARCH_POOL_SIZE", "10"))
RECOMMENDATION_COUNT = int(os.getenv("RECOMMENDATION_COUNT", "3"))

# Server
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3001"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
