"""
Centralized constants for upstream providers and the search contract (Encapsulate What Changes).

Change base URLs, segment ids or limits here instead of scattering literals across services.
"""
import re

# Upstream base URLs
IPINFO_BASE_URL = "https://ipinfo.io"
GOOGLE_MAPS_BASE_URL = "https://maps.googleapis.com/maps/api"
TICKETMASTER_BASE_URL = "https://app.ticketmaster.com/discovery/v2"
SPOTIFY_API_BASE_URL = "https://api.spotify.com/v1"
SPOTIFY_ACCOUNTS_URL = "https://accounts.spotify.com/api/token"

# Loopback/private ranges never forwarded to ipinfo (they resolve to the server's own network)
PRIVATE_IP_PATTERNS = (
    re.compile(r"^127\."),
    re.compile(r"^10\."),
    re.compile(r"^192\.168\."),
    re.compile(r"^172\.(1[6-9]|2[0-9]|3[0-1])\."),
    re.compile(r"^::1$"),
)
IPV4_MAPPED_PREFIX = "::ffff:"

# Places Autocomplete restricted to city-level results
AUTOCOMPLETE_TYPES = "(cities)"

# Ticketmaster search
CATEGORY_SEGMENT_IDS = {
    "music": "KZFzniwnSyZfZ7v7nJ",
    "sports": "KZFzniwnSyZfZ7v7nE",
    "arts & theatre": "KZFzniwnSyZfZ7v7na",
    "film": "KZFzniwnSyZfZ7v7nn",
    "miscellaneous": "KZFzniwnSyZfZ7v7n1",
}
DEFAULT_CATEGORY = "All"
DEFAULT_DISTANCE_MILES = 10
SEARCH_RESULT_SIZE = 20
GEOHASH_PRECISION = 7

# Spotify
SPOTIFY_ALBUM_LIMIT = 3
SPOTIFY_TOKEN_REFRESH_MARGIN_SECONDS = 60
