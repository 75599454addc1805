from dotenv import load_dotenv
import os

load_dotenv()

# Service credentials (read again at request time by the API layer)
AUDD_API_KEY = os.getenv("AUDD_API_KEY")
PAYSTACK_SECRET_KEY = os.getenv("PAYSTACK_SECRET_KEY")

# Client resolver -> backend connection
IDENTIFY_API_URL = os.getenv("IDENTIFY_API_URL")
IDENTIFY_API_KEY = os.getenv("IDENTIFY_API_KEY")

# Root log level for the API and the CLI (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Applied to every outbound HTTP call
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# Browser-like UA, some platforms refuse HTML pages to unknown agents
HTTP_USER_AGENT = os.getenv(
    "HTTP_USER_AGENT",
    "Mozilla/5.0 (compatible; lyricsnap/0.1)",
)

# External endpoints
AUDD_API_BASE = "https://api.audd.io"
AUDD_RETURN_FIELDS = "apple_music,spotify,deezer,soundcloud,lyrics"
ITUNES_LOOKUP_URL = "https://itunes.apple.com/lookup"
PAYSTACK_API_BASE = "https://api.paystack.co"

OEMBED_ENDPOINTS = {
    "Spotify": "https://open.spotify.com/oembed",
    "YouTube": "https://www.youtube.com/oembed",
    "SoundCloud": "https://soundcloud.com/oembed",
    "Deezer": "https://www.deezer.com/oembed",
}

# Defaults surfaced to users
UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_ARTIST = "Unknown Artist"
FALLBACK_ARTWORK_URL = (
    "https://images.unsplash.com/photo-1514320291840-2e0a9bf2a9ae?w=400&q=80"
)
NO_LYRICS_MESSAGE = "Lyrics not found — try listening via mic instead."
