"""Centralized configuration constants.

Protocol constants are fixed by the Pwned Passwords range API and are not
configurable. Deployment settings can be overridden via environment variables.
"""

import os

# Protocol constants - sizes are in hex characters (twice the size in bytes)
HASH_SIZE = 40
PREFIX_SIZE = 5
SUFFIX_SIZE = HASH_SIZE - PREFIX_SIZE
LINE_SEPARATOR = ":"

# Padded range responses carry between 800 and 1,000 entries
MIN_PADDING = 800

# Remote service
API_URL = os.environ.get("PASSLEAK_API_URL", "https://api.pwnedpasswords.com/range")
REQUEST_TIMEOUT = float(os.environ.get("PASSLEAK_REQUEST_TIMEOUT", "5"))  # seconds
USER_AGENT = os.environ.get("PASSLEAK_USER_AGENT", "passleak/1.0")
ADD_PADDING = os.environ.get("PASSLEAK_ADD_PADDING", "true").lower() == "true"

# Logging
LOG_DIR = os.environ.get("LOG_DIR", "logs")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.path.join(LOG_DIR, "passleak.log")
SIEM_LOG_FILE = os.path.join(LOG_DIR, "siem_events.jsonl")
LOG_MAX_BYTES = int(os.environ.get("LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
LOG_BACKUP_COUNT = int(os.environ.get("LOG_BACKUP_COUNT", 5))

# HTTPS enforcement for the REST service
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"

# Per-client rate limit for breach check endpoints
RATE_LIMIT = os.environ.get("RATE_LIMIT", "30/minute")

# Comma-separated list of allowed CORS origins
_cors_origins_env = os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]

# Trusted proxy configuration
# SECURITY: Only trust X-Forwarded-For headers from these IP addresses
# Example: TRUSTED_PROXIES=10.0.0.1,10.0.0.2,172.17.0.1
_trusted_proxies_env = os.environ.get("TRUSTED_PROXIES", "")
TRUSTED_PROXIES: set[str] = set(
    ip.strip() for ip in _trusted_proxies_env.split(",") if ip.strip()
)
