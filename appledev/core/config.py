"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    APPLE_DOCS_API       — Base URL of Apple's documentation JSON API
    DOCS_FETCH_TIMEOUT   — Seconds allowed for one documentation request (default: 10)
    DOCS_USER_AGENT      — User-Agent header sent to developer.apple.com
    SERVER_HOST          — Bind address for uvicorn (default: 127.0.0.1)
    SERVER_PORT          — Bind port for uvicorn (default: 8000)
    LOG_LEVEL            — Root log level name (default: INFO)
    LOG_DIR              — Directory for dated log files; empty disables file logging

Fetch Timeout:
    Every documentation lookup is a single best-effort GET per candidate path.
    DOCS_FETCH_TIMEOUT bounds each of those calls so a slow upstream degrades
    to the not-found template instead of holding the tool call open.
"""
import os
from dotenv import load_dotenv

load_dotenv()

SERVER_NAME = "apple-dev-tools-server"
SERVER_VERSION = "1.0.0"

APPLE_DOCS_API = os.getenv(
    "APPLE_DOCS_API",
    "https://developer.apple.com/tutorials/data/documentation",
).rstrip("/")
DOCS_FETCH_TIMEOUT = float(os.getenv("DOCS_FETCH_TIMEOUT", 10.0))
DOCS_USER_AGENT = os.getenv(
    "DOCS_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)",
)

SERVER_HOST = os.getenv("SERVER_HOST", "127.0.0.1")
SERVER_PORT = int(os.getenv("SERVER_PORT", 8000))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")
