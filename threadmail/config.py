"""Configuration and settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths. Runtime files (SQLite database, logs) live in a user-writable home,
# never next to the installed package.
HOME_DIR = Path(os.getenv("THREADMAIL_HOME", str(Path.home() / ".threadmail"))).expanduser()
DATA_DIR = HOME_DIR / "data"
OUTPUT_DIR = HOME_DIR / "output"

# Ensure directories exist
DATA_DIR.mkdir(parents=True, exist_ok=True)
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'threadmail.sqlite'}")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() == "true"
SEED_DEMO_DATA = os.getenv("SEED_DEMO_DATA", "true").lower() == "true"

# Logging
LOG_DIR = OUTPUT_DIR / "logs"
LOG_FILE = LOG_DIR / "app.jsonl"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
VERBOSE_LOGGING = os.getenv("VERBOSE_LOGGING", "false").lower() == "true"

# Ensure log directory exists
LOG_DIR.mkdir(parents=True, exist_ok=True)

# HTTP API
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))

# Search: 0 means no cap on the number of hits
SEARCH_RESULT_LIMIT = int(os.getenv("SEARCH_RESULT_LIMIT", "0"))
