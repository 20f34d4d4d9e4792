"""
Central configuration for the session-notes index.

Values are read from environment variables (or a .env file) with sensible
defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Notes source ──────────────────────────────────────────────────────
# Directory of Markdown notes, or a single .md / .json / .yaml file
NOTES_PATH = Path(os.getenv("SESSION_NOTES_PATH", "notes"))

# ── Link resolution ───────────────────────────────────────────────────
# Fail the load when a related-session link points at a missing note
STRICT_LINKS = os.getenv("SESSION_NOTES_STRICT_LINKS", "false").lower() in (
    "1", "true", "yes", "on",
)

# ── Logging ───────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("SESSION_NOTES_LOG_LEVEL", "WARNING")
# Empty means log to stderr only
LOG_FILE = os.getenv("SESSION_NOTES_LOG_FILE", "")
