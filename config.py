"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── SQLite ────────────────────────────────────────────────
DATABASE_PATH: str = os.getenv("DATABASE_PATH", "./database.sqlite")

# ── HTTP server ───────────────────────────────────────────
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "3000"))

# Directory holding the static registration form
PUBLIC_DIR: str = os.getenv("PUBLIC_DIR", os.path.join(os.path.dirname(__file__), "public"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
