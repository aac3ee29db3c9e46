"""
config.py
---------
Central configuration module. Loads the ArangoDB connection settings
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── ArangoDB ──────────────────────────────────────────────
ARANGO_HOSTS: str = os.getenv("ARANGO_HOSTS", "http://localhost:8529")
ARANGO_USERNAME: str = os.getenv("ARANGO_USERNAME", "root")
# TODO: drop the empty default once the sample server runs with a real password.
ARANGO_PASSWORD: str = os.getenv("ARANGO_PASSWORD", "")
ARANGO_DATABASE: str = os.getenv("ARANGO_DATABASE", "_system")

# ── Collections ───────────────────────────────────────────
AIRPORTS_COLLECTION: str = "airports"
FLIGHTS_COLLECTION: str = "flights"
FLIGHTS_GRAPH: str = "flights"

# ── Queries ───────────────────────────────────────────────
DEFAULT_QUERY_LIMIT: int = 20

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
