"""Server settings read from the environment (and a local ``.env`` file)."""

import os

from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("FLOORPLAN_HOST", "0.0.0.0")
PORT = int(os.getenv("FLOORPLAN_PORT", "8000"))
RELOAD = os.getenv("FLOORPLAN_RELOAD", "true").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("FLOORPLAN_LOG_LEVEL", "INFO").upper()

# Comma separated; "*" allows any origin
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("FLOORPLAN_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
