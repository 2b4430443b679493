"""Runtime configuration loaded from the environment (and ``.env``)."""

import os

from dotenv import load_dotenv

load_dotenv()

# ── Places provider ──
OPENTRIPMAP_API_KEY: str = os.getenv("OPENTRIPMAP_API_KEY", "")
OPENTRIPMAP_RADIUS_M: int = int(os.getenv("OPENTRIPMAP_RADIUS_M", "10000"))
OPENTRIPMAP_LIMIT: int = int(os.getenv("OPENTRIPMAP_LIMIT", "30"))
PLACES_TIMEOUT_S: float = float(os.getenv("PLACES_TIMEOUT_S", "15.0"))

# ── Cache ──
REDIS_URL: str = os.getenv("REDIS_URL", "")
PLACES_CACHE_TTL: int = int(os.getenv("PLACES_CACHE_TTL", "86400"))

# ── Selection heuristics ──
# A window whose first pass yields fewer than max(SCARCITY_MIN, target // SCARCITY_DIVISOR)
# places gets a second pass that may repeat places.
SCARCITY_DIVISOR: int = int(os.getenv("SCARCITY_DIVISOR", "2"))
SCARCITY_MIN: int = int(os.getenv("SCARCITY_MIN", "1"))
if SCARCITY_DIVISOR < 1:
    raise ValueError(f"SCARCITY_DIVISOR must be at least 1, got {SCARCITY_DIVISOR}")
# Night lodging suggestion on day 1, then every N days.
LODGING_INTERVAL_DAYS: int = int(os.getenv("LODGING_INTERVAL_DAYS", "3"))

# ── Logging ──
PLANNER_LOG_LEVEL: str = os.getenv("PLANNER_LOG_LEVEL", "INFO").upper()
