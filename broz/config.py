"""
Broz runtime configuration.

Values come from the environment with safe defaults so the engine works
without any deployment setup.
"""

import os
from typing import List

# Selection caps (profile editor and "looking for" filter)
KINK_PROFILE_MAX = int(os.getenv("KINK_PROFILE_MAX", "10"))
KINK_FILTER_MAX = int(os.getenv("KINK_FILTER_MAX", "5"))

# HTTP server
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def cors_allow_origins() -> List[str]:
    """Origins allowed by the CORS middleware (comma-separated env)."""
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
