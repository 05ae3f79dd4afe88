"""Centralized runtime configuration.

Loads environment variables once at import time (``.env`` supported) and
exposes plain module-level values for the app, the router and the
feasibility agent.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_ANALYSIS_DELAY_SECONDS: float = 1.5

DEFAULT_CORS_ORIGINS: list[str] = [
    "http://localhost:3000",      # Next.js dev server
    "http://127.0.0.1:3000",      # Alternative localhost
    "http://localhost:3001",      # Alternative port
    "http://localhost:5173",      # Vite dev server
]


def _read_delay() -> float:
    raw = os.getenv("ANALYSIS_DELAY_SECONDS")
    if raw is None or raw.strip() == "":
        return DEFAULT_ANALYSIS_DELAY_SECONDS
    try:
        value = float(raw)
    except ValueError:
        logger.warning(
            "[CONFIG] ANALYSIS_DELAY_SECONDS=%r is not a number, using %.1f",
            raw,
            DEFAULT_ANALYSIS_DELAY_SECONDS,
        )
        return DEFAULT_ANALYSIS_DELAY_SECONDS
    if value < 0:
        logger.warning(
            "[CONFIG] ANALYSIS_DELAY_SECONDS=%r is negative, using %.1f",
            raw,
            DEFAULT_ANALYSIS_DELAY_SECONDS,
        )
        return DEFAULT_ANALYSIS_DELAY_SECONDS
    return value


def _read_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


# Simulated latency before each analysis (stand-in for a remote call)
ANALYSIS_DELAY_SECONDS: float = _read_delay()

HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

CORS_ORIGINS: list[str] = _read_origins()


def log_config_status() -> None:
    """Print effective configuration to stdout for startup visibility."""
    print(f"[CONFIG] Analysis delay: {ANALYSIS_DELAY_SECONDS:.1f}s")
    print(f"[CONFIG] Debug mode: {DEBUG}")
    print(f"[CONFIG] CORS origins: {', '.join(CORS_ORIGINS)}")
