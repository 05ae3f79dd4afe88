"""
Timing utilities for the estimation pipeline.

Context managers that print how long each stage and each full analysis
take, in a single ``[TIMING]`` line format.
"""

import time
from contextlib import asynccontextmanager, contextmanager
from typing import Optional


def log_timing(stage: str, action: str, duration_ms: Optional[float] = None):
    """Log a timing event in standard format."""
    if duration_ms is not None:
        print(f"[TIMING] {stage}: {action} - duration={duration_ms:.0f}ms")
    else:
        print(f"[TIMING] {stage}: {action}")


@contextmanager
def sync_timer(stage: str, action: str = "STAGE"):
    """Time a synchronous block."""
    start = time.perf_counter()
    try:
        yield
    finally:
        log_timing(stage, f"{action} END", (time.perf_counter() - start) * 1000)


@asynccontextmanager
async def async_timer(stage: str, action: str = "ANALYSIS"):
    """Time an async block, including any awaited delay inside it."""
    log_timing(stage, f"{action} START")
    start = time.perf_counter()
    try:
        yield
    finally:
        log_timing(stage, f"{action} END", (time.perf_counter() - start) * 1000)
