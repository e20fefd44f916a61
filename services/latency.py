"""Simulated network latency for the mock directories."""

from __future__ import annotations

import asyncio


async def simulate_delay(seconds: float) -> None:
    """Sleep for *seconds*; a no-op when latency is disabled (0)."""
    if seconds > 0:
        await asyncio.sleep(seconds)
