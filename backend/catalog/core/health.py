"""Health Probe — timeout-guarded ping of the catalog store.

Invariants:
    - Resolves exactly once: OK if ping returns within the window, KO otherwise
    - A ping still running when the window elapses is cancelled; its late
      completion can never change the result
    - Never raises for a store failure (Exception → KO)

Design Decisions:
    - asyncio.wait_for over a manual future + "is complete" guard: the single
      resolution falls out of awaiting one coroutine once
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from catalog.core.domain_types import HealthStatus

logger = logging.getLogger(__name__)


async def check_health(
    ping: Callable[[], Awaitable[None]], timeout_seconds: float,
) -> HealthStatus:
    """Run ping with a bounded wait and map the outcome to a HealthStatus."""
    try:
        await asyncio.wait_for(ping(), timeout=timeout_seconds)
    except asyncio.TimeoutError:
        logger.warning(f"Health ping timed out after {timeout_seconds}s")
        return HealthStatus.KO
    except Exception as e:
        logger.warning(f"Health ping failed: {e}")
        return HealthStatus.KO
    return HealthStatus.OK
