"""
Injectable clock, id generator and delay strategies.

Handlers never call datetime.now(), uuid or asyncio.sleep directly; they go
through these so tests can pin time, ids and latency.
"""

import asyncio
import secrets
import uuid
from datetime import datetime, timezone
from typing import Callable, Awaitable

from config.settings import SIMULATE_LATENCY, LATENCY_SCALE

Clock = Callable[[], datetime]
DelayStrategy = Callable[[float], Awaitable[None]]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IdGenerator:
    """
    Synthetic identifiers for records and narratives.

    token("TXN") -> "TXN1718000000000A1B2C3D4": prefix, epoch millis from the
    injected clock, then 8 uppercase hex chars from uuid4 so two calls in
    the same millisecond still differ.
    """

    def __init__(self, clock: Clock = utc_now):
        self.clock = clock

    def millis(self) -> int:
        return int(self.clock().timestamp() * 1000)

    def token(self, prefix: str) -> str:
        return f"{prefix}{self.millis()}{uuid.uuid4().hex[:8].upper()}"

    def ledger_hash(self) -> str:
        return "0x" + secrets.token_hex(32)

    def block_number(self) -> int:
        return 1_000_000 + secrets.randbelow(1_000_000)


async def simulated_delay(seconds: float) -> None:
    """Sleep for a handler's nominal latency scaled by LATENCY_SCALE."""
    if seconds > 0 and LATENCY_SCALE > 0:
        await asyncio.sleep(seconds * LATENCY_SCALE)


async def no_delay(seconds: float) -> None:
    return None


def default_delay() -> DelayStrategy:
    return simulated_delay if SIMULATE_LATENCY else no_delay
