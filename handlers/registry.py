"""
Handler registration and the shared pieces every handler uses.

Handlers are plain async functions registered with @handler(name, latency).
They receive validated typed params, the acting user, the role and an
ExecutionContext; they return a FunctionResult and may raise, since the
executor owns the failure boundary.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Awaitable, Dict, Optional

from models import FunctionName, FunctionResult, UserProfile
from function_params import FunctionParams
from record_store import RecordStore, InMemoryRecordStore
from providers import Clock, DelayStrategy, IdGenerator, utc_now, no_delay

HandlerFn = Callable[[FunctionParams, UserProfile, str, "ExecutionContext"], Awaitable[FunctionResult]]


@dataclass
class ExecutionContext:
    store: RecordStore = field(default_factory=InMemoryRecordStore)
    clock: Clock = utc_now
    ids: Optional[IdGenerator] = None
    delay: DelayStrategy = no_delay

    def __post_init__(self):
        if self.ids is None:
            self.ids = IdGenerator(self.clock)

    def now(self) -> datetime:
        return self.clock()

    def days_from_now(self, days: float) -> datetime:
        return self.clock() + timedelta(days=days)


@dataclass(frozen=True)
class FunctionHandler:
    name: FunctionName
    run: HandlerFn
    latency: float                 # nominal seconds, scaled by the delay strategy


FUNCTION_HANDLERS: Dict[FunctionName, FunctionHandler] = {}


def handler(name: FunctionName, latency: float):
    """Register the decorated coroutine as the handler for *name*."""
    def decorator(fn: HandlerFn) -> HandlerFn:
        FUNCTION_HANDLERS[name] = FunctionHandler(name, fn, latency)
        return fn
    return decorator


# ─────────────────────────────────────────────
# Narrative formatting
# ─────────────────────────────────────────────

def fmt_date(moment: datetime) -> str:
    return moment.strftime("%d/%m/%Y")


def fmt_datetime(moment: datetime) -> str:
    return moment.strftime("%d/%m/%Y, %I:%M %p")


def fmt_time(moment: datetime) -> str:
    return moment.strftime("%I:%M:%S %p")


def format_inr(amount) -> str:
    """₹ with Indian digit grouping: 1250000 -> ₹12,50,000."""
    value = int(amount)
    digits = str(abs(value))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups) + "," + tail
    return f"{'-' if value < 0 else ''}₹{digits}"


def humanize(slug: str) -> str:
    return (slug or "").replace("_", " ")
